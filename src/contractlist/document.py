"""Reads and normalizes contract-list documents.

Documents are produced by the generator or written by hand, and their JSON
shape carries two ambiguities this module resolves in one place:

  - A function entry names its function through a dynamic key
    (`{"deposit": "Deposit", "arguments": [...]}`). `decode_function_entry`
    turns it into a `FunctionEntry` and `encode_function_entry` writes it back.
  - A function's `arguments` are either a flat list of arguments or a list of
    `{group, fields}` groups. Grouping is purely presentational: flattening
    always yields the arguments in declaration order.

It also resolves which contract address a factory targets when both a
hardcoded address and an address form field are available.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from pydantic import BaseModel, ValidationError

from contractlist.errors import DocumentShapeError
from contractlist.types import (
    Argument,
    ArgumentGroup,
    ArgumentList,
    Factory,
    FactoryFunction,
    FlatArguments,
    FunctionEntry,
    GasEstimationConfig,
    GroupedArguments,
    PreviewConfig,
    ResultStrategy,
    TargetAddressConfig,
    WizardConfig,
)

RESERVED_FUNCTION_KEYS = ("simulate", "resultStrategies", "arguments", "wizard", "preview", "gasEstimation")

DEFAULT_GROUP_LABEL = "Parameters"

FactoryLike = Union[Factory, Mapping[str, Any]]


# --- Argument grouping ----------------------------------------------------------

def _is_group(item: Any) -> bool:
    if isinstance(item, ArgumentGroup):
        return True
    return isinstance(item, Mapping) and "group" in item and "fields" in item


def _group_fields(group: Any) -> List[Any]:
    if isinstance(group, ArgumentGroup):
        return list(group.fields)
    if not _is_group(group):
        raise DocumentShapeError("Invalid arguments: grouped list mixes groups and plain arguments")
    return list(group["fields"])


def is_grouped_arguments(arguments: Optional[Sequence[Any]]) -> bool:
    """Tells whether an `arguments` value is a list of argument groups.

    Only the first element is probed: it must carry both a `group` and a
    `fields` key.
    """
    if not arguments:
        return False
    return _is_group(arguments[0])


def flatten_arguments(arguments: Optional[Sequence[Any]]) -> List[Any]:
    """Returns the arguments of a flat or grouped list, in field order."""
    if not arguments:
        return []
    if is_grouped_arguments(arguments):
        return [arg for group in arguments for arg in _group_fields(group)]
    return list(arguments)


def get_argument_groups(arguments: Optional[Sequence[Any]]) -> List[Any]:
    """Returns the arguments as groups.

    A flat list is wrapped in a single "Parameters" group so renderers can
    walk every function the same way.
    """
    if not arguments:
        return []
    if is_grouped_arguments(arguments):
        return list(arguments)
    return [{"group": DEFAULT_GROUP_LABEL, "fields": list(arguments)}]


def parse_arguments(arguments: Optional[Sequence[Any]]) -> Optional[ArgumentList]:
    """Parses a wire `arguments` value into a flat or grouped variant.

    Raises:
        DocumentShapeError: If an argument or group is malformed.
    """
    if arguments is None:
        return None
    try:
        if is_grouped_arguments(arguments):
            return GroupedArguments(groups=[ArgumentGroup.model_validate(group) for group in arguments])
        return FlatArguments(items=[Argument.model_validate(arg) for arg in arguments])
    except ValidationError as e:
        raise DocumentShapeError(f"Invalid arguments: {e}") from e


# --- Function entries -----------------------------------------------------------

def encode_function_entry(entry: FunctionEntry) -> Dict[str, Any]:
    """Writes a function entry in its wire form."""
    wire: Dict[str, Any] = {entry.functionName: entry.label}
    if entry.arguments is not None:
        wire["arguments"] = entry.arguments.to_wire()
    if entry.simulate is not None:
        wire["simulate"] = entry.simulate
    if entry.resultStrategies is not None:
        wire["resultStrategies"] = [strategy.to_dict() for strategy in entry.resultStrategies]
    for key in ("wizard", "preview", "gasEstimation"):
        value = getattr(entry, key)
        if value is not None:
            wire[key] = value.to_dict()
    return wire


def decode_function_entry(entry: Mapping[str, Any]) -> FunctionEntry:
    """Reads a function entry from its wire form.

    Args:
        entry: The JSON object of one function entry.

    Returns:
        The decoded entry.

    Raises:
        DocumentShapeError: If the entry does not hold exactly one non-reserved
            key, if its value is not a string, or if the metadata is malformed.
    """
    if not isinstance(entry, Mapping):
        raise DocumentShapeError(f"Invalid function entry: expected an object, got {type(entry).__name__}")

    names = [key for key in entry if key not in RESERVED_FUNCTION_KEYS]
    if len(names) != 1:
        raise DocumentShapeError(
            f"Invalid function entry: Expected exactly one function name-label pair, got {len(names)}"
        )

    function_name = names[0]
    label = entry[function_name]
    if not isinstance(label, str):
        raise DocumentShapeError(f"Invalid function entry: label of '{function_name}' must be a string")

    try:
        return FunctionEntry(
            functionName=function_name,
            label=label,
            simulate=entry.get("simulate"),
            resultStrategies=_validate_all(ResultStrategy, entry.get("resultStrategies")),
            arguments=parse_arguments(entry.get("arguments")),
            wizard=_validate_one(WizardConfig, entry.get("wizard")),
            preview=_validate_one(PreviewConfig, entry.get("preview")),
            gasEstimation=_validate_one(GasEstimationConfig, entry.get("gasEstimation")),
        )
    except ValidationError as e:
        raise DocumentShapeError(f"Invalid function entry '{function_name}': {e}") from e


def _validate_one(model: type, value: Any) -> Any:
    return None if value is None else model.model_validate(value)


def _validate_all(model: type, values: Optional[Iterable[Any]]) -> Any:
    return None if values is None else [model.model_validate(value) for value in values]


# --- Factories ------------------------------------------------------------------

def _get(factory: FactoryLike, key: str) -> Any:
    if isinstance(factory, Mapping):
        return factory.get(key)
    return getattr(factory, key, None)


def decode_factory(factory: Mapping[str, Any]) -> Factory:
    """Reads a factory and all its function entries from their wire form.

    Raises:
        DocumentShapeError: If the factory or one of its entries is malformed.
    """
    if not isinstance(factory, Mapping):
        raise DocumentShapeError(f"Invalid factory: expected an object, got {type(factory).__name__}")

    data = dict(factory)
    functions = data.pop("functions", [])
    if not isinstance(functions, list):
        raise DocumentShapeError("Invalid factory: 'functions' must be an array")

    try:
        decoded = Factory.model_validate(data)
    except ValidationError as e:
        raise DocumentShapeError(f"Invalid factory: {e}") from e
    decoded.functions = [decode_function_entry(entry) for entry in functions]
    return decoded


def encode_factory(factory: Factory) -> Dict[str, Any]:
    """Writes a factory and its function entries in their wire form."""
    wire = factory.model_dump(mode="json", exclude_none=True, exclude={"functions"})
    wire["functions"] = [encode_function_entry(entry) for entry in factory.functions]
    return wire


def decode_document(document: Any) -> List[Factory]:
    """Reads a whole contract-list document.

    Raises:
        DocumentShapeError: If the document is not an array of factories.
    """
    if not isinstance(document, list):
        raise DocumentShapeError("Invalid document: expected an array of factories")
    return [decode_factory(factory) for factory in document]


def get_factories(document: Sequence[FactoryLike], chain_id: int) -> List[FactoryLike]:
    """Returns the factories available on a chain.

    A factory matches on its `chainId` or, for chain-agnostic factories, on
    its `supportedChains` list.
    """
    return [
        factory for factory in document
        if _get(factory, "chainId") == chain_id or chain_id in (_get(factory, "supportedChains") or [])
    ]


def get_factory_functions(factory: FactoryLike) -> List[FactoryFunction]:
    """Lists the callable functions of a factory with flattened arguments.

    Raises:
        DocumentShapeError: If a function entry is malformed.
    """
    result = []
    for entry in _get(factory, "functions") or []:
        if not isinstance(entry, FunctionEntry):
            entry = decode_function_entry(entry)
        args = entry.arguments.flatten() if entry.arguments is not None else []
        result.append(FactoryFunction(functionName=entry.functionName, label=entry.label, args=args))
    return result


# --- Address resolution ---------------------------------------------------------

def get_target_address_config(factory: FactoryLike) -> Optional[TargetAddressConfig]:
    """Returns the factory's address field binding, normalized to a config.

    A bare field name `"vault"` becomes `TargetAddressConfig(field="vault")`.
    """
    target = _get(factory, "targetAddressArg")
    if target is None:
        return None
    if isinstance(target, str):
        return TargetAddressConfig(field=target)
    if isinstance(target, TargetAddressConfig):
        return target
    if isinstance(target, BaseModel):
        target = target.model_dump()
    try:
        return TargetAddressConfig.model_validate(target)
    except ValidationError as e:
        raise DocumentShapeError(f"Invalid targetAddressArg: {e}") from e


def get_target_address_field(factory: FactoryLike) -> Optional[str]:
    """Returns the name of the form field holding the target address, if any."""
    config = get_target_address_config(factory)
    return config.field if config is not None else None


def resolve_target_address(
    factory: FactoryLike,
    *,
    address: Optional[str] = None,
    form_values: Optional[Mapping[str, Any]] = None,
) -> Optional[str]:
    """Resolves the contract address a factory's calls go to.

    Sources are tried in a fixed order, whichever of them are present:

      1. `address`, an explicit override supplied by the caller.
      2. The value of the factory's `targetAddressArg` field in `form_values`.
      3. The factory's hardcoded `address`.

    Args:
        factory: The factory, decoded or in wire form.
        address: Optional override address.
        form_values: Current form values keyed by field name.

    Returns:
        The address, or None when no source provides one. Callers typically
        render an address input in that case.
    """
    if address:
        return address

    field = get_target_address_field(factory)
    if field is not None and form_values:
        value = form_values.get(field)
        if value:
            return value

    return _get(factory, "address") or None
