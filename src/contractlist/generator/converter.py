"""Converts ABI parameters and functions into contract-list records."""
from __future__ import annotations

from typing import Any, Dict, Optional

from contractlist.generator.humanize import humanize
from contractlist.generator.type_mapper import map_abi_type
from contractlist.generator.widgets import DEFAULT_WIDGET, infer_ui_config, infer_widget
from contractlist.types import AbiFunction, AbiParameter, Argument, FlatArguments, FunctionEntry

TUPLE_TYPES = ("tuple", "tuple[]")

ARRAY_UI = {"addLabel": "Add Item", "removeLabel": "Remove"}


def build_ui(name: str, value_type: str) -> Optional[Dict[str, Any]]:
    """Infers the `ui` block of a parameter.

    Returns None when the block would only say `{"widget": "text"}`, which is
    what a renderer assumes anyway.
    """
    widget = infer_widget(name, value_type)
    ui: Dict[str, Any] = {"widget": widget, **infer_ui_config(name, value_type, widget)}
    if len(ui) > 1 or widget != DEFAULT_WIDGET:
        return ui
    return None


def _convert(param: AbiParameter, default_name: str, default_label: str) -> Dict[str, Any]:
    value_type = map_abi_type(param.type)
    argument: Dict[str, Any] = {
        "name": param.name or default_name,
        "type": value_type,
        "description": humanize(param.name or default_label),
    }
    ui = build_ui(param.name or "", value_type)
    if ui is not None:
        argument["ui"] = ui
    return argument


def convert_parameter(param: AbiParameter) -> Argument:
    """Converts one ABI input into an argument.

    Tuple members become `components`, converted one level deep: a member
    that is itself a tuple keeps its mapped type but not its own members.
    Tuple arrays also get add/remove labels under `ui.array`.

    Args:
        param: The ABI parameter.

    Returns:
        The argument record.
    """
    argument = _convert(param, "unnamed", "Parameter")

    value_type = argument["type"]
    if value_type in TUPLE_TYPES and param.components:
        argument["components"] = [_convert(comp, "field", "Field") for comp in param.components]
        if value_type == "tuple[]":
            argument["ui"] = {**argument.get("ui", {}), "array": dict(ARRAY_UI)}

    return Argument.model_validate(argument)


def convert_function(fn: AbiFunction) -> FunctionEntry:
    """Converts one ABI function into a function entry.

    Payable functions are flagged for simulation so the value transfer can be
    previewed before sending.
    """
    name = fn.name or ""
    args = [convert_parameter(param) for param in fn.inputs]
    return FunctionEntry(
        functionName=name,
        label=humanize(name),
        arguments=FlatArguments(items=args) if args else None,
        simulate=True if fn.stateMutability == "payable" else None,
    )


def effective_mutability(fn: AbiFunction) -> str:
    """Returns the declared state mutability, deriving it for legacy ABIs."""
    if fn.stateMutability:
        return fn.stateMutability
    return "view" if fn.constant else "nonpayable"


def should_include_function(
    fn: AbiFunction,
    *,
    include_view_functions: bool = False,
    include_pure_functions: bool = False,
) -> bool:
    """Decides whether an ABI entry gets a function entry.

    Only "function" entries qualify. Mutating functions are always included;
    view and pure functions only on request. An unknown mutability is treated
    as mutating.
    """
    if fn.type != "function":
        return False

    mutability = effective_mutability(fn)
    if mutability == "pure":
        return include_pure_functions
    if mutability == "view":
        return include_view_functions
    return True
