"""Generates a contract-list document from a contract ABI."""
from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ValidationError

from contractlist.document import RESERVED_FUNCTION_KEYS, encode_factory
from contractlist.errors import InvalidAbiError
from contractlist.generator.converter import convert_function, should_include_function
from contractlist.types import AbiFunction, Factory

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


class GenerateOptions(BaseModel):
    """Settings of one generation run.

    Attributes:
        abi: The contract ABI entries.
        chainId: Chain the factory is deployed on.
        name: Display name of the factory.
        hookName: Hook name; defaults to `name` without whitespace.
        includeViewFunctions: Also emit entries for view functions.
        includePureFunctions: Also emit entries for pure functions.
    """
    abi: List[AbiFunction]
    chainId: int
    name: str
    hookName: Optional[str] = None
    includeViewFunctions: bool = False
    includePureFunctions: bool = False


def load_abi(data: Any) -> List[AbiFunction]:
    """Parses ABI JSON data into ABI entries.

    Accepts either a bare ABI array or a build artifact carrying it under
    an "abi" key.

    Args:
        data: Decoded JSON.

    Returns:
        The parsed ABI entries.

    Raises:
        InvalidAbiError: If no ABI array is found or an entry is malformed.
    """
    abi = data if isinstance(data, list) else (data.get("abi") if isinstance(data, dict) else None)
    if not isinstance(abi, list):
        raise InvalidAbiError('ABI must be an array or an object with an "abi" property')

    try:
        return [AbiFunction.model_validate(entry) for entry in abi]
    except ValidationError as e:
        raise InvalidAbiError(f"Malformed ABI entry: {e}") from e


def generate_contract_list(options: GenerateOptions) -> List[Dict[str, Any]]:
    """Builds a one-factory contract-list document from an ABI.

    Functions named like a reserved entry key ("arguments", "simulate", ...)
    cannot be written as an entry and are skipped with a warning.

    Args:
        options: The generation settings.

    Returns:
        The document, a list holding one factory in wire form.
    """
    functions = []
    for fn in options.abi:
        if not should_include_function(
            fn,
            include_view_functions=options.includeViewFunctions,
            include_pure_functions=options.includePureFunctions,
        ):
            continue
        # a reserved name would collide with the entry's metadata keys
        if fn.name in RESERVED_FUNCTION_KEYS:
            logger.warning("Skipping function '%s': its name is a reserved entry key", fn.name)
            continue
        functions.append(convert_function(fn))

    if not functions:
        logger.warning(
            "No write functions found in ABI. Use --include-view or --include-pure to include read functions."
        )

    factory = Factory(
        chainId=options.chainId,
        hookName=options.hookName or _WHITESPACE.sub("", options.name),
        name=options.name,
        functions=functions,
    )
    return [encode_factory(factory)]
