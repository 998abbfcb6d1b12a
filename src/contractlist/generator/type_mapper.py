"""Maps Solidity ABI type strings onto the contract-list value types.

The UI only distinguishes a handful of value types, so the mapping is lossy:
every integer width except `uint8` collapses to `uint256` (signed integers
included), byte strings are edited as hex strings, and arrays of anything
other than addresses, uint256 or tuples become a single string field.
"""
from __future__ import annotations

import re

_ARRAY_TYPES = {
    "address": "address[]",
    "uint256": "uint256[]",
    "tuple": "tuple[]",
}

_EXACT_TYPES = {"address", "bool", "string", "tuple", "uint8"}

_UINT_WIDE = re.compile(r"^uint(16|32|64|128|256)$")
_INT_ANY = re.compile(r"^int\d*$")


def map_abi_type(abi_type: str) -> str:
    """Resolves an ABI type string to one of the contract-list value types.

    Never raises: unknown types resolve to "string".

    Args:
        abi_type: The Solidity ABI type, e.g. "uint128", "address[]", "bytes32".

    Returns:
        One of "address", "address[]", "uint256", "uint256[]", "uint8",
        "bool", "string", "tuple" or "tuple[]".
    """
    if abi_type.endswith("[]"):
        base = map_abi_type(abi_type[:-2])
        return _ARRAY_TYPES.get(base, "string")

    if abi_type in _EXACT_TYPES:
        return abi_type
    if _UINT_WIDE.match(abi_type) or _INT_ANY.match(abi_type):
        return "uint256"

    # Other sizes fall back on their family
    if abi_type.startswith("uint") or abi_type.startswith("int"):
        return "uint256"
    return "string"
