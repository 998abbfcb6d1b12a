"""
contractlist Client Subpackage.

This package provides the optional on-chain readers that resolve `abiCall`
descriptors found in contract-list documents.
"""

from .base_client import BaseClient
from .option_reader import ContractFunctionOptions, OptionsSnapshot, OptionsState

__all__ = [
    "BaseClient",
    "ContractFunctionOptions",
    "OptionsSnapshot",
    "OptionsState",
]
