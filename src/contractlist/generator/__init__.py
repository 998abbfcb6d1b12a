"""Initializes the contract-list generator sub-package.

The generator turns a contract ABI into a contract-list document in a single
pass over its functions:

  - type_mapper: ABI type string -> UI value type.
  - humanize: identifier -> display label.
  - widgets: (name, value type) -> widget and widget configuration.
  - converter: ABI parameter/function -> argument/function entry.
  - generate: whole ABI -> one-factory document.
"""
from .type_mapper import map_abi_type
from .humanize import humanize
from .widgets import infer_widget, infer_ui_config
from .converter import convert_parameter, convert_function, should_include_function
from .generate import GenerateOptions, generate_contract_list, load_abi

__all__ = [
    "map_abi_type",
    "humanize",
    "infer_widget",
    "infer_ui_config",
    "convert_parameter",
    "convert_function",
    "should_include_function",
    "GenerateOptions",
    "generate_contract_list",
    "load_abi",
]
