"""contractlist: declarative contract interaction documents.

Generates contract-list documents (factories of function entries with
rendering hints for each argument) from contract ABIs, and reads, normalizes
and validates such documents.
"""
from .errors import (
    ContractListError,
    InvalidAbiError,
    DocumentShapeError,
    SchemaValidationError,
    InvalidParameterError,
)
from .generator import GenerateOptions, generate_contract_list, load_abi
from .document import (
    RESERVED_FUNCTION_KEYS,
    is_grouped_arguments,
    flatten_arguments,
    get_argument_groups,
    parse_arguments,
    encode_function_entry,
    decode_function_entry,
    encode_factory,
    decode_factory,
    decode_document,
    get_factories,
    get_factory_functions,
    get_target_address_config,
    get_target_address_field,
    resolve_target_address,
)
from .options import (
    TokenGetters,
    create_token_getters,
    build_options_from_ui,
    resolve_label,
    normalize_arg_source,
    normalize_label_field,
)
from .validator import ValidationIssue, ValidationResult, validate_contract_list, assert_valid

__all__ = [
    # from .errors
    "ContractListError",
    "InvalidAbiError",
    "DocumentShapeError",
    "SchemaValidationError",
    "InvalidParameterError",

    # from .generator
    "GenerateOptions",
    "generate_contract_list",
    "load_abi",

    # from .document
    "RESERVED_FUNCTION_KEYS",
    "is_grouped_arguments",
    "flatten_arguments",
    "get_argument_groups",
    "parse_arguments",
    "encode_function_entry",
    "decode_function_entry",
    "encode_factory",
    "decode_factory",
    "decode_document",
    "get_factories",
    "get_factory_functions",
    "get_target_address_config",
    "get_target_address_field",
    "resolve_target_address",

    # from .options
    "TokenGetters",
    "create_token_getters",
    "build_options_from_ui",
    "resolve_label",
    "normalize_arg_source",
    "normalize_label_field",

    # from .validator
    "ValidationIssue",
    "ValidationResult",
    "validate_contract_list",
    "assert_valid",
]
