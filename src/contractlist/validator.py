"""Validates contract-list documents against the bundled JSON Schema."""
from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List

import jsonschema
from pydantic import BaseModel

from contractlist.errors import SchemaValidationError

SCHEMA_PATH = Path(__file__).resolve().parent / "schema" / "contractlist.schema.json"


class ValidationIssue(BaseModel):
    """One schema violation.

    Attributes:
        path: JSON path of the offending value, e.g. "$[0].functions[1]".
        message: Human-readable description.
    """
    path: str
    message: str


class ValidationResult(BaseModel):
    valid: bool
    errors: List[ValidationIssue] = []


@lru_cache(maxsize=1)
def load_schema() -> Dict[str, Any]:
    """Loads the contract-list JSON Schema shipped with the package."""
    return json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))


@lru_cache(maxsize=1)
def _validator() -> jsonschema.Draft202012Validator:
    schema = load_schema()
    jsonschema.Draft202012Validator.check_schema(schema)
    return jsonschema.Draft202012Validator(schema, format_checker=jsonschema.Draft202012Validator.FORMAT_CHECKER)


def _json_path(error: jsonschema.ValidationError) -> str:
    path = "$"
    for part in error.absolute_path:
        path += f"[{part}]" if isinstance(part, int) else f".{part}"
    return path


def validate_contract_list(document: Any) -> ValidationResult:
    """Validates a contract-list document, collecting every violation.

    Args:
        document: Decoded JSON of the document.

    Returns:
        The validation result; `errors` is empty when `valid` is true.
    """
    errors = sorted(_validator().iter_errors(document), key=_json_path)
    issues = [ValidationIssue(path=_json_path(e), message=e.message) for e in errors]
    return ValidationResult(valid=not issues, errors=issues)


def assert_valid(document: Any) -> None:
    """Validates a document, raising when it has any violation.

    Raises:
        SchemaValidationError: If the document does not match the schema.
    """
    result = validate_contract_list(document)
    if not result.valid:
        raise SchemaValidationError(
            f"Contract list failed validation with {len(result.errors)} error(s)",
            result.errors,
        )
