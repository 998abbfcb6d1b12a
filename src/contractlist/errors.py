from __future__ import annotations

from typing import List


class ContractListError(Exception):
    """
    Base class for all contractlist errors.

    This exception serves as the root of the contractlist error hierarchy.
    """
    pass


class InvalidAbiError(ContractListError):
    """
    Raised when an ABI input is malformed.

    Examples include unparsable JSON, an ABI that is not an array after
    unwrapping an `{"abi": [...]}` artifact, or an entry that is not an object.
    """
    pass


class DocumentShapeError(ContractListError):
    """
    Raised when a contract-list document drifts from the generated shape.

    Typically a function entry carrying zero or several function-name keys,
    or a label that is not a string. The whole document should be treated
    as untrustworthy.
    """
    pass


class SchemaValidationError(ContractListError):
    """
    Raised when a document fails JSON-Schema validation.

    Attributes:
        errors: The validation issues reported by the validator.
    """

    def __init__(self, message: str, errors: List | None = None):
        """
        Initialize a SchemaValidationError.

        Args:
            message: Description of the error.
            errors: Optional list of validation issues.
        """
        super().__init__(message)
        self.errors = errors or []


class InvalidParameterError(ContractListError):
    """
    Raised when a provided parameter is invalid or malformed.

    For instance a contract address that is not a valid Ethereum address.
    """
    pass

