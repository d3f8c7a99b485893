"""
SynTree exception classes and error records.

This package provides all exception types and the validation error record
used throughout SynTree for consistent error handling and reporting.
"""

from syntree.exceptions.core import (
    CannotRemoveRootError,
    DuplicateNodeIdError,
    EmptyInputError,
    ErrorDetails,
    ErrorLevel,
    InputError,
    InvalidMoveError,
    InvalidPatchError,
    NodeNotFoundError,
    SynTreeError,
    TreeError,
    TreeErrorCode,
    TreeStructureError,
    TreeValidationError,
    UnsupportedLanguageError,
)

__all__ = [
    "SynTreeError",
    "InputError",
    "EmptyInputError",
    "UnsupportedLanguageError",
    "TreeStructureError",
    "NodeNotFoundError",
    "CannotRemoveRootError",
    "DuplicateNodeIdError",
    "InvalidMoveError",
    "InvalidPatchError",
    "TreeValidationError",
    "TreeError",
    "TreeErrorCode",
    "ErrorDetails",
    "ErrorLevel",
]
