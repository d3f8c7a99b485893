"""
Exception classes and error records for SynTree.

This module defines the error-code vocabulary shared across the system
boundary, the TreeError record produced by validation, and the exception
types raised for input errors (bad sentence, unsupported language) and
structural errors (missing node, illegal root removal).
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ErrorLevel(Enum):
    """Error message detail level for end users vs developers."""

    USER = "user"  # Code and message only
    DEVELOPER = "developer"  # Adds node ids, positions and expected/actual values


class TreeErrorCode(str, Enum):
    """Stable error codes reported by parsing and validation."""

    INVALID_PHRASE_ORDER = "INVALID_PHRASE_ORDER"
    MISSING_REQUIRED_PHRASE = "MISSING_REQUIRED_PHRASE"
    INVALID_NODE_TYPE = "INVALID_NODE_TYPE"
    INVALID_CHILDREN_COUNT = "INVALID_CHILDREN_COUNT"
    UNKNOWN_PHRASE_TYPE = "UNKNOWN_PHRASE_TYPE"
    INVALID_TREE_STRUCTURE = "INVALID_TREE_STRUCTURE"
    PARSING_ERROR = "PARSING_ERROR"


class ErrorDetails(BaseModel):
    """
    Location and expectation details attached to a TreeError.

    Params:
        node_id: Id of the offending node, when one node is to blame
        phrase_type: Phrase tag the finding concerns
        expected: What the grammar expected (bound, tag set, order)
        actual: What the tree contains
        position: Index among siblings
    """

    model_config = ConfigDict(frozen=True)

    node_id: str | None = None
    phrase_type: str | None = None
    expected: Any = None
    actual: Any = None
    position: int | None = None

    def format(self) -> str:
        parts = [
            f"{name}={value!r}"
            for name, value in self.model_dump(exclude_none=True).items()
        ]
        return ", ".join(parts)


class TreeError(BaseModel):
    """A single validation finding. Findings are data, not faults."""

    model_config = ConfigDict(frozen=True)

    code: TreeErrorCode
    message: str
    details: ErrorDetails = Field(default_factory=ErrorDetails)

    def format(self, error_level: ErrorLevel = ErrorLevel.USER) -> str:
        """
        Format the finding for display.

        Params:
            error_level: Whether to show USER or DEVELOPER level details

        Returns:
            ``CODE: message`` optionally followed by the details
        """
        text = f"{self.code.value}: {self.message}"
        if error_level == ErrorLevel.DEVELOPER:
            details = self.details.format()
            if details:
                text = f"{text} ({details})"
        return text


class SynTreeError(Exception):
    """Base exception for all SynTree errors."""

    pass


class InputError(SynTreeError):
    """Base exception for rejected parser input. No partial tree is produced."""

    def to_tree_error(self) -> TreeError:
        """Express this failure as a PARSING_ERROR record."""
        return TreeError(code=TreeErrorCode.PARSING_ERROR, message=str(self))


class EmptyInputError(InputError):
    """Raised when a sentence or token sequence contains nothing to parse."""

    def __init__(self, reason: str = "input contains no words"):
        """
        Initialize the exception.

        Params:
            reason: What was empty
        """
        self.reason = reason
        super().__init__(f"Empty input: {reason}")


class UnsupportedLanguageError(InputError):
    """Raised when no grammar or lexicon exists for a language identifier."""

    def __init__(self, language: str, supported: list[str] | None = None):
        """
        Initialize the exception.

        Params:
            language: The language identifier that was requested
            supported: Supported codes, listed in the message when given
        """
        self.language = language
        self.supported = supported or []
        message = f"Unsupported language: '{language}'"
        if self.supported:
            message += f" (supported: {', '.join(self.supported)})"
        super().__init__(message)


class TreeStructureError(SynTreeError):
    """Base exception for rejected tree operations. The input tree is untouched."""

    pass


class NodeNotFoundError(TreeStructureError):
    """Raised when no node in the tree carries the requested id."""

    def __init__(self, node_id: str):
        """
        Initialize the exception.

        Params:
            node_id: The id that was looked up
        """
        self.node_id = node_id
        super().__init__(f"Node with id '{node_id}' not found")


class CannotRemoveRootError(TreeStructureError):
    """Raised when removal of the root node is requested."""

    def __init__(self, node_id: str):
        """
        Initialize the exception.

        Params:
            node_id: The root node id
        """
        self.node_id = node_id
        super().__init__(f"Cannot remove root node '{node_id}'")


class DuplicateNodeIdError(TreeStructureError):
    """Raised when an operation would give two nodes the same id."""

    def __init__(self, node_id: str):
        """
        Initialize the exception.

        Params:
            node_id: The id that already exists in the tree
        """
        self.node_id = node_id
        super().__init__(f"Node id '{node_id}' already exists in the tree")


class InvalidMoveError(TreeStructureError):
    """Raised when a move would detach the root or create a cycle."""

    def __init__(self, node_id: str, new_parent_id: str, reason: str):
        """
        Initialize the exception.

        Params:
            node_id: The node that was to be moved
            new_parent_id: The requested new parent
            reason: Why the move is impossible
        """
        self.node_id = node_id
        self.new_parent_id = new_parent_id
        self.reason = reason
        super().__init__(
            f"Cannot move node '{node_id}' under '{new_parent_id}': {reason}"
        )


class InvalidPatchError(TreeStructureError):
    """Raised when a node update carries fields that cannot be patched."""

    def __init__(self, node_id: str, reason: str):
        """
        Initialize the exception.

        Params:
            node_id: The node the patch targeted
            reason: Why the patch was rejected
        """
        self.node_id = node_id
        self.reason = reason
        super().__init__(f"Invalid update for node '{node_id}': {reason}")


class TreeValidationError(SynTreeError):
    """Raised by fail-fast entry points when validation finds problems."""

    def __init__(
        self, errors: list[TreeError], error_level: ErrorLevel = ErrorLevel.USER
    ):
        """
        Initialize the exception.

        Params:
            errors: Every finding of the validation pass, in report order
            error_level: Level of detail to show in the error message
        """
        self.errors = list(errors)
        self.error_level = error_level
        summary = self.format(error_level)
        super().__init__(f"Tree validation failed with {len(self.errors)} error(s)\n{summary}")

    @property
    def codes(self) -> list[TreeErrorCode]:
        return [error.code for error in self.errors]

    def format(self, error_level: ErrorLevel = ErrorLevel.USER) -> str:
        return "\n".join(error.format(error_level) for error in self.errors)
