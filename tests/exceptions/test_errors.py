"""
Tests for error records and exception formatting.

This module tests TreeError records, ErrorLevel-dependent formatting and the
messages and attributes of every exception type.
"""

from syntree.exceptions import (
    CannotRemoveRootError,
    EmptyInputError,
    ErrorDetails,
    ErrorLevel,
    InputError,
    InvalidMoveError,
    NodeNotFoundError,
    SynTreeError,
    TreeError,
    TreeErrorCode,
    TreeStructureError,
    TreeValidationError,
    UnsupportedLanguageError,
)


def missing_np() -> TreeError:
    return TreeError(
        code=TreeErrorCode.MISSING_REQUIRED_PHRASE,
        message="Missing required phrase: NP",
        details=ErrorDetails(phrase_type="NP", expected=["NP", "VP"], actual=["VP"]),
    )


class TestTreeErrorCode:
    """Tests for the stable error-code vocabulary."""

    def test_codes_match_their_names(self):
        """Codes serialize to their own names."""
        for code in TreeErrorCode:
            assert code.value == code.name

    def test_vocabulary_is_complete(self):
        """All seven boundary codes exist."""
        assert {code.value for code in TreeErrorCode} == {
            "INVALID_PHRASE_ORDER",
            "MISSING_REQUIRED_PHRASE",
            "INVALID_NODE_TYPE",
            "INVALID_CHILDREN_COUNT",
            "UNKNOWN_PHRASE_TYPE",
            "INVALID_TREE_STRUCTURE",
            "PARSING_ERROR",
        }


class TestTreeError:
    """Tests for TreeError formatting."""

    def test_user_level_shows_code_and_message(self):
        """USER level omits details."""
        text = missing_np().format(ErrorLevel.USER)
        assert text == "MISSING_REQUIRED_PHRASE: Missing required phrase: NP"

    def test_developer_level_adds_details(self):
        """DEVELOPER level appends the non-empty details."""
        text = missing_np().format(ErrorLevel.DEVELOPER)
        assert "phrase_type='NP'" in text
        assert "position" not in text

    def test_details_default_to_empty(self):
        """A record without details formats identically at both levels."""
        error = TreeError(code=TreeErrorCode.PARSING_ERROR, message="bad")
        assert error.format(ErrorLevel.DEVELOPER) == error.format(ErrorLevel.USER)

    def test_record_serializes_code_as_string(self):
        """Records dump to plain JSON-compatible data."""
        data = missing_np().model_dump(mode="json")
        assert data["code"] == "MISSING_REQUIRED_PHRASE"
        assert data["details"]["actual"] == ["VP"]


class TestTreeValidationError:
    """Tests for the aggregate validation failure."""

    def test_carries_every_error(self):
        """The full list is preserved in order."""
        errors = [missing_np(), TreeError(code=TreeErrorCode.PARSING_ERROR, message="x")]
        exc = TreeValidationError(errors)
        assert exc.errors == errors
        assert exc.codes == [TreeErrorCode.MISSING_REQUIRED_PHRASE, TreeErrorCode.PARSING_ERROR]
        assert "2 error(s)" in str(exc)

    def test_message_respects_error_level(self):
        """Developer-level aggregates include details."""
        exc = TreeValidationError([missing_np()], error_level=ErrorLevel.DEVELOPER)
        assert "expected=" in str(exc)


class TestExceptionHierarchy:
    """Tests for exception types and messages."""

    def test_input_errors(self):
        """Input errors share a base and convert to PARSING_ERROR records."""
        exc = EmptyInputError()
        assert isinstance(exc, InputError)
        assert isinstance(exc, SynTreeError)
        record = exc.to_tree_error()
        assert record.code == TreeErrorCode.PARSING_ERROR
        assert "Empty input" in record.message

    def test_unsupported_language_lists_supported(self):
        """The supported codes appear in the message when provided."""
        exc = UnsupportedLanguageError("xx", supported=["en", "es"])
        assert exc.language == "xx"
        assert "en, es" in str(exc)

    def test_structural_errors(self):
        """Structural errors keep the offending ids."""
        not_found = NodeNotFoundError("n9")
        root = CannotRemoveRootError("root")
        move = InvalidMoveError("a", "b", "cycle")
        for exc in (not_found, root, move):
            assert isinstance(exc, TreeStructureError)
        assert not_found.node_id == "n9"
        assert "root" in str(root)
        assert move.new_parent_id == "b"
        assert "cycle" in str(move)
