"""
Tests for tree validation.

Focus Areas:
1. Structural invariants (unique ids, sentence root)
2. Tag validity, required phrases and phrase order
3. Per-phrase arity and child types
4. Accumulation: every check runs, nothing short-circuits
"""

import pytest

from conftest import phrase, sentence, word
from syntree.exceptions import (
    ErrorLevel,
    TreeErrorCode,
    TreeValidationError,
    UnsupportedLanguageError,
)
from syntree.grammar import ENGLISH, RUSSIAN
from syntree.validation import is_valid, validate, validate_or_fail

C = TreeErrorCode


def codes(errors):
    return [error.code for error in errors]


def nouns(prefix, count):
    return [word(f"{prefix}{i}", "NOUN", f"n{i}") for i in range(count)]


class TestValidTrees:
    """Tests for trees without findings."""

    def test_the_cat_runs(self, cat_tree):
        """The reference tree is valid English."""
        assert validate(cat_tree, ENGLISH) == []
        assert is_valid(cat_tree, "english")

    def test_grammar_by_language_code(self, cat_tree):
        """Grammars may be named by language identifier."""
        assert validate(cat_tree, "es") == []

    def test_repeated_phrase_tags_are_in_order(self):
        """Equal order positions in sequence are fine."""
        tree = sentence(
            "r",
            phrase("np", "NP", word("a", "PRON", "I")),
            phrase("vp1", "VP", word("b", "AUX", "will")),
            phrase("vp2", "VP", word("c", "VERB", "run")),
        )
        assert validate(tree, ENGLISH) == []


class TestStructure:
    """Tests for id uniqueness and the root tag."""

    def test_duplicate_ids(self, cat_tree):
        """Each repeated id is reported once per repeat."""
        tree = sentence(
            "r",
            phrase("np", "NP", word("dup", "DET", "the"), word("dup", "NOUN", "cat")),
            phrase("vp", "VP", word("dup", "VERB", "runs")),
        )
        errors = [e for e in validate(tree, ENGLISH) if e.code == C.INVALID_TREE_STRUCTURE]
        assert len(errors) == 2
        assert {e.details.node_id for e in errors} == {"dup"}

    def test_root_must_be_sentence(self):
        """A phrase cannot serve as the root."""
        tree = phrase("np", "NP", word("w", "NOUN", "cat"))
        assert C.INVALID_TREE_STRUCTURE in codes(validate(tree, ENGLISH))

    def test_none_tree_is_a_programming_error(self):
        """Only programmer errors raise."""
        with pytest.raises(TypeError):
            validate(None, ENGLISH)

    def test_unsupported_grammar(self, cat_tree):
        """An unknown language cannot be validated against."""
        with pytest.raises(UnsupportedLanguageError):
            validate(cat_tree, "xx")


class TestTags:
    """Tests for tag validity."""

    def test_unknown_phrase_tag(self, cat_tree):
        """A root child outside the tag universe is reported once, with its position."""
        tree = sentence("r", *cat_tree.children, phrase("xp", "XP", word("w", "ADV", "very")))
        errors = validate(tree, ENGLISH)
        assert codes(errors) == [C.UNKNOWN_PHRASE_TYPE]
        assert errors[0].details.node_id == "xp"
        assert errors[0].details.position == 2

    def test_unknown_terminal_tag(self):
        """A terminal outside the universe in a ruled phrase is reported once."""
        tree = sentence(
            "r",
            phrase("np", "NP", word("a", "FOO", "blah")),
            phrase("vp", "VP", word("b", "VERB", "runs")),
        )
        errors = validate(tree, ENGLISH)
        assert codes(errors) == [C.INVALID_NODE_TYPE]
        assert errors[0].details.node_id == "a"
        assert errors[0].details.phrase_type == "NP"

    def test_unknown_terminal_under_unruled_phrase(self):
        """Without a phrase rule to catch it, the tag check reports the terminal."""
        tree = sentence(
            "r",
            phrase("np", "NP", word("a", "NOUN", "cat")),
            phrase("vp", "VP", word("b", "VERB", "runs")),
            phrase("u", "UNKNOWN", word("c", "FOO", "blah")),
        )
        invalid = [e for e in validate(tree, ENGLISH) if e.code == C.INVALID_NODE_TYPE]
        assert [e.details.node_id for e in invalid] == ["c"]

    def test_unknown_inner_phrase(self):
        """Nested nodes with children and an unknown tag are unknown phrases."""
        tree = sentence(
            "r",
            phrase("np", "NP", word("a", "NOUN", "cat")),
            phrase("vp", "VP", word("b", "VERB", "runs")),
            phrase("u", "UNKNOWN", phrase("xp", "XP", word("c", "ADV", "very"))),
        )
        unknown = [
            e for e in validate(tree, ENGLISH)
            if e.code == C.UNKNOWN_PHRASE_TYPE and e.details.node_id == "xp"
        ]
        assert len(unknown) == 1

    def test_unknown_words_are_reported_per_phrase(self):
        """Fallback UNKNOWN phrases each get an unknown phrase finding."""
        tree = sentence(
            "r",
            phrase("p0", "UNKNOWN", word("a", "UNKNOWN", "xyzzy")),
            phrase("p1", "UNKNOWN", word("b", "UNKNOWN", "plugh")),
        )
        unknown = [e for e in validate(tree, ENGLISH) if e.code == C.UNKNOWN_PHRASE_TYPE]
        assert sorted(e.details.node_id for e in unknown) == ["p0", "p1"]
        assert [e.details.position for e in unknown] == [0, 1]


class TestRequiredAndOrder:
    """Tests for required phrases and phrase order."""

    def test_missing_noun_phrase(self):
        """A lone VP lacks the required NP."""
        tree = sentence("r", phrase("vp", "VP", word("w", "VERB", "runs")))
        errors = validate(tree, ENGLISH)
        assert codes(errors) == [C.MISSING_REQUIRED_PHRASE]
        details = errors[0].details
        assert details.phrase_type == "NP"
        assert details.expected == ["NP", "VP"]
        assert details.actual == ["VP"]

    def test_missing_everything(self):
        """Each missing required phrase is its own finding."""
        tree = sentence("r")
        assert codes(validate(tree, ENGLISH)) == [C.MISSING_REQUIRED_PHRASE] * 2

    def test_out_of_order_against_maximum(self):
        """Order is judged against the highest position seen so far."""
        tree = sentence(
            "r",
            phrase("np1", "NP", word("a", "NOUN", "dogs")),
            phrase("vp1", "VP", word("b", "VERB", "eat")),
            phrase("np2", "NP", word("c", "NOUN", "apples")),
            phrase("vp2", "VP", word("d", "VERB", "daily")),
        )
        errors = [e for e in validate(tree, ENGLISH) if e.code == C.INVALID_PHRASE_ORDER]
        assert len(errors) == 1
        assert errors[0].details.node_id == "np2"
        assert errors[0].details.position == 2

    def test_missing_and_out_of_order_accumulate(self):
        """Both findings come back from the same call."""
        tree = sentence(
            "r",
            phrase("vp", "VP", word("a", "VERB", "runs")),
            phrase("advp", "ADVP", word("b", "ADV", "very")),
            phrase("ap", "AP", word("c", "ADJ", "fast")),
        )
        found = codes(validate(tree, ENGLISH))
        assert C.MISSING_REQUIRED_PHRASE in found
        assert C.INVALID_PHRASE_ORDER in found


class TestPhraseRules:
    """Tests for arity and child types."""

    def test_too_many_children(self):
        """Exceeding the maximum reports expected and actual counts."""
        tree = sentence(
            "r",
            phrase("np", "NP", *nouns("n", 5)),
            phrase("vp", "VP", word("v", "VERB", "run")),
        )
        errors = validate(tree, ENGLISH)
        assert codes(errors) == [C.INVALID_CHILDREN_COUNT]
        assert errors[0].details.expected == 4
        assert errors[0].details.actual == 5
        assert errors[0].details.node_id == "np"

    def test_bounds_differ_per_language(self):
        """Russian noun phrases allow five children."""
        tree = sentence(
            "r",
            phrase("np", "NP", *nouns("n", 5)),
            phrase("vp", "VP", word("v", "VERB", "run")),
        )
        assert validate(tree, RUSSIAN) == []

    def test_too_few_children(self):
        """An empty phrase is below its minimum."""
        tree = sentence("r", phrase("np", "NP"), phrase("vp", "VP", word("v", "VERB", "run")))
        errors = validate(tree, ENGLISH)
        assert codes(errors) == [C.INVALID_CHILDREN_COUNT]
        assert errors[0].details.expected == 1
        assert errors[0].details.actual == 0

    def test_disallowed_child_types(self):
        """Every offending child is reported with its position."""
        tree = sentence(
            "r",
            phrase("np", "NP", word("a", "NOUN", "cat")),
            phrase("vp", "VP", word("b", "VERB", "eats"), word("c", "NOUN", "fish")),
        )
        errors = validate(tree, ENGLISH)
        assert codes(errors) == [C.INVALID_NODE_TYPE]
        assert errors[0].details.node_id == "c"
        assert errors[0].details.position == 1
        assert errors[0].details.phrase_type == "VP"

    def test_nested_phrases_are_checked(self):
        """Rules apply to phrases at any depth."""
        tree = sentence(
            "r",
            phrase("np", "NP", word("a", "NOUN", "cat")),
            phrase("vp", "VP", word("b", "VERB", "sits")),
            phrase("pp", "PP", word("c", "PREP", "on"), phrase("inner", "NP", *nouns("m", 6))),
        )
        errors = validate(tree, ENGLISH)
        assert codes(errors) == [C.INVALID_CHILDREN_COUNT]
        assert errors[0].details.node_id == "inner"


class TestValidateOrFail:
    """Tests for the fail-fast entry point."""

    def test_valid_tree_is_returned(self, cat_tree):
        """Valid trees pass through."""
        assert validate_or_fail(cat_tree, ENGLISH) is cat_tree

    def test_raises_with_every_error(self):
        """All findings travel with the exception."""
        tree = sentence(
            "r",
            phrase("vp", "VP", word("a", "VERB", "runs"), word("b", "NOUN", "cat")),
            phrase("np", "NP"),
        )
        expected = validate(tree, ENGLISH)
        with pytest.raises(TreeValidationError) as exc_info:
            validate_or_fail(tree, ENGLISH, error_level=ErrorLevel.DEVELOPER)
        assert exc_info.value.errors == expected
        assert len(expected) >= 3
        assert "node_id=" in str(exc_info.value)
