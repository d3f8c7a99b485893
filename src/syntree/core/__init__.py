"""
Core SynTree components.

This package provides the tree node model and the tag and language
vocabulary shared by every other SynTree component.
"""

from syntree.core.tree_node import NodeMetadata, TreeNode
from syntree.core.types import (
    ALL_TAGS,
    LANGUAGE_NAMES,
    OPEN_CLASS_TAGS,
    PHRASE_TAGS,
    SENTENCE_LABEL,
    SENTENCE_TAG,
    TERMINAL_TAGS,
    LanguageCode,
    PartOfSpeech,
    PhraseTag,
    resolve_language,
    tag_value,
)

__all__ = [
    "TreeNode",
    "NodeMetadata",
    "PartOfSpeech",
    "PhraseTag",
    "LanguageCode",
    "LANGUAGE_NAMES",
    "SENTENCE_TAG",
    "SENTENCE_LABEL",
    "TERMINAL_TAGS",
    "PHRASE_TAGS",
    "ALL_TAGS",
    "OPEN_CLASS_TAGS",
    "resolve_language",
    "tag_value",
]
