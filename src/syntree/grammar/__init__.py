"""
SynTree grammar tables.

This package provides the static per-language production rules used by the
phrase assembler and the tree validator.
"""

from syntree.grammar.registry import GRAMMARS, get_grammar, supported_languages
from syntree.grammar.rules import (
    ENGLISH,
    KAZAKH,
    RUSSIAN,
    SPANISH,
    LanguageGrammar,
    PhraseRule,
)

__all__ = [
    "LanguageGrammar",
    "PhraseRule",
    "ENGLISH",
    "SPANISH",
    "RUSSIAN",
    "KAZAKH",
    "GRAMMARS",
    "get_grammar",
    "supported_languages",
]
