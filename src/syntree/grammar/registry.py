"""
Registry of language grammars.

Lookups never fall back to a default grammar: an identifier that names no
supported language is rejected.
"""

from syntree.core.types import LanguageCode, resolve_language
from syntree.grammar.rules import ENGLISH, KAZAKH, RUSSIAN, SPANISH, LanguageGrammar

GRAMMARS: dict[LanguageCode, LanguageGrammar] = {
    LanguageCode.EN: ENGLISH,
    LanguageCode.ES: SPANISH,
    LanguageCode.RU: RUSSIAN,
    LanguageCode.KK: KAZAKH,
}


def get_grammar(language: "str | LanguageCode | LanguageGrammar") -> LanguageGrammar:
    """
    Get the grammar of a language.

    Params:
        language: Language code or name, or an already resolved grammar

    Returns:
        The language's LanguageGrammar

    Raises:
        UnsupportedLanguageError: If no grammar exists for the language
    """
    if isinstance(language, LanguageGrammar):
        return language
    return GRAMMARS[resolve_language(language)]


def supported_languages() -> list[LanguageCode]:
    return list(GRAMMARS)
