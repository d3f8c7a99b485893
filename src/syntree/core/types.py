"""
Core tag vocabulary and language identifiers for SynTree.

This module defines the closed universe of tags a tree node may carry
(terminal part-of-speech tags, phrase tags and the sentence root tag) and
the enumeration of supported languages.
"""

from enum import Enum

from syntree.exceptions import UnsupportedLanguageError


class PartOfSpeech(str, Enum):
    """Terminal (word-level) tags."""

    DET = "DET"
    PRON = "PRON"
    NOUN = "NOUN"
    VERB = "VERB"
    AUX = "AUX"
    ADJ = "ADJ"
    ADV = "ADV"
    PREP = "PREP"
    POST = "POST"  # postposition
    CONJ = "CONJ"
    NUM = "NUM"
    UNKNOWN = "UNKNOWN"


class PhraseTag(str, Enum):
    """Non-terminal (phrase-level) tags."""

    NP = "NP"
    VP = "VP"
    PP = "PP"
    AP = "AP"
    ADVP = "ADVP"


SENTENCE_TAG = "SENTENCE"
SENTENCE_LABEL = "S"

TERMINAL_TAGS = frozenset(tag.value for tag in PartOfSpeech)
PHRASE_TAGS = frozenset(tag.value for tag in PhraseTag)
ALL_TAGS = TERMINAL_TAGS | PHRASE_TAGS | {SENTENCE_TAG}

# Open-class tags may only come from an open-class tagging capability
OPEN_CLASS_TAGS = frozenset(
    {PartOfSpeech.NOUN, PartOfSpeech.VERB, PartOfSpeech.ADJ, PartOfSpeech.ADV}
)


class LanguageCode(str, Enum):
    """Languages with a grammar table and a lexicon."""

    EN = "en"
    ES = "es"
    RU = "ru"
    KK = "kk"


LANGUAGE_NAMES = {
    LanguageCode.EN: "english",
    LanguageCode.ES: "spanish",
    LanguageCode.RU: "russian",
    LanguageCode.KK: "kazakh",
}

_LANGUAGE_ALIASES = {
    **{code.value: code for code in LanguageCode},
    **{name: code for code, name in LANGUAGE_NAMES.items()},
}


def resolve_language(language: "str | LanguageCode") -> LanguageCode:
    """
    Resolve a language identifier to a supported LanguageCode.

    Accepts ISO 639-1 codes (``"en"``) and English language names
    (``"english"``), case-insensitively.

    Params:
        language: Language code, language name or LanguageCode member

    Returns:
        The matching LanguageCode

    Raises:
        UnsupportedLanguageError: If the identifier names no supported language
    """
    if isinstance(language, LanguageCode):
        return language
    if not isinstance(language, str):
        raise UnsupportedLanguageError(repr(language))
    code = _LANGUAGE_ALIASES.get(language.strip().lower())
    if code is None:
        raise UnsupportedLanguageError(
            language, supported=[c.value for c in LanguageCode]
        )
    return code


def tag_value(tag: "str | Enum") -> str:
    """Return the plain string form of a tag."""
    return tag.value if isinstance(tag, Enum) else tag
