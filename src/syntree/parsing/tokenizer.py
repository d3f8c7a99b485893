"""Sentence tokenization."""

import re

from syntree.exceptions import EmptyInputError

# Letters/digits in any script, allowing inner apostrophes and hyphens
_WORD_PATTERN = re.compile(r"[^\W_]+(?:['’\-][^\W_]+)*")


def tokenize(sentence: str) -> list[str]:
    """
    Split a sentence into surface words, dropping punctuation.

    Params:
        sentence: Raw sentence text

    Returns:
        Words in left-to-right order

    Raises:
        EmptyInputError: If the sentence is not a string or contains no words
    """
    if not isinstance(sentence, str):
        raise EmptyInputError(f"sentence must be a string, got {type(sentence).__name__}")
    words = _WORD_PATTERN.findall(sentence)
    if not words:
        raise EmptyInputError("sentence contains no words")
    return words
