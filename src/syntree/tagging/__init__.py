"""
SynTree part-of-speech tagging.

This package provides the closed-class dictionaries, the part-of-speech
classifier and the open-class tagging capabilities it can delegate to.
"""

from syntree.tagging.classifier import (
    OpenClassTagger,
    PartOfSpeechClassifier,
    classify,
    default_classifier,
)
from syntree.tagging.lexicon import (
    CLOSED_CLASS,
    OPEN_CLASS,
    LexiconTagger,
    lookup_closed_class,
)
from syntree.tagging.llm_tagger import LLMTagger

__all__ = [
    "PartOfSpeechClassifier",
    "OpenClassTagger",
    "LexiconTagger",
    "LLMTagger",
    "CLOSED_CLASS",
    "OPEN_CLASS",
    "classify",
    "default_classifier",
    "lookup_closed_class",
]
