"""
Part-of-speech classification.

A word is tagged by exact, case-insensitive membership in the closed-class
dictionary of its language. Words outside that dictionary are handed to an
optional open-class tagging capability; when nothing matches the word is
tagged ``UNKNOWN``, which is a valid tag and not an error.

Classification is a pure function of (word, language): the classifier keeps
no memory of previous calls.

A capability that times out, whether through the classifier's own
``timeout`` or a timeout raised by a model client, leaves that one word
``UNKNOWN``.
"""

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Protocol, runtime_checkable

from syntree.config import SynTreeSettings, get_settings
from syntree.core.types import OPEN_CLASS_TAGS, LanguageCode, PartOfSpeech, resolve_language
from syntree.models import PROVIDER_TIMEOUT_ERRORS
from syntree.tagging.lexicon import LexiconTagger, lookup_closed_class
from syntree.tagging.llm_tagger import LLMTagger

logger = logging.getLogger(__name__)

# Distinct classes before Python 3.11
TIMEOUT_ERRORS = (
    TimeoutError,
    asyncio.TimeoutError,
    FutureTimeoutError,
    *PROVIDER_TIMEOUT_ERRORS,
)


@runtime_checkable
class OpenClassTagger(Protocol):
    """Capability that disambiguates noun/verb/adjective/adverb words."""

    def tag(self, word: str, language: LanguageCode) -> PartOfSpeech | None: ...

    async def atag(self, word: str, language: LanguageCode) -> PartOfSpeech | None: ...


def _accept_open_class(word: str, tag: PartOfSpeech | str | None) -> PartOfSpeech | None:
    if tag is None:
        return None
    try:
        tag = PartOfSpeech(tag)
    except ValueError:
        logger.debug("Ignoring unknown tag %r suggested for %r", tag, word)
        return None
    if tag not in OPEN_CLASS_TAGS:
        logger.debug("Ignoring closed-class tag %s suggested for %r", tag.value, word)
        return None
    return tag


class PartOfSpeechClassifier:
    """
    Maps surface words to grammatical tags for a given language.

    Params:
        open_class_tagger: Capability consulted for words missing from the
            closed-class dictionary; None disables open-class tagging
        timeout: Seconds to wait for the async capability before tagging the
            word ``UNKNOWN``; None waits indefinitely
    """

    def __init__(
        self,
        open_class_tagger: OpenClassTagger | None = None,
        timeout: float | None = None,
    ):
        self.open_class_tagger = open_class_tagger
        self.timeout = timeout

    @classmethod
    def from_settings(
        cls, settings: SynTreeSettings | None = None, provider=None
    ) -> "PartOfSpeechClassifier":
        """
        Build a classifier whose open-class capability is the configured chat model.

        Params:
            settings: Configuration to read; defaults to environment settings
            provider: Model registry passed on to `LLMTagger.from_settings`
        """
        settings = settings or get_settings()
        return cls(
            open_class_tagger=LLMTagger.from_settings(settings, provider=provider),
            timeout=settings.tagger_timeout_seconds,
        )

    def classify(self, word: str, language) -> PartOfSpeech:
        """
        Tag a single word.

        A capability timeout tags the word ``UNKNOWN`` instead of failing, so
        one slow lookup never aborts a whole sentence.

        Params:
            word: Surface word
            language: Language code or name

        Returns:
            The word's tag; ``UNKNOWN`` when no classifier applies

        Raises:
            UnsupportedLanguageError: If the language is not supported
        """
        code = resolve_language(language)
        tag = lookup_closed_class(word, code)
        if tag is None and self.open_class_tagger is not None:
            try:
                suggested = self._ask(word, code)
            except TIMEOUT_ERRORS:
                self._timed_out(word)
                suggested = None
            tag = _accept_open_class(word, suggested)
        return self._finish(word, tag)

    async def aclassify(self, word: str, language) -> PartOfSpeech:
        """Tag a single word, awaiting the open-class capability if needed."""
        code = resolve_language(language)
        tag = lookup_closed_class(word, code)
        if tag is None and self.open_class_tagger is not None:
            try:
                suggested = await asyncio.wait_for(
                    self.open_class_tagger.atag(word, code), timeout=self.timeout
                )
            except TIMEOUT_ERRORS:
                self._timed_out(word)
                suggested = None
            tag = _accept_open_class(word, suggested)
        return self._finish(word, tag)

    def _ask(self, word: str, code: LanguageCode) -> PartOfSpeech | str | None:
        if self.timeout is None:
            return self.open_class_tagger.tag(word, code)
        # The worker is abandoned on timeout; a blocking call cannot be interrupted
        executor = ThreadPoolExecutor(max_workers=1)
        try:
            future = executor.submit(self.open_class_tagger.tag, word, code)
            return future.result(timeout=self.timeout)
        finally:
            executor.shutdown(wait=False)

    def _timed_out(self, word: str) -> None:
        logger.warning(
            "Open-class tagging of %r timed out after %ss; using UNKNOWN",
            word,
            self.timeout,
        )

    def _finish(self, word: str, tag: PartOfSpeech | None) -> PartOfSpeech:
        if tag is None:
            tag = PartOfSpeech.UNKNOWN
        logger.debug("Classified %r as %s", word, tag.value)
        return tag


_default_classifier = PartOfSpeechClassifier(open_class_tagger=LexiconTagger())


def classify(word: str, language) -> PartOfSpeech:
    """Tag a word with the default classifier (closed class + built-in lexicon)."""
    return _default_classifier.classify(word, language)


def default_classifier() -> PartOfSpeechClassifier:
    return _default_classifier
