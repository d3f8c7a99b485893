"""Open-class part-of-speech tagging through a chat model.

The tagger asks a LangChain chat model for exactly one tag out of
NOUN/VERB/ADJ/ADV and parses the answer as a plain string. It is an
injected capability owned by the caller, with its own lifecycle:

    - Responses are cached by request fingerprint (LangChain cache on the model),
        so the same word in the same language is only asked once.
    - Requests are paced by a LangChain rate limiter.
    - Unparseable answers yield None; the classifier then falls back to UNKNOWN.
"""

import logging
import re

from langchain_core.caches import InMemoryCache
from langchain_core.language_models import BaseChatModel
from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import (
    ChatPromptTemplate,
    HumanMessagePromptTemplate,
    SystemMessagePromptTemplate,
)
from langchain_core.runnables import Runnable

from syntree.config import SynTreeSettings, get_settings
from syntree.core.types import LANGUAGE_NAMES, OPEN_CLASS_TAGS, PartOfSpeech, resolve_language
from syntree.models import LLMProvider, make_rate_limiter

logger = logging.getLogger(__name__)

_OPEN_CLASS_NAMES = frozenset(tag.value for tag in OPEN_CLASS_TAGS)
_ALLOWED = ", ".join(sorted(_OPEN_CLASS_NAMES))

SYSTEM_PROMPT = (
    "You are a part-of-speech tagger for {language} sentences. "
    f"Answer with exactly one of: {_ALLOWED}. "
    "Answer NONE if the word is none of these. Do not explain."
)
HUMAN_PROMPT = "Word: {word}"

_ANSWER_PATTERN = re.compile(r"[A-Z]+")


def parse_tag(answer: str) -> PartOfSpeech | None:
    """Extract the first open-class tag named in a model answer."""
    for token in _ANSWER_PATTERN.findall(answer.upper()):
        if token in _OPEN_CLASS_NAMES:
            return PartOfSpeech(token)
    return None


def build_tagging_chain(llm: BaseChatModel) -> Runnable:
    """
    Assemble the prompt -> model -> string chain used for tagging.

    Params:
        llm: Chat model answering the tagging prompt

    Returns:
        Runnable taking ``{"language": ..., "word": ...}`` and returning the raw answer
    """
    prompt_template = ChatPromptTemplate.from_messages(
        messages=[
            SystemMessagePromptTemplate.from_template(SYSTEM_PROMPT),
            HumanMessagePromptTemplate.from_template(HUMAN_PROMPT),
        ]
    )
    return prompt_template | llm | StrOutputParser()


class LLMTagger:
    """
    Open-class tagging capability backed by a chat model.

    Params:
        llm: Chat model to query; configure its ``cache`` and
            ``rate_limiter`` to control caching and pacing
    """

    def __init__(self, llm: BaseChatModel):
        self.llm = llm
        self._chain = build_tagging_chain(llm)

    @classmethod
    def from_settings(
        cls,
        settings: SynTreeSettings | None = None,
        provider: LLMProvider | None = None,
    ) -> "LLMTagger":
        """
        Build a tagger for the configured model with its own cache and limiter.

        Params:
            settings: Configuration to read; defaults to environment settings
            provider: Model registry; defaults to one built from settings

        Returns:
            A tagger whose model caches responses in memory and is paced
            at ``tagger_requests_per_second``, giving up on a request after
            ``tagger_timeout_seconds``
        """
        settings = settings or get_settings()
        provider = provider or LLMProvider.from_settings(settings)
        llm = provider.get_llm(
            settings.tagger_model,
            rate_limiter=make_rate_limiter(settings.tagger_requests_per_second),
            cache=InMemoryCache(),
            timeout=settings.tagger_timeout_seconds,
        )
        return cls(llm)

    @staticmethod
    def _inputs(word: str, language) -> dict[str, str]:
        code = resolve_language(language)
        return {"language": LANGUAGE_NAMES[code].capitalize(), "word": word.strip().lower()}

    def tag(self, word: str, language) -> PartOfSpeech | None:
        answer = self._chain.invoke(self._inputs(word, language))
        return self._parse(word, answer)

    async def atag(self, word: str, language) -> PartOfSpeech | None:
        answer = await self._chain.ainvoke(self._inputs(word, language))
        return self._parse(word, answer)

    def _parse(self, word: str, answer: str) -> PartOfSpeech | None:
        tag = parse_tag(answer)
        if tag is None:
            logger.debug("No open-class tag in model answer %r for %r", answer, word)
        return tag
