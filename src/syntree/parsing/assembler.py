"""
Phrase assembly.

Groups a tagged token stream into phrase nodes under a sentence root with a
single left-to-right pass and one active-phrase accumulator:

1. Determiners and pronouns start a noun phrase; a bare noun starts one only
   when no phrase is open; verbs and auxiliaries start a verb phrase;
   prepositions start a prepositional phrase.
2. Any other token joins the open phrase, or, with none open, gets a
   single-token fallback phrase tagged with the token's own tag.
3. The accumulator is cleared after every verb/auxiliary and after the last
   token, so the next token starts a fresh phrase.

The result is a flat sequence of phrases, each a flat list of terminals.
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from uuid import uuid4

from syntree.core.tree_node import NodeMetadata, TreeNode
from syntree.core.types import (
    SENTENCE_LABEL,
    SENTENCE_TAG,
    LanguageCode,
    PartOfSpeech,
    PhraseTag,
    resolve_language,
    tag_value,
)
from syntree.exceptions import EmptyInputError

logger = logging.getLogger(__name__)

Token = tuple[str, "PartOfSpeech | str"]

_NOUN_PHRASE_STARTERS = frozenset({PartOfSpeech.DET.value, PartOfSpeech.PRON.value})
_VERB_PHRASE_STARTERS = frozenset({PartOfSpeech.VERB.value, PartOfSpeech.AUX.value})
_BOUNDARY_TAGS = _VERB_PHRASE_STARTERS


def new_id() -> str:
    return str(uuid4())


def starting_phrase(tag: str, phrase_open: bool) -> str | None:
    """
    Decide whether a token tag opens a new phrase.

    Params:
        tag: The token's tag
        phrase_open: Whether a phrase is currently accumulating

    Returns:
        The phrase tag to open, or None when the token joins the open phrase
    """
    if tag in _NOUN_PHRASE_STARTERS:
        return PhraseTag.NP.value
    if tag == PartOfSpeech.NOUN.value and not phrase_open:
        return PhraseTag.NP.value
    if tag in _VERB_PHRASE_STARTERS:
        return PhraseTag.VP.value
    if tag == PartOfSpeech.PREP.value:
        return PhraseTag.PP.value
    return None


@dataclass
class _OpenPhrase:
    id: str
    tag: str
    children: list[TreeNode] = field(default_factory=list)

    def freeze(self) -> TreeNode:
        return TreeNode(id=self.id, label=self.tag, type=self.tag, children=tuple(self.children))


class PhraseAssembler:
    """
    Builds a draft sentence tree from tagged tokens.

    Params:
        id_factory: Produces a fresh, unique node id per call
        language: Language recorded in node metadata; None records nothing
    """

    def __init__(
        self,
        id_factory: Callable[[], str] = new_id,
        language: "str | LanguageCode | None" = None,
    ):
        self.id_factory = id_factory
        self.language = resolve_language(language) if language is not None else None

    def _metadata(self, pos: str | None = None) -> NodeMetadata | None:
        if self.language is None and pos is None:
            return None
        return NodeMetadata(
            pos=pos, language=self.language.value if self.language else None
        )

    def assemble(self, tokens: Iterable[Token]) -> TreeNode:
        """
        Group tagged tokens into phrases under a sentence root.

        Params:
            tokens: ``(word, tag)`` pairs in sentence order

        Returns:
            The sentence root node

        Raises:
            EmptyInputError: If there are no tokens
        """
        tokens = list(tokens)
        if not tokens:
            raise EmptyInputError("token sequence is empty")

        root_id = self.id_factory()
        phrases: list[_OpenPhrase] = []
        current: _OpenPhrase | None = None
        last_index = len(tokens) - 1

        for index, (word, raw_tag) in enumerate(tokens):
            tag = tag_value(raw_tag)

            phrase_tag = starting_phrase(tag, current is not None)
            if phrase_tag is not None:
                current = _OpenPhrase(id=self.id_factory(), tag=phrase_tag)
                phrases.append(current)
                logger.debug("Token %d %r (%s) opens %s", index, word, tag, phrase_tag)

            terminal = TreeNode(
                id=self.id_factory(),
                label=word,
                type=tag,
                value=word,
                metadata=self._metadata(pos=tag),
            )

            if current is None:
                # Fallback phrases hold exactly one token and never accumulate
                fallback = _OpenPhrase(id=self.id_factory(), tag=tag, children=[terminal])
                phrases.append(fallback)
                logger.debug("Token %d %r (%s) gets a fallback phrase", index, word, tag)
                continue
            current.children.append(terminal)

            if tag in _BOUNDARY_TAGS or index == last_index:
                current = None

        return TreeNode(
            id=root_id,
            label=SENTENCE_LABEL,
            type=SENTENCE_TAG,
            children=tuple(phrase.freeze() for phrase in phrases),
            metadata=self._metadata(),
        )


def assemble(tokens: Iterable[Token], language=None) -> TreeNode:
    """Assemble tokens with a default PhraseAssembler."""
    return PhraseAssembler(language=language).assemble(tokens)
