"""
Sentence-to-tree pipeline.

sentence -> tokenize -> classify each token -> assemble draft tree ->
validate against the language grammar.

Input errors (empty sentence, unsupported language) abort the parse before
any tree exists. Grammar findings never abort: they are returned alongside
the tree and the caller decides whether they are blocking.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from syntree.config import get_settings
from syntree.core.tree_node import TreeNode
from syntree.core.types import LanguageCode, PartOfSpeech
from syntree.exceptions import ErrorLevel, TreeError, TreeValidationError
from syntree.grammar.registry import get_grammar
from syntree.parsing.assembler import PhraseAssembler, new_id
from syntree.parsing.tokenizer import tokenize
from syntree.tagging.classifier import PartOfSpeechClassifier, default_classifier
from syntree.validation.validator import validate

logger = logging.getLogger(__name__)


@dataclass
class ParseResult:
    """A draft tree together with every grammar finding about it."""

    tree: TreeNode
    language: LanguageCode
    errors: list[TreeError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


class SyntaxTreeParser:
    """
    Parses sentences of one language into validated syntax trees.

    Params:
        language: Language code or name; defaults to the configured
            ``default_language``
        classifier: Part-of-speech classifier; defaults to closed-class
            dictionaries plus the built-in open-class lexicon
        id_factory: Node id generator passed to the assembler

    Raises:
        UnsupportedLanguageError: If the language has no grammar
    """

    def __init__(
        self,
        language=None,
        classifier: PartOfSpeechClassifier | None = None,
        id_factory: Callable[[], str] = new_id,
    ):
        if language is None:
            language = get_settings().default_language
        self.grammar = get_grammar(language)
        self.language = self.grammar.code
        self.classifier = classifier or default_classifier()
        self.assembler = PhraseAssembler(id_factory=id_factory, language=self.language)

    def tag(self, sentence: str) -> list[tuple[str, PartOfSpeech]]:
        return [
            (word, self.classifier.classify(word, self.language))
            for word in tokenize(sentence)
        ]

    async def atag(self, sentence: str) -> list[tuple[str, PartOfSpeech]]:
        # One token at a time: each phrase decision depends on the previous token
        tagged = []
        for word in tokenize(sentence):
            tagged.append((word, await self.classifier.aclassify(word, self.language)))
        return tagged

    def build(self, sentence: str) -> TreeNode:
        """Tokenize, tag and assemble a draft tree without validating it."""
        return self.assembler.assemble(self.tag(sentence))

    def parse(self, sentence: str) -> ParseResult:
        """
        Parse a sentence and validate the resulting tree.

        Params:
            sentence: Raw sentence text

        Returns:
            The draft tree and its grammar findings

        Raises:
            EmptyInputError: If the sentence contains no words
        """
        return self._result(self.build(sentence))

    async def aparse(self, sentence: str) -> ParseResult:
        """Parse a sentence, awaiting the classifier's async capability per token."""
        return self._result(self.assembler.assemble(await self.atag(sentence)))

    def parse_or_fail(
        self, sentence: str, error_level: ErrorLevel = ErrorLevel.USER
    ) -> TreeNode:
        """
        Parse a sentence and raise unless the tree is grammatical.

        Raises:
            EmptyInputError: If the sentence contains no words
            TreeValidationError: Carrying every grammar finding
        """
        result = self.parse(sentence)
        if result.errors:
            raise TreeValidationError(result.errors, error_level=error_level)
        return result.tree

    def _result(self, tree: TreeNode) -> ParseResult:
        errors = validate(tree, self.grammar)
        logger.debug(
            "Parsed %d phrase(s) in %s with %d finding(s)",
            len(tree.children),
            self.language.value,
            len(errors),
        )
        return ParseResult(tree=tree, language=self.language, errors=errors)


def generate_syntax_tree(sentence: str, language) -> TreeNode:
    """
    Build the draft tree of a sentence with default components, unvalidated.

    Raises:
        EmptyInputError: If the sentence contains no words
        UnsupportedLanguageError: If the language is not supported
    """
    return SyntaxTreeParser(language).build(sentence)
