"""
SynTree - syntax tree construction and grammar validation for language learners

SynTree tags the words of a sentence, groups them into phrases under small
per-language grammars, and reports every grammar violation of the result.
"""

import logging
from importlib.metadata import version

from syntree.core import LanguageCode, NodeMetadata, PartOfSpeech, PhraseTag, TreeNode
from syntree.editing import TreeEditor, add_node, move_node, remove_node, update_node
from syntree.exceptions import TreeError, TreeErrorCode, TreeValidationError
from syntree.export import from_record, to_json, to_record, to_text
from syntree.grammar import LanguageGrammar, get_grammar
from syntree.parsing import ParseResult, SyntaxTreeParser, generate_syntax_tree
from syntree.tagging import PartOfSpeechClassifier, classify
from syntree.validation import validate, validate_or_fail

__version__ = version("syntree")

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "TreeNode",
    "NodeMetadata",
    "PartOfSpeech",
    "PhraseTag",
    "LanguageCode",
    "LanguageGrammar",
    "get_grammar",
    "PartOfSpeechClassifier",
    "classify",
    "SyntaxTreeParser",
    "ParseResult",
    "generate_syntax_tree",
    "TreeEditor",
    "add_node",
    "remove_node",
    "update_node",
    "move_node",
    "validate",
    "validate_or_fail",
    "TreeError",
    "TreeErrorCode",
    "TreeValidationError",
    "to_record",
    "from_record",
    "to_json",
    "to_text",
]
