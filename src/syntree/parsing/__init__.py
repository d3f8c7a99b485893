"""
SynTree sentence parsing.

This package provides tokenization, phrase assembly and the end-to-end
sentence-to-tree pipeline.
"""

from syntree.parsing.assembler import PhraseAssembler, assemble, starting_phrase
from syntree.parsing.pipeline import ParseResult, SyntaxTreeParser, generate_syntax_tree
from syntree.parsing.tokenizer import tokenize

__all__ = [
    "tokenize",
    "PhraseAssembler",
    "assemble",
    "starting_phrase",
    "SyntaxTreeParser",
    "ParseResult",
    "generate_syntax_tree",
]
