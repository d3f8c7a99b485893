"""
Shared test fixtures and utilities for the syntree test suite.
"""

import itertools

import pytest

from syntree.core.tree_node import TreeNode


def make_counter_ids(prefix: str = "n"):
    """Deterministic id factory: n0, n1, n2, ..."""
    counter = itertools.count()
    return lambda: f"{prefix}{next(counter)}"


def word(node_id: str, tag: str, text: str) -> TreeNode:
    return TreeNode(id=node_id, label=text, type=tag, value=text)


def phrase(node_id: str, tag: str, *children: TreeNode) -> TreeNode:
    return TreeNode(id=node_id, label=tag, type=tag, children=children)


def sentence(node_id: str, *children: TreeNode) -> TreeNode:
    return TreeNode(id=node_id, label="S", type="SENTENCE", children=children)


@pytest.fixture
def counter_ids():
    return make_counter_ids()


@pytest.fixture
def cat_tree():
    """Hand-built tree for "the cat runs": S(NP(DET, NOUN), VP(VERB))."""
    return sentence(
        "root",
        phrase("np", "NP", word("w0", "DET", "the"), word("w1", "NOUN", "cat")),
        phrase("vp", "VP", word("w2", "VERB", "runs")),
    )
