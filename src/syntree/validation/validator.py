"""
Grammar validation of syntax trees.

Validation walks a tree and reports every structural and grammar violation
it finds. Checks never short-circuit: a single pass returns the complete
list of findings so a caller can show every problem at once. Findings are
data; only `validate_or_fail` turns them into an exception.

Checks:
- Id uniqueness (and a ``SENTENCE`` root)
- Tag validity against the closed tag universe
- Required phrases present among the root's children
- Phrase order of the root's children
- Per-phrase child count and child tags
"""

import logging

from syntree.core.tree_node import TreeNode
from syntree.core.types import ALL_TAGS, SENTENCE_TAG
from syntree.exceptions import (
    ErrorDetails,
    ErrorLevel,
    TreeError,
    TreeErrorCode,
    TreeValidationError,
)
from syntree.grammar.registry import get_grammar
from syntree.grammar.rules import LanguageGrammar

logger = logging.getLogger(__name__)


def _error(code: TreeErrorCode, message: str, **details) -> TreeError:
    return TreeError(code=code, message=message, details=ErrorDetails(**details))


def _check_structure(tree: TreeNode, errors: list[TreeError]) -> None:
    if tree.type != SENTENCE_TAG:
        errors.append(
            _error(
                TreeErrorCode.INVALID_TREE_STRUCTURE,
                f"Root node must be {SENTENCE_TAG}, got {tree.type}",
                node_id=tree.id,
                expected=SENTENCE_TAG,
                actual=tree.type,
            )
        )

    seen: set[str] = set()
    for node in tree.iter_nodes():
        if node.id in seen:
            errors.append(
                _error(
                    TreeErrorCode.INVALID_TREE_STRUCTURE,
                    f"Duplicate node id: {node.id}",
                    node_id=node.id,
                )
            )
        else:
            seen.add(node.id)


def _check_tags(tree: TreeNode, grammar: LanguageGrammar, errors: list[TreeError]) -> None:
    # Root children are reported by the order check, and children of
    # phrases with a rule by the phrase check
    stack = [
        (phrase, child)
        for phrase in reversed(tree.children)
        for child in reversed(phrase.children)
    ]
    while stack:
        parent, node = stack.pop()
        stack.extend((node, child) for child in reversed(node.children))
        if node.type in ALL_TAGS:
            continue
        if node.children:
            errors.append(
                _error(
                    TreeErrorCode.UNKNOWN_PHRASE_TYPE,
                    f"Unknown phrase type: {node.type}",
                    node_id=node.id,
                    phrase_type=node.type,
                )
            )
        elif not grammar.has_rule(parent.type):
            errors.append(
                _error(
                    TreeErrorCode.INVALID_NODE_TYPE,
                    f"Unknown node type: {node.type}",
                    node_id=node.id,
                    actual=node.type,
                )
            )


def _check_required(tree: TreeNode, grammar: LanguageGrammar, errors: list[TreeError]) -> None:
    phrase_types = [child.type for child in tree.children]
    expected = sorted(grammar.required_phrases)
    for required in expected:
        if required not in phrase_types:
            errors.append(
                _error(
                    TreeErrorCode.MISSING_REQUIRED_PHRASE,
                    f"Missing required phrase: {required}",
                    phrase_type=required,
                    expected=expected,
                    actual=phrase_types,
                )
            )


def _check_order(tree: TreeNode, grammar: LanguageGrammar, errors: list[TreeError]) -> None:
    phrase_types = [child.type for child in tree.children]
    order = list(grammar.phrase_order)
    max_index = -1
    for position, child in enumerate(tree.children):
        index = grammar.order_index(child.type)
        if index is None:
            errors.append(
                _error(
                    TreeErrorCode.UNKNOWN_PHRASE_TYPE,
                    f"Unknown phrase type in order: {child.type}",
                    node_id=child.id,
                    phrase_type=child.type,
                    expected=order,
                    actual=child.type,
                    position=position,
                )
            )
        elif index < max_index:
            errors.append(
                _error(
                    TreeErrorCode.INVALID_PHRASE_ORDER,
                    f"Phrase {child.type} is out of order",
                    node_id=child.id,
                    phrase_type=child.type,
                    expected=order,
                    actual=phrase_types,
                    position=position,
                )
            )
        else:
            max_index = index


def _check_phrase(phrase: TreeNode, grammar: LanguageGrammar, errors: list[TreeError]) -> None:
    minimum, maximum = grammar.child_count_bounds(phrase.type)
    count = len(phrase.children)
    if count < minimum:
        errors.append(
            _error(
                TreeErrorCode.INVALID_CHILDREN_COUNT,
                f"Phrase {phrase.type} has too few children",
                node_id=phrase.id,
                phrase_type=phrase.type,
                expected=minimum,
                actual=count,
            )
        )
    if count > maximum:
        errors.append(
            _error(
                TreeErrorCode.INVALID_CHILDREN_COUNT,
                f"Phrase {phrase.type} has too many children",
                node_id=phrase.id,
                phrase_type=phrase.type,
                expected=maximum,
                actual=count,
            )
        )

    allowed = grammar.allowed_child_types(phrase.type)
    for position, child in enumerate(phrase.children):
        if child.type not in allowed:
            errors.append(
                _error(
                    TreeErrorCode.INVALID_NODE_TYPE,
                    f"Invalid node type {child.type} in {phrase.type}",
                    node_id=child.id,
                    phrase_type=phrase.type,
                    expected=sorted(allowed),
                    actual=child.type,
                    position=position,
                )
            )


def validate(tree: TreeNode, grammar) -> list[TreeError]:
    """
    Report every violation of structure and grammar in a tree.

    Params:
        tree: Sentence root to validate
        grammar: LanguageGrammar, or a language code/name to look one up

    Returns:
        All findings in check order; empty when the tree is valid

    Raises:
        TypeError: If ``tree`` is not a TreeNode
        UnsupportedLanguageError: If ``grammar`` names an unsupported language
    """
    if not isinstance(tree, TreeNode):
        raise TypeError(f"validate() expects a TreeNode, got {type(tree).__name__}")
    grammar = get_grammar(grammar)

    errors: list[TreeError] = []
    _check_structure(tree, errors)
    _check_tags(tree, grammar, errors)
    _check_required(tree, grammar, errors)
    _check_order(tree, grammar, errors)
    for node in tree.iter_nodes():
        if node is not tree and grammar.has_rule(node.type):
            _check_phrase(node, grammar, errors)

    logger.debug("Validated tree %s against %s: %d error(s)", tree.id, grammar.code.value, len(errors))
    return errors


def validate_or_fail(
    tree: TreeNode, grammar, error_level: ErrorLevel = ErrorLevel.USER
) -> TreeNode:
    """
    Validate a tree and raise if anything is wrong.

    Returns:
        The tree itself when it is valid

    Raises:
        TreeValidationError: Carrying the full list of findings
    """
    errors = validate(tree, grammar)
    if errors:
        raise TreeValidationError(errors, error_level=error_level)
    return tree


def is_valid(tree: TreeNode, grammar) -> bool:
    return not validate(tree, grammar)
