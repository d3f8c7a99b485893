"""Export formats for tree values.

Both formats are pure functions of a tree; no I/O happens here.

    - Record: nested dicts with ``id, label, type, value?, children[], metadata?``.
        This is the persisted shape downstream renderers and stores key off,
        and it round-trips losslessly through `from_record`.
    - Text: one line per node, ``type[: value]``, indented two spaces per depth.
"""

import json
from typing import Any

from syntree.core.tree_node import TreeNode


def to_record(tree: TreeNode) -> dict[str, Any]:
    """Serialize a tree to its nested record shape, omitting absent optionals."""
    return tree.model_dump(mode="json", exclude_none=True)


def from_record(record: dict[str, Any]) -> TreeNode:
    """
    Rebuild a tree from its record shape.

    Raises:
        pydantic.ValidationError: If the record is not a valid tree
    """
    return TreeNode.model_validate(record)


def to_json(tree: TreeNode, indent: int | None = 2) -> str:
    return json.dumps(to_record(tree), indent=indent, ensure_ascii=False)


def from_json(data: str) -> TreeNode:
    return from_record(json.loads(data))


def to_text(tree: TreeNode) -> str:
    """
    Render a tree as indented text.

    Params:
        tree: Root of the tree to render

    Returns:
        Lines of ``type`` or ``type: value``, each ending in a newline
    """
    lines = []

    def format_node(node: TreeNode, level: int) -> None:
        text = f"{'  ' * level}{node.type}"
        if node.value:
            text += f": {node.value}"
        lines.append(text + "\n")
        for child in node.children:
            format_node(child, level + 1)

    format_node(tree, 0)
    return "".join(lines)
