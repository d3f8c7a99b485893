"""
SynTree tree editing.

This package provides pure add/remove/update/move operations over
immutable tree values.
"""

from syntree.editing.mutations import (
    NodePatch,
    TreeEditor,
    add_node,
    count_nodes,
    find_node,
    find_path,
    move_node,
    new_tree,
    remove_node,
    update_node,
)

__all__ = [
    "TreeEditor",
    "NodePatch",
    "new_tree",
    "add_node",
    "remove_node",
    "update_node",
    "move_node",
    "find_node",
    "find_path",
    "count_nodes",
]
