"""
Immutable tree editing.

Every operation takes a tree value and returns a new tree value; the
argument is never modified. Only the path from the affected node up to the
root is rebuilt, with the modified subtree substituted at the match point;
untouched subtrees are shared between the old and new tree, which is safe
because nodes are frozen.

A rejected operation raises before any new tree exists, so callers never
observe a partially modified tree.
"""

import logging
from collections.abc import Callable, Mapping
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from syntree.core.tree_node import NodeMetadata, TreeNode
from syntree.core.types import SENTENCE_LABEL, SENTENCE_TAG, resolve_language, tag_value
from syntree.exceptions import (
    CannotRemoveRootError,
    DuplicateNodeIdError,
    InvalidMoveError,
    InvalidPatchError,
    NodeNotFoundError,
)
from syntree.parsing.assembler import new_id

logger = logging.getLogger(__name__)


class NodePatch(BaseModel):
    """
    Fields to replace on a node.

    Only fields that are explicitly set are applied; ``id`` and ``children``
    cannot be patched.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    label: str | None = None
    type: str | None = None
    value: str | None = None
    metadata: NodeMetadata | None = None


def find_path(tree: TreeNode, node_id: str) -> list[TreeNode] | None:
    """
    Locate a node and its ancestors.

    Params:
        tree: Root to search from
        node_id: Id of the wanted node

    Returns:
        Nodes from the root down to the match (inclusive), or None
    """
    if tree.id == node_id:
        return [tree]
    for child in tree.children:
        path = find_path(child, node_id)
        if path is not None:
            return [tree, *path]
    return None


def find_node(tree: TreeNode, node_id: str) -> TreeNode | None:
    path = find_path(tree, node_id)
    return path[-1] if path else None


def count_nodes(tree: TreeNode) -> int:
    return sum(1 for _ in tree.iter_nodes())


def _substitute(path: list[TreeNode], replacement: TreeNode | None) -> TreeNode:
    """Rebuild the ancestors in ``path`` with its last node replaced (or dropped when None)."""
    target = path[-1]
    for parent in reversed(path[:-1]):
        children = []
        for child in parent.children:
            if child is target:
                if replacement is not None:
                    children.append(replacement)
            else:
                children.append(child)
        target, replacement = parent, parent.with_children(children)
    return replacement


class TreeEditor:
    """
    Tree mutation operations.

    Params:
        id_factory: Produces ids for added nodes
        include_metadata: Stamp ``created_at``/``updated_at`` features on
            added and updated nodes
    """

    def __init__(
        self,
        id_factory: Callable[[], str] = new_id,
        include_metadata: bool = False,
    ):
        self.id_factory = id_factory
        self.include_metadata = include_metadata

    def _stamp(self, metadata: NodeMetadata | None, key: str) -> NodeMetadata | None:
        if not self.include_metadata:
            return metadata
        metadata = metadata or NodeMetadata()
        features = {**metadata.features, key: datetime.now(timezone.utc).isoformat()}
        return metadata.model_copy(update={"features": features})

    def new_tree(self, language=None) -> TreeNode:
        """Create an empty sentence root."""
        metadata = None
        if language is not None:
            metadata = NodeMetadata(language=resolve_language(language).value)
        return TreeNode(
            id=self.id_factory(),
            label=SENTENCE_LABEL,
            type=SENTENCE_TAG,
            metadata=self._stamp(metadata, "created_at"),
        )

    def add_node(
        self,
        tree: TreeNode,
        parent_id: str,
        label: str,
        tag,
        value: str | None = None,
    ) -> TreeNode:
        """
        Append a new node as the last child of a parent.

        Params:
            tree: Tree to edit
            parent_id: Id of the parent node
            label: Display text of the new node
            tag: Tag of the new node
            value: Surface word, for terminal nodes

        Returns:
            The edited tree

        Raises:
            NodeNotFoundError: If no node has ``parent_id``
            DuplicateNodeIdError: If the generated id is already in use
        """
        path = find_path(tree, parent_id)
        if path is None:
            raise NodeNotFoundError(parent_id)

        node_id = self.id_factory()
        if find_path(tree, node_id) is not None:
            raise DuplicateNodeIdError(node_id)

        node = TreeNode(
            id=node_id,
            label=label,
            type=tag_value(tag),
            value=value,
            metadata=self._stamp(None, "created_at"),
        )
        parent = path[-1]
        logger.debug("Adding node %s (%s) under %s", node_id, node.type, parent_id)
        return _substitute(path, parent.with_children((*parent.children, node)))

    def remove_node(self, tree: TreeNode, node_id: str) -> TreeNode:
        """
        Delete a node, with its subtree, from its parent's children.

        Raises:
            CannotRemoveRootError: If ``node_id`` is the root's id
            NodeNotFoundError: If no node has ``node_id``
        """
        if tree.id == node_id:
            raise CannotRemoveRootError(node_id)
        path = find_path(tree, node_id)
        if path is None:
            raise NodeNotFoundError(node_id)
        logger.debug("Removing node %s", node_id)
        return _substitute(path, None)

    def update_node(
        self,
        tree: TreeNode,
        node_id: str,
        patch: "NodePatch | Mapping[str, object]",
    ) -> TreeNode:
        """
        Replace the label, type, value or metadata of a node.

        Params:
            tree: Tree to edit
            node_id: Id of the node to update
            patch: NodePatch, or a mapping of the fields to replace

        Raises:
            NodeNotFoundError: If no node has ``node_id``
            InvalidPatchError: If the patch names other fields or invalid values
        """
        path = find_path(tree, node_id)
        if path is None:
            raise NodeNotFoundError(node_id)

        try:
            if not isinstance(patch, NodePatch):
                patch = NodePatch.model_validate(dict(patch))
            updates = patch.model_dump(exclude_unset=True)
            node = path[-1]
            fields = node.model_dump(exclude={"children"})
            fields.update(updates)
            if "type" in updates:
                fields["type"] = tag_value(updates["type"])
            updated = TreeNode(**fields, children=node.children)
        except PydanticValidationError as e:
            raise InvalidPatchError(node_id, str(e)) from e

        if self.include_metadata:
            updated = updated.model_copy(
                update={"metadata": self._stamp(updated.metadata, "updated_at")}
            )
        logger.debug("Updating node %s: %s", node_id, sorted(updates))
        return _substitute(path, updated)

    def move_node(self, tree: TreeNode, node_id: str, new_parent_id: str) -> TreeNode:
        """
        Detach a subtree and reattach it as the last child of another node.

        The move is atomic: either the edited tree is returned or an error is
        raised and nothing changed.

        Raises:
            NodeNotFoundError: If either id is absent
            InvalidMoveError: If ``node_id`` is the root, or ``new_parent_id``
                is the node itself or one of its descendants
        """
        source_path = find_path(tree, node_id)
        if source_path is None:
            raise NodeNotFoundError(node_id)
        if find_path(tree, new_parent_id) is None:
            raise NodeNotFoundError(new_parent_id)
        if len(source_path) == 1:
            raise InvalidMoveError(node_id, new_parent_id, "the root node cannot be moved")

        subtree = source_path[-1]
        if find_path(subtree, new_parent_id) is not None:
            raise InvalidMoveError(
                node_id, new_parent_id, "a node cannot be moved under its own subtree"
            )

        detached = _substitute(source_path, None)
        target_path = find_path(detached, new_parent_id)
        parent = target_path[-1]
        logger.debug("Moving node %s under %s", node_id, new_parent_id)
        return _substitute(target_path, parent.with_children((*parent.children, subtree)))


_default_editor = TreeEditor()


def new_tree(language=None) -> TreeNode:
    return _default_editor.new_tree(language)


def add_node(tree: TreeNode, parent_id: str, label: str, tag, value: str | None = None) -> TreeNode:
    return _default_editor.add_node(tree, parent_id, label, tag, value=value)


def remove_node(tree: TreeNode, node_id: str) -> TreeNode:
    return _default_editor.remove_node(tree, node_id)


def update_node(tree: TreeNode, node_id: str, patch) -> TreeNode:
    return _default_editor.update_node(tree, node_id, patch)


def move_node(tree: TreeNode, node_id: str, new_parent_id: str) -> TreeNode:
    return _default_editor.move_node(tree, node_id, new_parent_id)
