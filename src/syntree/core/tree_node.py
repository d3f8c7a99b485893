"""
Core TreeNode model for SynTree.

A tree is a single self-contained value: every node is a frozen pydantic
model and a parent exclusively owns its children. Operations that "change"
a tree build a new value and leave the original untouched.
"""

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, Field

from syntree.core.types import SENTENCE_TAG


class NodeMetadata(BaseModel):
    """
    Descriptive facts attached to a node.

    Metadata never affects structural invariants or validation.

    Params:
        pos: Part-of-speech tag of a terminal node
        language: Language code the node was produced for
        features: Free-form feature map (e.g. editing timestamps); hashed by
            content so nodes carrying metadata stay hashable
    """

    model_config = ConfigDict(frozen=True)

    pos: str | None = None
    language: str | None = None
    features: dict[str, str] = Field(default_factory=dict)

    def __hash__(self) -> int:
        return hash((self.pos, self.language, frozenset(self.features.items())))


class TreeNode(BaseModel):
    """
    A node of a syntax tree.

    Terminal nodes represent one surface word and carry ``value``; phrase
    nodes group terminals (or other phrases) under a phrase tag; the root
    carries the ``SENTENCE`` tag. ``children`` order is left-to-right
    sentence order.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    type: str
    value: str | None = None
    children: tuple["TreeNode", ...] = ()
    metadata: NodeMetadata | None = None

    @property
    def is_terminal(self) -> bool:
        return self.value is not None

    @property
    def is_sentence(self) -> bool:
        return self.type == SENTENCE_TAG

    def iter_nodes(self) -> Iterator["TreeNode"]:
        """Yield this node and all descendants in depth-first pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def with_children(self, children: "tuple[TreeNode, ...] | list[TreeNode]") -> "TreeNode":
        """Return a copy of this node with ``children`` replaced."""
        return self.model_copy(update={"children": tuple(children)})
