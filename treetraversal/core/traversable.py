"""Capability base classes for node types that want traversal methods.

A node type declares what navigation it supports by subclassing
``Childed`` (children only) or ``Parented`` (children plus parent).
Traversal methods are not mixed into the node; they live on a
``NodeTraversal`` view that forwards to one shared engine per
capability set.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional, Sequence

from .traversal import TreeTraversal, RootedTreeTraversal


class Childed(ABC):
    """Abstract base for nodes that know their children."""

    @property
    @abstractmethod
    def children(self) -> Sequence['Childed']:
        """Ordered children of this node."""
        pass

    @property
    def traversal(self) -> 'NodeTraversal':
        """Traversal view bound to this node."""
        return NodeTraversal(self)


class Parented(Childed):
    """Abstract base for nodes that also know their parent.

    ``child_at`` and ``index_of_child`` default to indexing into and
    searching ``children``. Override them when the node type can answer
    faster, keeping them consistent with ``children``.
    """

    @property
    @abstractmethod
    def parent(self) -> Optional['Parented']:
        """Parent of this node, or None for a root."""
        pass

    def child_at(self, index: int) -> 'Parented':
        """Return the child at ``index``."""
        return self.children[index]

    def index_of_child(self, child: 'Parented') -> int:
        """Return the position of ``child`` among this node's children.

        Raises:
            ValueError: If ``child`` is not a child of this node
        """
        return list(self.children).index(child)


CHILDED_TRAVERSAL: TreeTraversal[Childed] = TreeTraversal(lambda node: node.children)

PARENTED_TRAVERSAL: RootedTreeTraversal[Parented] = RootedTreeTraversal(
    lambda node: node.children,
    lambda node: node.parent,
    lambda node, index: node.child_at(index),
    lambda node, child: node.index_of_child(child),
)


class NodeTraversal:
    """Traversal methods bound to a single starting node.

    Every method returns a fresh lazy iterator, so calling one twice
    walks the tree twice.
    """

    def __init__(self, node: Childed):
        self.node = node

    @property
    def is_rooted(self) -> bool:
        """True if the node supports upward traversal."""
        return isinstance(self.node, Parented)

    def pre_order(self) -> Iterator[Childed]:
        return CHILDED_TRAVERSAL.pre_order(self.node)

    def post_order(self) -> Iterator[Childed]:
        return CHILDED_TRAVERSAL.post_order(self.node)

    def level_order(self) -> Iterator[Childed]:
        return CHILDED_TRAVERSAL.level_order(self.node)

    def reverse_order(self) -> Iterator[Parented]:
        return self._rooted().reverse_order(self.node)

    def pre_order_continuation(self) -> Iterator[Parented]:
        return self._rooted().pre_order_continuation(self.node)

    def post_order_continuation(self) -> Iterator[Parented]:
        return self._rooted().post_order_continuation(self.node)

    def _rooted(self) -> RootedTreeTraversal:
        if not self.is_rooted:
            raise NotImplementedError(
                f"{self.node.__class__.__name__} does not support upward traversal"
            )
        return PARENTED_TRAVERSAL

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(node={self.node!r})"
