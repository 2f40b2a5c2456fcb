"""Mapping adapter for TreeTraversal.

This adapter lets TreeTraversal walk trees described as plain mappings
from a node to its ordered children, e.g. data loaded from JSON or a
dependency listing::

    tree = MappingTree({"A": ["B", "C"], "B": ["D", "E"], "C": ["F", "G"]})
    list(tree.traversal().post_order_continuation("C"))  # F, G, C, A
"""

import logging
from typing import Dict, Hashable, List, Mapping, Optional, Sequence

from ..core.traversal import RootedTreeTraversal

logger = logging.getLogger(__name__)


class MappingTree:
    """Accessor set over a ``{node: [child, ...]}`` mapping.

    Nodes must be hashable. A node missing from the mapping is a leaf.
    The mapping is read, never modified, and must not change while a
    traversal over it is running.
    """

    def __init__(self, mapping: Mapping[Hashable, Sequence[Hashable]]):
        """Initialize the adapter.

        Args:
            mapping: Maps each internal node to its ordered children
        """
        self._mapping = mapping
        self._parents: Optional[Dict[Hashable, Hashable]] = None

    def children(self, node: Hashable) -> Sequence[Hashable]:
        """Get the ordered children of a node."""
        return self._mapping.get(node, ())

    def parent(self, node: Hashable) -> Optional[Hashable]:
        """Get the parent of a node, or None if it is a root."""
        return self._parent_index().get(node)

    def child_at(self, node: Hashable, index: int) -> Hashable:
        """Get the child of ``node`` at ``index``.

        Raises:
            IndexError: If ``node`` has no child at ``index``
        """
        return self.children(node)[index]

    def index_of(self, node: Hashable, child: Hashable) -> int:
        """Get the position of ``child`` among ``node``'s children.

        Raises:
            ValueError: If ``child`` is not a child of ``node``
        """
        return list(self.children(node)).index(child)

    def roots(self) -> List[Hashable]:
        """List the nodes that have no parent, in mapping order."""
        parents = self._parent_index()
        return [node for node in self._mapping if node not in parents]

    def traversal(self) -> RootedTreeTraversal:
        """Create a rooted engine over this mapping's accessors."""
        return RootedTreeTraversal(self.children, self.parent, self.child_at, self.index_of)

    def _parent_index(self) -> Dict[Hashable, Hashable]:
        """Build the child -> parent index on first use."""
        if self._parents is None:
            parents = {}
            for node, children in self._mapping.items():
                for child in children:
                    parents[child] = node
            logger.debug("Built parent index for %d nodes", len(parents))
            self._parents = parents
        return self._parents

    def __len__(self) -> int:
        """Number of distinct nodes named in the mapping."""
        return len(set(self._mapping) | set(self._parent_index()))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({len(self._mapping)} internal nodes)"
