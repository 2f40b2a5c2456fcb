"""Traversal engines for TreeTraversal.

Engines implement the algorithms for walking through trees. They never
see a concrete node type: the caller hands them accessor functions and
they work purely through those, so the same engine serves any tree.

All traversals are generators backed by an explicit stack or queue, so
tree depth is not limited by the interpreter's recursion limit. Each
call returns a fresh, independent iterator.
"""

from collections import deque
from itertools import islice
from typing import Callable, Deque, Generic, Iterable, Iterator, List, Optional, Sequence, TypeVar

T = TypeVar('T')


class TreeTraversal(Generic[T]):
    """Depth-first and breadth-first traversal over a generic node type.

    Only a children accessor is needed, so every starting node is treated
    as the root of its own subtree.

    Example::

                  A
                /   \\
               B     C
              / \\   / \\
             D   E F   G
    """

    def __init__(self, children: Callable[[T], Iterable[T]]):
        """Initialize the engine with a children accessor.

        Args:
            children: Returns the ordered children of a node. Must be
                deterministic for the duration of a traversal.
        """
        self._children = children

    # ------------------------------------------------------------------ #
    # Depth first
    # ------------------------------------------------------------------ #

    def pre_order(self, node: T) -> Iterator[T]:
        """Visit a node before any of its descendants.

        Depth-first, left to right. Useful for copying or serializing a
        tree. Sample tree: A, B, D, E, C, F, G.

        Args:
            node: Root of the subtree to walk

        Yields:
            Nodes in pre-order
        """
        yield node
        stack: List[Iterator[T]] = [iter(self._children(node))]

        while stack:
            for child in stack[-1]:
                yield child
                stack.append(iter(self._children(child)))
                break
            else:
                stack.pop()

    def post_order(self, node: T) -> Iterator[T]:
        """Visit a node after all of its descendants.

        Depth-first, left to right. Useful for deletion or for aggregating
        values bottom-up. Sample tree: D, E, B, F, G, C, A.

        Args:
            node: Root of the subtree to walk

        Yields:
            Nodes in post-order
        """
        stack = [(node, iter(self._children(node)))]

        while stack:
            current, remaining = stack[-1]
            for child in remaining:
                stack.append((child, iter(self._children(child))))
                break
            else:
                stack.pop()
                yield current

    # ------------------------------------------------------------------ #
    # Breadth first
    # ------------------------------------------------------------------ #

    def level_order(self, node: T) -> Iterator[T]:
        """Visit nodes level by level, left to right within a level.

        Sample tree: A, B, C, D, E, F, G.

        Args:
            node: Root of the subtree to walk

        Yields:
            Nodes in level-order
        """
        queue: Deque[T] = deque([node])

        while queue:
            current = queue.popleft()
            yield current
            queue.extend(self._children(current))


class RootedTreeTraversal(TreeTraversal[T]):
    """Traversals that can also walk up a tree.

    Adds reverse-order and the two continuation orders, which need to
    know each node's parent and position among its siblings.

    The four accessors must describe one consistent tree:
    ``child_at(p, index_of(p, c))`` is ``c`` and ``parent(c)`` is ``p``
    for every child ``c`` of ``p``. This is not checked; inconsistent
    accessors give undefined output.
    """

    def __init__(self,
                 children: Callable[[T], Iterable[T]],
                 parent: Callable[[T], Optional[T]],
                 child_at: Callable[[T, int], T],
                 index_of: Callable[[T, T], int]):
        """Initialize the engine with the four accessors.

        Args:
            children: Returns the ordered children of a node
            parent: Returns the parent of a node, or None for a root
            child_at: Takes a node and an index, returns the child at that index
            index_of: Takes a parent and a child, returns the child's index
        """
        super().__init__(children)
        self._parent = parent
        self._child_at = child_at
        self._index_of = index_of

    @classmethod
    def from_parented(cls,
                      children: Callable[[T], Sequence[T]],
                      parent: Callable[[T], Optional[T]]) -> 'RootedTreeTraversal[T]':
        """Build an engine whose children accessor returns a sequence.

        ``child_at`` and ``index_of`` are derived by indexing into and
        searching the children sequence.

        Args:
            children: Returns the children of a node as an indexable sequence
            parent: Returns the parent of a node, or None for a root

        Returns:
            RootedTreeTraversal over those accessors
        """
        return cls(
            children,
            parent,
            lambda node, index: children(node)[index],
            lambda node, child: children(node).index(child),
        )

    def reverse_order(self, node: T) -> Iterator[T]:
        """Walk backwards through a pre-order from the given node.

        Yields the node, then its earlier siblings right to left, then
        its parent and the parent's earlier siblings, up to the root.
        Starting at G on the sample tree: G, F, C, B, A.

        Args:
            node: Node to start from

        Yields:
            Nodes in reverse order
        """
        while True:
            parent = self._parent(node)
            if parent is None:
                yield node
                return

            for index in range(self._index_of(parent, node), -1, -1):
                yield self._child_at(parent, index)
            node = parent

    def post_order_continuation(self, node: T) -> Iterator[T]:
        """Finish a whole-tree post-order as if it had reached ``node``.

        The node's own subtree comes first, then each ancestor's later
        children's subtrees followed by the ancestor, up to the root.
        Starting at C on the sample tree: F, G, C, A.

        Args:
            node: Node to resume from

        Yields:
            Remaining nodes of the global post-order
        """
        skip = 0
        while True:
            yield from self._post_order_from(node, skip)

            parent = self._parent(node)
            if parent is None:
                return
            skip = self._index_of(parent, node) + 1
            node = parent

    def pre_order_continuation(self, node: T) -> Iterator[T]:
        """Finish a whole-tree pre-order as if it had just reached ``node``.

        Ancestors already precede ``node`` in a global pre-order, so they
        are never yielded again; only later siblings' subtrees are.
        Starting at C on the sample tree: C, F, G.

        Args:
            node: Node to resume from

        Yields:
            Remaining nodes of the global pre-order
        """
        yield node

        skip = 0
        while True:
            yield from self._pre_order_from(node, skip)

            parent = self._parent(node)
            if parent is None:
                return
            skip = self._index_of(parent, node) + 1
            node = parent

    # ------------------------------------------------------------------ #
    # Skip-aware helpers for the continuations
    # ------------------------------------------------------------------ #

    def _pre_order_from(self, node: T, skip: int) -> Iterator[T]:
        """Pre-order of node's children from position ``skip`` on.

        The node itself is not yielded.
        """
        stack: List[Iterator[T]] = [islice(self._children(node), skip, None)]

        while stack:
            for child in stack[-1]:
                yield child
                stack.append(iter(self._children(child)))
                break
            else:
                stack.pop()

    def _post_order_from(self, node: T, skip: int) -> Iterator[T]:
        """Post-order of node's children from position ``skip`` on, then node."""
        stack = [(node, islice(self._children(node), skip, None))]

        while stack:
            current, remaining = stack[-1]
            for child in remaining:
                stack.append((child, iter(self._children(child))))
                break
            else:
                stack.pop()
                yield current
