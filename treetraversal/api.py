"""High-level API for TreeTraversal.

This module provides simple, functional interfaces for common traversal
operations. These functions wrap the engine, config and planning layers
for ease of use in simple cases.
"""

from typing import Any, Callable, Dict, Iterable, Iterator, Optional, Union

from .core.traversal import TreeTraversal, RootedTreeTraversal
from .config import TraversalConfig, TraversalOrder, FilterConfig
from .planning import ExecutionPlan


def traverse_tree(
    start: Any,
    children: Callable[[Any], Iterable[Any]],
    order: Union[TraversalOrder, str] = TraversalOrder.PRE_ORDER,
    parent: Optional[Callable[[Any], Optional[Any]]] = None,
    child_at: Optional[Callable[[Any, int], Any]] = None,
    index_of: Optional[Callable[[Any, Any], int]] = None,
    include_filter: Optional[Callable[[Any], bool]] = None,
    exclude_filter: Optional[Callable[[Any], bool]] = None,
    max_nodes: Optional[int] = None,
    on_error: Optional[Callable[[Any, Exception], None]] = None,
) -> Iterator[Any]:
    """Simple interface for tree traversal.

    This is the primary high-level function. It builds an engine over the
    given accessors and plans the traversal up front, so bad arguments
    raise here rather than on the first ``next()``.

    Args:
        start: Node to start from
        children: Returns the ordered children of a node
        order: Traversal order, as enum or name (pre, post, level, reverse,
            pre_continuation, post_continuation)
        parent: Returns a node's parent or None; required for upward orders
        child_at: Child-at-index accessor; defaults to ``children(node)[i]``
        index_of: Index-of-child accessor; defaults to searching ``children(node)``
        include_filter: Function to determine if node should be included
        exclude_filter: Function to determine if node should be excluded
        max_nodes: Stop after this many nodes
        on_error: Called with (start, error) before an accessor error propagates

    Returns:
        Lazy iterator over the nodes in the requested order that pass the filters

    Raises:
        ValueError: If the order name is unknown, when called
        CapabilityMismatchError: If an upward order is requested without
            ``parent``, when called

    Example:
        >>> tree = {"A": ["B", "C"], "B": ["D", "E"], "C": ["F", "G"]}
        >>> list(traverse_tree("A", lambda n: tree.get(n, []), order="post"))
        ['D', 'E', 'B', 'F', 'G', 'C', 'A']
    """
    config = TraversalConfig(
        order=_parse_order(order),
        filter=FilterConfig(
            include_filter=include_filter,
            exclude_filter=exclude_filter,
        ),
        max_nodes=max_nodes,
        on_error=on_error,
    )

    engine = _build_engine(children, parent, child_at, index_of)
    plan = ExecutionPlan(config, engine)

    return plan.execute(start)


def count_nodes(start: Any, children: Callable[[Any], Iterable[Any]], **kwargs) -> int:
    """Count nodes that match criteria.

    Args:
        start: Node to start from
        children: Returns the ordered children of a node
        **kwargs: Traversal options (see traverse_tree)

    Returns:
        Number of nodes produced by the traversal

    Example:
        >>> count_nodes("A", lambda n: {"A": ["B", "C"]}.get(n, []))
        3
    """
    count = 0
    for _ in traverse_tree(start, children, **kwargs):
        count += 1
    return count


def find_nodes(
    start: Any,
    children: Callable[[Any], Iterable[Any]],
    predicate: Callable[[Any], bool],
    **kwargs
) -> Iterator[Any]:
    """Find nodes that match a predicate.

    Args:
        start: Node to start from
        children: Returns the ordered children of a node
        predicate: Function that returns True for matching nodes
        **kwargs: Traversal options (see traverse_tree)

    Yields:
        Nodes that match the predicate, in traversal order
    """
    kwargs['include_filter'] = predicate
    yield from traverse_tree(start, children, **kwargs)


def get_leaf_nodes(start: Any, children: Callable[[Any], Iterable[Any]], **kwargs) -> Iterator[Any]:
    """Get all leaf nodes below ``start``.

    Args:
        start: Node to start from
        children: Returns the ordered children of a node
        **kwargs: Traversal options (see traverse_tree)

    Yields:
        Nodes with no children, in traversal order
    """
    kwargs['include_filter'] = lambda node: _is_leaf(children, node)
    yield from traverse_tree(start, children, **kwargs)


def get_tree_stats(start: Any, children: Callable[[Any], Iterable[Any]]) -> Dict[str, Any]:
    """Get statistics about the subtree rooted at ``start``.

    Args:
        start: Root of the subtree
        children: Returns the ordered children of a node

    Returns:
        Dictionary with tree statistics

    Example:
        >>> stats = get_tree_stats("A", lambda n: {"A": ["B", "C"]}.get(n, []))
        >>> stats['total_nodes'], stats['leaf_nodes'], stats['max_depth']
        (3, 2, 1)
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'max_depth': 0,
        'depths': {}
    }

    # Walk (node, depth) pairs so depth comes from the engine itself
    with_depth = TreeTraversal(
        lambda pair: [(child, pair[1] + 1) for child in children(pair[0])]
    )

    for node, depth in with_depth.level_order((start, 0)):
        stats['total_nodes'] += 1

        if _is_leaf(children, node):
            stats['leaf_nodes'] += 1

        stats['max_depth'] = max(stats['max_depth'], depth)
        stats['depths'][depth] = stats['depths'].get(depth, 0) + 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    stats['average_branching'] = (
        (stats['total_nodes'] - 1) / stats['internal_nodes']
        if stats['internal_nodes'] > 0 else 0
    )

    return stats


# Helper functions

def _is_leaf(children: Callable[[Any], Iterable[Any]], node: Any) -> bool:
    for _ in children(node):
        return False
    return True


def _build_engine(
    children: Callable[[Any], Iterable[Any]],
    parent: Optional[Callable[[Any], Optional[Any]]],
    child_at: Optional[Callable[[Any, int], Any]],
    index_of: Optional[Callable[[Any, Any], int]],
) -> TreeTraversal:
    """Build the least capable engine the given accessors allow.

    Returns:
        RootedTreeTraversal when ``parent`` is given, else TreeTraversal
    """
    if parent is None:
        return TreeTraversal(children)

    if child_at is None:
        child_at = lambda node, index: list(children(node))[index]
    if index_of is None:
        index_of = lambda node, child: list(children(node)).index(child)

    return RootedTreeTraversal(children, parent, child_at, index_of)


def _parse_order(order: Union[TraversalOrder, str]) -> TraversalOrder:
    """Parse order from string or enum.

    Args:
        order: Order as enum or string

    Returns:
        TraversalOrder enum value
    """
    if isinstance(order, TraversalOrder):
        return order

    order_map = {
        'pre': TraversalOrder.PRE_ORDER,
        'pre_order': TraversalOrder.PRE_ORDER,
        'dfs': TraversalOrder.PRE_ORDER,
        'dfs_pre': TraversalOrder.PRE_ORDER,
        'post': TraversalOrder.POST_ORDER,
        'post_order': TraversalOrder.POST_ORDER,
        'dfs_post': TraversalOrder.POST_ORDER,
        'level': TraversalOrder.LEVEL_ORDER,
        'level_order': TraversalOrder.LEVEL_ORDER,
        'bfs': TraversalOrder.LEVEL_ORDER,
        'reverse': TraversalOrder.REVERSE_ORDER,
        'reverse_order': TraversalOrder.REVERSE_ORDER,
        'pre_continuation': TraversalOrder.PRE_ORDER_CONTINUATION,
        'pre_order_continuation': TraversalOrder.PRE_ORDER_CONTINUATION,
        'post_continuation': TraversalOrder.POST_ORDER_CONTINUATION,
        'post_order_continuation': TraversalOrder.POST_ORDER_CONTINUATION,
    }

    order_lower = order.lower() if isinstance(order, str) else str(order)
    if order_lower in order_map:
        return order_map[order_lower]

    raise ValueError(
        f"Unknown traversal order: {order}. "
        f"Choose from: {', '.join(order_map.keys())}"
    )
