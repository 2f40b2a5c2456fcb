"""Configuration system for TreeTraversal.

This module defines how users specify their traversal requirements:
which order to walk the tree in, which nodes to keep, and how many
results to produce.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Callable, Any, List


class TraversalOrder(Enum):
    """Order in which nodes are produced.

    The first three orders only need a children accessor. The remaining
    ones walk upwards and need parent and index accessors as well.
    """
    PRE_ORDER = "pre_order"                              # Parent before children
    POST_ORDER = "post_order"                            # Children before parent
    LEVEL_ORDER = "level_order"                          # Breadth-first
    REVERSE_ORDER = "reverse_order"                      # Earlier siblings, then ancestors
    PRE_ORDER_CONTINUATION = "pre_order_continuation"    # Rest of a global pre-order
    POST_ORDER_CONTINUATION = "post_order_continuation"  # Rest of a global post-order

    @property
    def requires_parent(self) -> bool:
        """True if this order needs a rooted engine."""
        return self in _ROOTED_ORDERS


_ROOTED_ORDERS = frozenset({
    TraversalOrder.REVERSE_ORDER,
    TraversalOrder.PRE_ORDER_CONTINUATION,
    TraversalOrder.POST_ORDER_CONTINUATION,
})


@dataclass
class FilterConfig:
    """Configuration for filtering nodes out of a traversal's output.

    Filters never prune the walk itself: an excluded node's descendants
    are still visited and judged on their own.
    """

    include_filter: Optional[Callable[[Any], bool]] = None  # Include predicate
    exclude_filter: Optional[Callable[[Any], bool]] = None  # Exclude predicate

    def should_include(self, node) -> bool:
        """Check if a node should be included based on filters.

        Args:
            node: Node to check

        Returns:
            True if node passes all filters
        """
        # Exclusion takes precedence
        if self.exclude_filter and self.exclude_filter(node):
            return False

        if self.include_filter:
            return self.include_filter(node)

        return True


@dataclass
class TraversalConfig:
    """Complete configuration for a traversal.

    This is the primary way users describe what they want. The
    ExecutionPlan validates it against the engine it will run on.
    """

    order: TraversalOrder = TraversalOrder.PRE_ORDER

    # Node filtering
    filter: FilterConfig = field(default_factory=FilterConfig)

    # Stop after this many yielded nodes (None = unlimited)
    max_nodes: Optional[int] = None

    # Called with (start, error) before an accessor error is re-raised
    on_error: Optional[Callable[[Any, Exception], None]] = None

    @classmethod
    def resume_pre_order(cls, max_nodes: Optional[int] = None) -> 'TraversalConfig':
        """Create config that resumes a whole-tree pre-order walk.

        Args:
            max_nodes: Optional cap on the number of nodes produced

        Returns:
            TraversalConfig for pre-order continuation
        """
        return cls(order=TraversalOrder.PRE_ORDER_CONTINUATION, max_nodes=max_nodes)

    @classmethod
    def resume_post_order(cls, max_nodes: Optional[int] = None) -> 'TraversalConfig':
        """Create config that resumes a whole-tree post-order walk.

        Args:
            max_nodes: Optional cap on the number of nodes produced

        Returns:
            TraversalConfig for post-order continuation
        """
        return cls(order=TraversalOrder.POST_ORDER_CONTINUATION, max_nodes=max_nodes)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.order, TraversalOrder):
            errors.append(f"order must be a TraversalOrder, got {self.order!r}")

        if self.max_nodes is not None and self.max_nodes <= 0:
            errors.append("max_nodes must be positive")

        if self.on_error is not None and not callable(self.on_error):
            errors.append("on_error must be callable")

        return errors
