"""Execution planning for TreeTraversal.

The ExecutionPlan validates that a TraversalConfig can be satisfied by
a traversal engine and coordinates the actual traversal execution.
"""

import logging
from typing import Any, Callable, Dict, Iterator, List, Tuple

from .core.traversal import TreeTraversal, RootedTreeTraversal
from .config import TraversalConfig, TraversalOrder

logger = logging.getLogger(__name__)


class CapabilityMismatchError(Exception):
    """Raised when configuration requirements can't be met by the engine."""
    pass


class ExecutionPlan:
    """Validated execution plan for a traversal.

    The ExecutionPlan is the bridge between user intent (TraversalConfig)
    and execution. It checks that the engine can produce the requested
    order before any accessor is called, then applies filtering and
    limits while the traversal runs.
    """

    def __init__(self, config: TraversalConfig, engine: TreeTraversal):
        """Create and validate an execution plan.

        Args:
            config: User's traversal configuration
            engine: Engine built over the caller's accessors

        Raises:
            CapabilityMismatchError: If the engine can't satisfy the config
        """
        self.config = config
        self.engine = engine

        config_errors = config.validate()
        if config_errors:
            raise CapabilityMismatchError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        capability_issues = self._validate_capabilities()
        if capability_issues:
            raise CapabilityMismatchError(
                f"Engine limitations: {'; '.join(capability_issues)}"
            )

        self.traverse = self._select_traversal()

        # Track execution state
        self.nodes_processed = 0
        self.errors_encountered: List[Tuple[Any, str]] = []

        logger.debug(
            "Execution plan ready: order=%s engine=%s max_nodes=%s",
            config.order.value, engine.__class__.__name__, config.max_nodes,
        )

    def _validate_capabilities(self) -> List[str]:
        """Validate the engine can produce the configured order.

        Returns:
            List of capability issues (empty if all satisfied)
        """
        issues = []

        if self.config.order.requires_parent and not isinstance(self.engine, RootedTreeTraversal):
            issues.append(
                f"{self.config.order.value} needs parent and index accessors, "
                f"but {self.engine.__class__.__name__} only has children"
            )

        return issues

    def _select_traversal(self) -> Callable[[Any], Iterator[Any]]:
        """Select the engine method for the configured order.

        Returns:
            Bound engine method taking a start node
        """
        order_map = {
            TraversalOrder.PRE_ORDER: "pre_order",
            TraversalOrder.POST_ORDER: "post_order",
            TraversalOrder.LEVEL_ORDER: "level_order",
            TraversalOrder.REVERSE_ORDER: "reverse_order",
            TraversalOrder.PRE_ORDER_CONTINUATION: "pre_order_continuation",
            TraversalOrder.POST_ORDER_CONTINUATION: "post_order_continuation",
        }

        return getattr(self.engine, order_map[self.config.order])

    def _check_limits(self, processed: int) -> bool:
        """Check if execution limits have been reached.

        Args:
            processed: Nodes yielded so far by the current run

        Returns:
            True if we should continue, False if limits reached
        """
        max_nodes = self.config.max_nodes
        return max_nodes is None or processed < max_nodes

    def _handle_error(self, start: Any, error: Exception, errors: List[Tuple[Any, str]]) -> None:
        """Record an error and notify the user's handler.

        The caller re-raises; accessor faults are never swallowed.

        Args:
            start: Node the traversal started from
            error: The exception that was raised
            errors: Error list of the current run
        """
        errors.append((start, str(error)))
        self.errors_encountered = errors

        if self.config.on_error:
            self.config.on_error(start, error)

    def execute(self, start: Any) -> Iterator[Any]:
        """Execute the traversal plan.

        Each call keeps its own count, so several runs of one plan can be
        interleaved. ``nodes_processed`` and ``errors_encountered`` report
        on whichever run advanced last.

        Args:
            start: Node to start the traversal from

        Yields:
            Nodes that pass the configured filters, in the configured order
        """
        processed = 0
        errors: List[Tuple[Any, str]] = []
        self.nodes_processed = 0
        self.errors_encountered = errors

        try:
            for node in self.traverse(start):
                if not self.config.filter.should_include(node):
                    continue

                processed += 1
                self.nodes_processed = processed
                yield node

                if not self._check_limits(processed):
                    logger.debug("Stopping after max_nodes=%d", self.config.max_nodes)
                    return
        except Exception as e:
            self._handle_error(start, e, errors)
            raise

    def get_summary(self) -> Dict[str, Any]:
        """Get summary of execution plan.

        Useful for debugging and logging.

        Returns:
            Dictionary with plan details
        """
        return {
            'order': self.config.order.value,
            'requires_parent': self.config.order.requires_parent,
            'max_nodes': self.config.max_nodes,
            'filtered': (
                self.config.filter.include_filter is not None
                or self.config.filter.exclude_filter is not None
            ),
            'engine': self.engine.__class__.__name__,
        }
