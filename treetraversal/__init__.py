"""TreeTraversal - Generic Tree Traversal Library.

TreeTraversal walks any tree structure you can describe with accessor
functions: nested objects, mappings, ASTs, widget hierarchies, or custom
data structures. It never needs a concrete node type.

Pick your entry point:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Engines over accessor functions:
    from treetraversal import TreeTraversal, RootedTreeTraversal

Node types with traversal built in:
    from treetraversal import Childed, Parented

One-shot functions:
    from treetraversal import traverse_tree
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from .core.traversal import TreeTraversal, RootedTreeTraversal
from .core.traversable import Childed, Parented, NodeTraversal
from .adapters.mapping import MappingTree
from .config import TraversalConfig, TraversalOrder, FilterConfig
from .planning import ExecutionPlan, CapabilityMismatchError
from .api import (
    traverse_tree,
    count_nodes,
    find_nodes,
    get_leaf_nodes,
    get_tree_stats,
)

__all__ = [
    "__version__",
    # Engines
    "TreeTraversal",
    "RootedTreeTraversal",
    # Capabilities
    "Childed",
    "Parented",
    "NodeTraversal",
    # Adapters
    "MappingTree",
    # Config
    "TraversalConfig",
    "TraversalOrder",
    "FilterConfig",
    "ExecutionPlan",
    "CapabilityMismatchError",
    # API
    "traverse_tree",
    "count_nodes",
    "find_nodes",
    "get_leaf_nodes",
    "get_tree_stats",
]
