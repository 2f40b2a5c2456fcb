"""Core abstractions for TreeTraversal.

This package contains the traversal engines and the capability base
classes that node types can opt into.
"""

from .traversal import TreeTraversal, RootedTreeTraversal
from .traversable import (
    Childed,
    Parented,
    NodeTraversal,
    CHILDED_TRAVERSAL,
    PARENTED_TRAVERSAL,
)

__all__ = [
    "TreeTraversal",
    "RootedTreeTraversal",
    "Childed",
    "Parented",
    "NodeTraversal",
    "CHILDED_TRAVERSAL",
    "PARENTED_TRAVERSAL",
]
