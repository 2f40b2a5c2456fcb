"""Test fixtures for TreeTraversal consumers.

These fixtures provide a small concrete node type and tree builders so
test suites can exercise traversals without defining their own nodes.
"""

import random
from typing import Dict, List, Optional, Sequence, Tuple, Union

from ..core.traversable import Parented

# A tree spec is a name, or (name, [child specs])
TreeSpec = Union[str, Tuple[str, Sequence['TreeSpec']]]

SAMPLE_TREE_SPEC: TreeSpec = ("A", [("B", ["D", "E"]), ("C", ["F", "G"])])


class SampleNode(Parented):
    """Named node with a parent link and an ordered child list.

    Example:
        root = SampleNode("A")
        b = root.add_child(SampleNode("B"))
        assert b.parent is root
    """

    def __init__(self, name: str):
        self.name = name
        self._parent: Optional['SampleNode'] = None
        self._children: List['SampleNode'] = []

    @property
    def children(self) -> List['SampleNode']:
        return self._children

    @property
    def parent(self) -> Optional['SampleNode']:
        return self._parent

    def add_child(self, child: 'SampleNode') -> 'SampleNode':
        """Append ``child`` and set its parent link; returns the child."""
        child._parent = self
        self._children.append(child)
        return child

    def index_of_child(self, child: 'SampleNode') -> int:
        # Identity, so equal-looking siblings never collide
        for index, candidate in enumerate(self._children):
            if candidate is child:
                return index
        raise ValueError(f"{child!r} is not a child of {self!r}")

    def __repr__(self) -> str:
        return f"SampleNode({self.name!r})"


def build_tree(spec: TreeSpec) -> SampleNode:
    """Build a SampleNode tree from a nested spec.

    Args:
        spec: ``"name"`` for a leaf or ``("name", [child specs])``

    Returns:
        Root node of the built tree
    """
    if isinstance(spec, str):
        return SampleNode(spec)

    name, child_specs = spec
    node = SampleNode(name)
    for child_spec in child_specs:
        node.add_child(build_tree(child_spec))
    return node


def index_by_name(root: SampleNode) -> Dict[str, SampleNode]:
    """Map each node's name to the node, for every node under ``root``."""
    nodes = {}
    pending = [root]
    while pending:
        node = pending.pop()
        nodes[node.name] = node
        pending.extend(node.children)
    return nodes


def sample_tree() -> Dict[str, SampleNode]:
    """The seven-node tree used throughout the docs, indexed by name.

    ::

              A
            /   \\
           B     C
          / \\   / \\
         D   E F   G
    """
    return index_by_name(build_tree(SAMPLE_TREE_SPEC))


def random_tree(node_count: int, seed: int, max_children: int = 4) -> SampleNode:
    """Build a random tree with exactly ``node_count`` nodes.

    Nodes are named ``n0`` (the root), ``n1``, ... in creation order.

    Args:
        node_count: Total number of nodes, at least 1
        seed: Seed for the random generator, for reproducible trees
        max_children: Upper bound on any node's child count

    Returns:
        Root node of the built tree
    """
    if node_count < 1:
        raise ValueError("node_count must be at least 1")

    rng = random.Random(seed)
    root = SampleNode("n0")
    open_nodes = [root]

    for index in range(1, node_count):
        parent = rng.choice(open_nodes)
        child = parent.add_child(SampleNode(f"n{index}"))
        open_nodes.append(child)
        if len(parent.children) >= max_children:
            open_nodes.remove(parent)

    return root


def chain_tree(depth: int) -> Tuple[SampleNode, SampleNode]:
    """Build a single path of ``depth`` + 1 nodes.

    Returns:
        (root, deepest leaf)
    """
    root = leaf = SampleNode("c0")
    for index in range(1, depth + 1):
        leaf = leaf.add_child(SampleNode(f"c{index}"))
    return root, leaf
