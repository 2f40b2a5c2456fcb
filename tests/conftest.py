"""Shared pytest fixtures for the TreeTraversal test suite."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from treetraversal import TreeTraversal, RootedTreeTraversal, MappingTree
from treetraversal.testing import sample_tree


SAMPLE_MAPPING = {
    "A": ["B", "C"],
    "B": ["D", "E"],
    "C": ["F", "G"],
}


def names(nodes):
    """Names of SampleNodes, in order."""
    return [node.name for node in nodes]


@pytest.fixture
def sample():
    """Sample tree A(B(D, E), C(F, G)) as SampleNodes, indexed by name."""
    return sample_tree()


@pytest.fixture
def mapping_tree():
    return MappingTree(SAMPLE_MAPPING)


@pytest.fixture
def unrooted_engine():
    """Children-only engine over the sample mapping."""
    return TreeTraversal(lambda node: SAMPLE_MAPPING.get(node, []))


@pytest.fixture
def rooted_engine():
    """Engine over SampleNode's own accessors."""
    return RootedTreeTraversal(
        lambda node: node.children,
        lambda node: node.parent,
        lambda node, index: node.child_at(index),
        lambda node, child: node.index_of_child(child),
    )
