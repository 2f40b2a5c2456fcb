"""Testing utilities for TreeTraversal consumers."""

from .fixtures import (
    SampleNode,
    SAMPLE_TREE_SPEC,
    build_tree,
    chain_tree,
    index_by_name,
    random_tree,
    sample_tree,
)

__all__ = [
    'SampleNode',
    'SAMPLE_TREE_SPEC',
    'build_tree',
    'chain_tree',
    'index_by_name',
    'random_tree',
    'sample_tree',
]
