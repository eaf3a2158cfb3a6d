"""
ordered_trees - sorted collections backed by binary search trees.

Duplicate values are allowed; equal values are kept in the left subtree
of their first occurrence.
"""

from ordered_trees.base import (
    AbstractSortedCollection,
    InvalidArgumentError,
)
from ordered_trees.binary_search_tree import (
    BinaryNode,
    BinarySearchTree,
    Stats,
    tree_stats_,
)

__version__ = "0.1.0"

__all__ = [
    'AbstractSortedCollection',
    'InvalidArgumentError',
    'BinaryNode',
    'BinarySearchTree',
    'Stats',
    'tree_stats_',
]
