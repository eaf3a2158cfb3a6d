"""Utility functions for testing BinarySearchTree invariants."""

import logging
from ordered_trees.binary_search_tree import (
    BinarySearchTree,
    Stats
)

TREE_FLAGS = (
    "is_search_tree",
    "parent_links_consistent",
)

def assert_tree_invariants_tc(tc, t: BinarySearchTree, stats: Stats) -> None:
    """TestCase version: use inside unittest.TestCase methods."""
    for flag in TREE_FLAGS:
        tc.assertTrue(
            getattr(stats, flag),
            f"Invariant failed: {flag} is False\n{t.print_structure()}"
        )

    size = t.size()
    tc.assertEqual(size, stats.node_count,
                   f"Invariant failed: size()={size} ≠ node_count={stats.node_count}")

    if t.is_empty():
        tc.assertIsNone(t.root, "Invariant failed: empty tree has a root")
        tc.assertEqual(stats.node_count, 0,
                       f"Invariant failed: node_count={stats.node_count} for empty tree")
        return

    tc.assertIsNone(t.root.parent, "Invariant failed: root has a parent")
    tc.assertGreater(
        stats.height, 0,
        f"Invariant failed: height={stats.height} ≤ 0 for non-empty tree"
    )
    tc.assertGreater(
        stats.leaf_count, 0,
        f"Invariant failed: leaf_count={stats.leaf_count} ≤ 0 for non-empty tree"
    )
    tc.assertIsNotNone(
        stats.least_value,
        "Invariant failed: least_value is None for non-empty tree"
    )
    tc.assertIsNotNone(
        stats.greatest_value,
        "Invariant failed: greatest_value is None for non-empty tree"
    )

class InvariantError(Exception):
    """Raised when a BinarySearchTree invariant is violated."""
    pass

def assert_tree_invariants_raise(t: BinarySearchTree, stats: Stats) -> None:
    """Check all invariants, raising on the first failure."""
    for flag in TREE_FLAGS:
        if not getattr(stats, flag):
            logging.error(f"Invariant failed: {flag} is False")
            raise InvariantError(f"{flag} is False")

    size = t.size()
    if size != stats.node_count:
        logging.error(f"Invariant failed: size()={size} ≠ node_count={stats.node_count}")
        raise InvariantError(f"size()={size} ≠ node_count={stats.node_count}")

    if not t.is_empty() and t.root.parent is not None:
        logging.error("Invariant failed: root has a parent")
        raise InvariantError("root has a parent")
