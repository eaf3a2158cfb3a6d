"""Base test case for binary search tree tests"""
# pylint: skip-file

from typing import Any, List, Optional
import unittest
import logging

from ordered_trees.binary_search_tree import (
    BinarySearchTree,
    BinaryNode,
    tree_stats_,
)
from tests.stats_binary_search_tree import check_values
from tests.utils import assert_tree_invariants_tc

# Configure logging for test
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

class TreeTestCase(unittest.TestCase):
    """Base class for all BinarySearchTree tests"""
    def setUp(self):
        self.tree = BinarySearchTree()
        logger.debug(f"Created {type(self.tree).__name__} for {self.id()}")

    def tearDown(self):
        tree = getattr(self, 'tree', None)
        if tree is None:
            return

        stats = tree_stats_(tree)
        assert_tree_invariants_tc(self, tree, stats)

        # --- optional invariants ---
        expected_size = getattr(self, 'expected_size', None)
        if expected_size is not None:
            self.assertEqual(
                stats.node_count, expected_size,
                f"Node count {stats.node_count} does not match "
                f"expected {expected_size}\n"
                f"Tree structure:\n{tree.print_structure()}"
            )

        expected_values = getattr(self, 'expected_values', None)
        values, presence_ok, order_ok = check_values(tree, expected_values)

        # In-order sequence must always be sorted
        self.assertTrue(order_ok, f"Values {values} are not in sorted order")

        if expected_values is not None:
            self.assertTrue(
                presence_ok,
                f"Values {values} do not match expected {sorted(expected_values)}"
            )

    def insert_all(self, values) -> None:
        for value in values:
            self.tree.insert(value)

    def _assert_node(
            self,
            node: Optional[BinaryNode],
            value: Any,
            parent: Optional[BinaryNode],
        ) -> BinaryNode:
        """
        Verify that `node` exists, holds `value` and links back to `parent`.

        Returns:
            The node, for chaining into its children.
        """
        self.assertIsNotNone(node, f"Expected a node holding {value!r}, found None")
        self.assertEqual(
            node.value, value,
            f"Node value mismatch: expected {value!r}, got {node.value!r}"
        )
        self.assertIs(
            node.parent, parent,
            f"Node {value!r} should link back to {parent}, got {node.parent}"
        )
        return node

    def _assert_left_spine(self, node: BinaryNode, values: List[Any]) -> None:
        """Verify the chain node, node.left, node.left.left, ... holds `values`."""
        parent = node.parent
        for value in values:
            node = self._assert_node(node, value, parent)
            parent, node = node, node.left
