# -*- coding: utf-8 -*-
# ------------------------------------------------------------------------------
#
#   Copyright 2025 Jannik Hehemann
#
#   Licensed under the Apache License, Version 2.0 (the "License");
#   you may not use this file except in compliance with the License.
#   You may obtain a copy of the License at
#
#       http://www.apache.org/licenses/LICENSE-2.0
#
#   Unless required by applicable law or agreed to in writing, software
#   distributed under the License is distributed on an "AS IS" BASIS,
#   WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#   See the License for the specific language governing permissions and
#   limitations under the License.
#
# ------------------------------------------------------------------------------

"""Binary search tree implementation"""

from __future__ import annotations
import logging
import weakref
from typing import Any, Generic, Optional
from dataclasses import dataclass

from ordered_trees.base import (
    AbstractSortedCollection,
    InvalidArgumentError,
    T,
)

# Configure logging
logger = logging.getLogger(__name__)
# Clear all handlers to ensure we don't add duplicates
if logger.hasHandlers():
    logger.handlers.clear()
# Add a single handler with formatting
handler = logging.StreamHandler()
formatter = logging.Formatter('%(asctime)s [%(levelname)s] %(message)s')
handler.setFormatter(formatter)
logger.addHandler(handler)
logger.setLevel(logging.INFO)
# Prevent propagation to the root logger to avoid duplicate logs
logger.propagate = False

DEBUG = False
DEFAULT_MAX_DEPTH = 8


class BinaryNode(Generic[T]):
    """
    A single node of a binary search tree.

    Attributes:
        value (T): The stored value. Fixed at construction.
        left (Optional[BinaryNode]): Left child; holds values <= value.
        right (Optional[BinaryNode]): Right child; holds values > value.
        parent (Optional[BinaryNode]): The parent node, or None for the root.
            Held through a weak reference so it never keeps a node alive.
    """
    __slots__ = ("value", "left", "right", "_parent", "__weakref__")

    def __init__(self, value: T) -> None:
        self.value = value
        self.left: Optional[BinaryNode[T]] = None
        self.right: Optional[BinaryNode[T]] = None
        self._parent: Optional[weakref.ref] = None

    @property
    def parent(self) -> Optional[BinaryNode[T]]:
        return self._parent() if self._parent is not None else None

    def _attach(self, child: BinaryNode[T], left: bool) -> None:
        """Link `child` into the given slot and point its back-link here."""
        if left:
            self.left = child
        else:
            self.right = child
        child._parent = weakref.ref(self)

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __str__(self):
        return f"{self.__class__.__name__}(value={self.value!r})"

    __repr__ = __str__


class BinarySearchTree(AbstractSortedCollection[T]):
    """
    An unbalanced binary search tree that keeps its values in sorted order.

    Duplicates are allowed: a value equal to a node's value is routed into
    that node's left subtree. The tree owns its nodes through the `root`
    reference; dropping the root releases the whole structure.

    Attributes:
        root (Optional[BinaryNode]): The root node. If None, the tree is empty.
    """
    __slots__ = ("root",)

    NodeClass = BinaryNode

    def __init__(self) -> None:
        self.root: Optional[BinaryNode[T]] = None

    # Public API
    def insert(self, value: T) -> None:
        """
        Public method (average-case O(log n), worst-case O(n) on sorted input):
        Insert a value into the tree.

        Iteratively descends from the root. Values less than or equal to a
        node's value go left, strictly greater values go right. The new node
        is attached at the first empty child slot with its parent link set.

        Args:
            value (T): The value to be inserted.

        Raises:
            InvalidArgumentError: If value is None. The tree is left unchanged.
        """
        if value is None:
            raise InvalidArgumentError("insert(): cannot insert None into the tree")

        new_node = self.NodeClass(value)
        if self.root is None:
            self.root = new_node
            logger.debug(f"insert(): {value!r} became the root")
            return

        cur = self.root
        while True:
            # Only `<` is needed: equal values fall through to the left
            if cur.value < value:
                if cur.right is None:
                    cur._attach(new_node, left=False)
                    break
                cur = cur.right
            else:
                if cur.left is None:
                    cur._attach(new_node, left=True)
                    break
                cur = cur.left

        if DEBUG:
            logger.debug(f"Tree after insert({value!r}):\n{self.print_structure()}")

    def contains(self, value: Any) -> bool:
        """
        Searches for a value equal to `value` in the tree.

        Iteratively traverses the tree in O(depth) without mutating it.

        Args:
            value: A probe comparable with the stored values.

        Returns:
            bool: True if an equal value is stored, False otherwise.

        Raises:
            InvalidArgumentError: If value is None.
        """
        if value is None:
            raise InvalidArgumentError("contains(): cannot search for None")

        cur = self.root
        while cur is not None:
            if value < cur.value:
                cur = cur.left
            elif cur.value < value:
                cur = cur.right
            else:
                return True
        return False

    def size(self) -> int:
        """
        Count all reachable nodes in O(n). No counter is cached, so every
        call walks the whole tree.
        """
        if self.root is None:
            return 0

        count = 0
        stack = [self.root]
        while stack:
            node = stack.pop()
            count += 1
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        return count

    def is_empty(self) -> bool:
        return self.root is None

    def clear(self) -> None:
        """Drop the root and with it every node of the tree."""
        if self.root is not None:
            logger.debug("clear(): releasing tree")
        self.root = None

    def height(self) -> int:
        """
        The number of nodes on the longest root-to-leaf path; 0 when empty.
        """
        if self.root is None:
            return 0

        max_depth = 0
        stack = [(self.root, 1)]
        while stack:
            node, depth = stack.pop()
            max_depth = max(max_depth, depth)
            if node.left is not None:
                stack.append((node.left, depth + 1))
            if node.right is not None:
                stack.append((node.right, depth + 1))
        return max_depth

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def __str__(self):
        if self.is_empty():
            return f"Empty {self.__class__.__name__}"
        return f"{self.__class__.__name__}(root={self.root})"

    __repr__ = __str__

    def print_structure(self, indent: int = 0, max_depth: int = DEFAULT_MAX_DEPTH) -> str:
        prefix = ' ' * indent
        if self.is_empty():
            return f"{prefix}Empty {self.__class__.__name__}"

        result = []

        def _render(node, label, pad, depth):
            if depth > max_depth:
                result.append(f"{pad}{label}... (max depth reached)")
                return
            result.append(f"{pad}{label}{node}")
            if node.is_leaf():
                return
            for child, child_label in ((node.left, "L: "), (node.right, "R: ")):
                if child is None:
                    result.append(f"{pad}    {child_label}Empty")
                else:
                    _render(child, child_label, pad + "    ", depth + 1)

        _render(self.root, "", prefix, 0)
        return "\n".join(result)


@dataclass
class Stats:
    node_count: int
    height: int
    leaf_count: int
    least_value: Optional[Any]
    greatest_value: Optional[Any]
    is_search_tree: bool
    parent_links_consistent: bool


def tree_stats_(t: Optional[BinarySearchTree]) -> Stats:
    """
    Returns aggregated statistics for a binary search tree in **O(n)** time.

    `is_search_tree` holds if every left subtree value is <= its ancestor's
    value and every right subtree value is > it. `parent_links_consistent`
    holds if the root has no parent and every other node's parent has that
    node as one of its children.
    """
    if t is None or t.is_empty():
        return _empty_stats()

    stats = _node_stats(t.root)
    if t.root.parent is not None:
        stats.parent_links_consistent = False
    return stats


def _empty_stats() -> Stats:
    return Stats(node_count              = 0,
                 height                  = 0,
                 leaf_count              = 0,
                 least_value             = None,
                 greatest_value          = None,
                 is_search_tree          = True,
                 parent_links_consistent = True)


def _node_stats(node: Optional[BinaryNode]) -> Stats:
    if node is None:
        return _empty_stats()

    left_stats = _node_stats(node.left)
    right_stats = _node_stats(node.right)
    value = node.value

    stats = Stats(
        node_count=1 + left_stats.node_count + right_stats.node_count,
        height=1 + max(left_stats.height, right_stats.height),
        leaf_count=(1 if node.is_leaf()
                    else left_stats.leaf_count + right_stats.leaf_count),
        least_value=value,
        greatest_value=value,
        is_search_tree=left_stats.is_search_tree and right_stats.is_search_tree,
        parent_links_consistent=(left_stats.parent_links_consistent
                                 and right_stats.parent_links_consistent),
    )

    if node.left is not None:
        stats.least_value = left_stats.least_value
        # left subtree may hold duplicates of value, never anything greater
        if value < left_stats.greatest_value:
            stats.is_search_tree = False
        if node.left.parent is not node:
            stats.parent_links_consistent = False

    if node.right is not None:
        stats.greatest_value = right_stats.greatest_value
        if not value < right_stats.least_value:
            stats.is_search_tree = False
        if node.right.parent is not node:
            stats.parent_links_consistent = False

    return stats
