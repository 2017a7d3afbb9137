"""Singly linked lists and binary trees, with the operations built on them."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import takewhile
from typing import Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode({list(self)!r})"


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; None when empty."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def list_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of a linked list as a Python list."""
    return [node.val for node in _nodes(head)]


def insertion_sort_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort a linked list in ascending order by insertion sort."""
    if head is None:
        return None
    sorted_head = head
    tail = head  # last node of the sorted prefix
    while tail.next is not None:
        node = tail.next
        if node.val < sorted_head.val:
            tail.next = node.next
            node.next = sorted_head
            sorted_head = node
        elif node.val < tail.val:
            tail.next = node.next
            parent = sorted_head
            while parent.next.val < node.val:
                parent = parent.next
            node.next = parent.next
            parent.next = node
        else:
            tail = node
    return sorted_head


def _merge(first: Optional[ListNode], second: Optional[ListNode]) -> Optional[ListNode]:
    dummy = ListNode()
    tail = dummy
    while first is not None and second is not None:
        if first.val < second.val:
            tail.next, first = first, first.next
        else:
            tail.next, second = second, second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return dummy.next


def sort_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Sort a linked list in ascending order by merge sort."""
    if head is None or head.next is None:
        return head
    slow = head
    before_slow = head
    fast: Optional[ListNode] = head
    while fast is not None and fast.next is not None:
        before_slow = slow
        slow = slow.next
        fast = fast.next.next
    before_slow.next = None
    return _merge(sort_list(head), sort_list(slow))


def split_list_to_parts(head: Optional[ListNode], k: int) -> list[Optional[ListNode]]:
    """Split a list into ``k`` consecutive parts whose sizes differ by at most one.

    Earlier parts are never shorter than later ones; missing parts are None.
    """
    if k <= 0:
        raise ValueError("k must be positive")
    size, extra = divmod(sum(1 for _ in _nodes(head)), k)
    parts: list[Optional[ListNode]] = []
    node = head
    for part in range(k):
        parts.append(node)
        part_length = size + (1 if part < extra else 0)
        if part_length == 0:
            continue
        for _ in range(part_length - 1):
            node = node.next
        following = node.next
        node.next = None
        node = following
    return parts


def insert_greatest_common_divisors(head: Optional[ListNode]) -> Optional[ListNode]:
    """Insert between each pair of adjacent nodes a node holding their GCD."""
    node = head
    while node is not None and node.next is not None:
        following = node.next
        node.next = ListNode(math.gcd(node.val, following.val), following)
        node = following
    return head


def modified_list(nums: Iterable[int], head: Optional[ListNode]) -> Optional[ListNode]:
    """Remove every node whose value appears in ``nums``."""
    removed = set(nums)
    dummy = ListNode(0, head)
    parent = dummy
    while parent.next is not None:
        if parent.next.val in removed:
            parent.next = parent.next.next
        else:
            parent = parent.next
    return dummy.next


def _matches_downward(node: Optional[ListNode], tree: Optional[TreeNode]) -> bool:
    if node is None:
        return True
    if tree is None or tree.val != node.val:
        return False
    return _matches_downward(node.next, tree.left) or _matches_downward(node.next, tree.right)


def is_sub_path(head: Optional[ListNode], root: Optional[TreeNode]) -> bool:
    """Tell whether the list appears as a downward path in the tree."""
    if root is None:
        return False
    return (
        _matches_downward(head, root)
        or is_sub_path(head, root.left)
        or is_sub_path(head, root.right)
    )


def _path_to(root: TreeNode, target: int) -> str:
    stack = [(root, "")]
    while stack:
        node, path = stack.pop()
        if node.val == target:
            return path
        if node.right is not None:
            stack.append((node.right, path + "R"))
        if node.left is not None:
            stack.append((node.left, path + "L"))
    raise ValueError(f"value {target} not found in tree")


def get_directions(root: Optional[TreeNode], start_value: int, dest_value: int) -> str:
    """Return the moves ('U', 'L', 'R') leading from one tree value to another."""
    if root is None:
        raise ValueError("tree is empty")
    start_path = _path_to(root, start_value)
    dest_path = _path_to(root, dest_value)
    common = sum(1 for _ in takewhile(lambda pair: pair[0] == pair[1], zip(start_path, dest_path)))
    return "U" * (len(start_path) - common) + dest_path[common:]