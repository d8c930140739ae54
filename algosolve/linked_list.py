"""Singly linked list nodes and the classic operations on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    val: int = 0
    next: Optional[ListNode] = field(default=None, repr=False)

    def __repr__(self) -> str:
        return f"ListNode(val={self.val!r})"


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order and return its head."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of an acyclic list in order."""
    if has_cycle(head):
        raise ValueError("list contains a cycle")
    return [node.val for node in _nodes(head)]


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether following ``next`` from ``head`` ever loops."""
    if head is None or head.next is None:
        return False
    slow, fast = head, head.next
    while fast is not None and fast.next is not None:
        if slow is fast:
            return True
        slow = slow.next
        fast = fast.next.next
    return False


def detect_cycle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the node where the cycle begins, or None if there is none."""
    if head is None or head.next is None:
        return None
    slow = fast = entry = head
    while fast.next is not None and fast.next.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            while entry is not slow:
                slow = slow.next
                entry = entry.next
            return entry
    return None


def get_intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node shared by both lists, or None."""
    if head_a is None or head_b is None:
        return None
    a, b = head_a, head_b
    while a is not b:
        a = head_b if a is None else a.next
        b = head_a if b is None else b.next
    return a


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the n-th node counted from the end (1-based); return the head."""
    if n < 1:
        raise ValueError("n must be at least 1")
    fast = head
    for _ in range(n):
        if fast is None:
            raise ValueError("n exceeds the length of the list")
        fast = fast.next
    if fast is None:
        return head.next
    slow = head
    while fast.next is not None:
        fast = fast.next
        slow = slow.next
    slow.next = slow.next.next
    return head


def add_two_numbers(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Add two numbers stored as digit lists, least significant digit first."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None or carry:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return the new head."""
    new_head = None
    while head is not None:
        head.next, new_head, head = new_head, head, head.next
    return new_head


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list; ties favour ``list1``."""
    dummy = ListNode(-1)
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val <= list2.val:
            tail.next, list1 = list1, list1.next
        else:
            tail.next, list2 = list2, list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def is_palindrome(head: Optional[ListNode]) -> bool:
    """Tell whether the values read the same both ways; the list is left intact."""
    if head is None or head.next is None:
        return True
    slow = fast = head
    while fast.next is not None and fast.next.next is not None:
        slow = slow.next
        fast = fast.next.next
    middle = slow
    middle.next = reverse_list(middle.next)
    result = all(
        left.val == right.val for left, right in zip(_nodes(head), _nodes(middle.next))
    )
    middle.next = reverse_list(middle.next)
    return result


def delete_node(node: ListNode) -> None:
    """Remove ``node`` from its list without access to the head."""
    if node.next is None:
        raise ValueError("cannot delete the tail node")
    node.val = node.next.val
    node.next = node.next.next


def rotate_right(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Rotate the list right by ``k`` places and return the new head."""
    if k < 0:
        raise ValueError("k must not be negative")
    if head is None or head.next is None or k == 0:
        return head
    count = 1
    tail = head
    while tail.next is not None:
        tail = tail.next
        count += 1
    tail.next = head
    node = tail
    for _ in range(count - k % count):
        node = node.next
    new_head = node.next
    node.next = None
    return new_head