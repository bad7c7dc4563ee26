"""Singly linked lists and the classic algorithms that rearrange them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: ListNode | None = None

    def __iter__(self) -> Iterator[int]:
        return _values(self)

    def __repr__(self) -> str:
        return f"ListNode({list(self)!r})"


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def _values(head: ListNode | None) -> Iterator[int]:
    return (node.val for node in _nodes(head))


def _reverse(head: ListNode | None) -> ListNode | None:
    prev = None
    while head is not None:
        head.next, prev, head = prev, head, head.next
    return prev


def _middle(head: ListNode) -> ListNode:
    """Return the middle node, the first of the two middles for even lengths."""
    slow, fast = head, head.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def from_values(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order."""
    head = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_values(head: ListNode | None) -> list[int]:
    """Return the values of the list starting at ``head``."""
    return list(_values(head))


def reverse_k_group(head: ListNode | None, k: int) -> ListNode | None:
    """Reverse the list in groups of ``k`` nodes; a short tail stays as it is."""
    if k < 1:
        raise ValueError("group size must be at least 1")
    if k == 1 or head is None:
        return head

    groups = sum(1 for _ in _nodes(head)) // k
    dummy = ListNode(0, head)
    tail = dummy
    current = head
    for _ in range(groups):
        group_head = current
        prev = None
        for _ in range(k):
            current.next, prev, current = prev, current, current.next
        tail.next = prev
        tail = group_head
    tail.next = current
    return dummy.next


def _merge(left: ListNode | None, right: ListNode | None) -> ListNode | None:
    dummy = ListNode(-1)
    tail = dummy
    while left is not None and right is not None:
        if left.val <= right.val:
            tail.next, left = left, left.next
        else:
            tail.next, right = right, right.next
        tail = tail.next
    tail.next = left if left is not None else right
    return dummy.next


def sort_list(head: ListNode | None) -> ListNode | None:
    """Sort the list by merge sort and return its new head."""
    if head is None or head.next is None:
        return head
    middle = _middle(head)
    right = middle.next
    middle.next = None
    return _merge(sort_list(head), sort_list(right))


def is_palindrome(head: ListNode | None) -> bool:
    """Tell whether the list reads the same both ways; the list is left intact."""
    if head is None:
        return True
    middle = _middle(head)
    second = _reverse(middle.next)
    try:
        return all(a == b for a, b in zip(_values(head), _values(second)))
    finally:
        middle.next = _reverse(second)


def delete_node(node: ListNode) -> None:
    """Remove ``node`` from its list, given only the node itself."""
    if node.next is None:
        raise ValueError("cannot delete the last node of a list")
    node.val, node.next = node.next.val, node.next.next


def odd_even_list(head: ListNode | None) -> ListNode | None:
    """Group nodes at odd positions before nodes at even positions."""
    if head is None:
        return None
    odd = head
    even_head = even = head.next
    while even is not None and even.next is not None:
        odd.next = even.next
        odd = odd.next
        even.next = odd.next
        even = even.next
    odd.next = even_head
    return head