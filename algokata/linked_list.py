"""Singly linked lists and the classic exercises built on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Optional


class ListNode:
    """A node of a singly linked list."""

    __slots__ = ("val", "next")

    def __init__(self, val: int = 0, next: Optional["ListNode"] = None) -> None:
        self.val = val
        self.next = next

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node to the end of the list."""
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; None when empty."""
    head: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of the list starting at ``head``."""
    return [] if head is None else list(head)


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether following ``next`` from ``head`` ever revisits a node."""
    seen: set[int] = set()
    node = head
    while node is not None:
        if id(node) in seen:
            return True
        seen.add(id(node))
        node = node.next
    return False


def get_intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node of list A that also belongs to list B, or None."""
    in_b = {id(node) for node in _nodes(head_b)}
    return next((node for node in _nodes(head_a) if id(node) in in_b), None)


def add_two_numbers(l1: Optional[ListNode], l2: Optional[ListNode]) -> ListNode:
    """Add two numbers stored as digit lists, least significant digit first."""
    if l1 is None or l2 is None:
        raise ValueError("both numbers need at least one digit")
    digits: list[int] = []
    carry = 0
    a: Optional[ListNode] = l1
    b: Optional[ListNode] = l2
    while a is not None or b is not None:
        total = carry
        if a is not None:
            total += a.val
            a = a.next
        if b is not None:
            total += b.val
            b = b.next
        carry, digit = divmod(total, 10)
        digits.append(digit)
    if carry:
        digits.append(carry)
    result = build_list(digits)
    assert result is not None
    return result


def remove_elements(head: Optional[ListNode], val: int) -> Optional[ListNode]:
    """Unlink every node holding ``val`` and return the new head."""
    sentinel = ListNode(next=head)
    node = sentinel
    while node.next is not None:
        if node.next.val == val:
            node.next = node.next.next
        else:
            node = node.next
    return sentinel.next


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return a new list with the values of ``head`` in reverse order."""
    return build_list(reversed(to_values(head)))


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Return a new sorted list holding the values of both lists."""
    return build_list(sorted(to_values(list1) + to_values(list2)))


def is_palindrome_list(head: Optional[ListNode]) -> bool:
    """Tell whether the list reads the same in both directions."""
    values = to_values(head)
    return values == values[::-1]


def delete_node(node: ListNode) -> None:
    """Remove ``node`` from its list by taking over its successor."""
    successor = node.next
    if successor is None:
        raise ValueError("cannot delete the last node of a list")
    node.val = successor.val
    node.next = successor.next


def rotate_right(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Rotate the list ``k`` places to the right, relinking it in place."""
    if head is None:
        return None
    length = 1
    tail = head
    while tail.next is not None:
        length += 1
        tail = tail.next
    tail.next = head
    new_tail = head
    for _ in range(length - k % length - 1):
        assert new_tail.next is not None
        new_tail = new_tail.next
    new_head = new_tail.next
    new_tail.next = None
    return new_head


def middle_node(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the middle node; the second of the two middles for even lengths."""
    nodes = list(_nodes(head))
    return nodes[len(nodes) // 2] if nodes else None


def reverse_between(head: Optional[ListNode], left: int, right: int) -> ListNode:
    """Return a list with positions ``left`` to ``right`` (1-based) reversed."""
    if head is None:
        raise ValueError("cannot reverse part of an empty list")
    if head.next is None or left == right:
        return head
    values = to_values(head)
    start = left - 1
    values[start:right] = values[start:right][::-1]
    result = build_list(values)
    assert result is not None
    return result