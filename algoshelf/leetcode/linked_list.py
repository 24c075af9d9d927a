"""Singly linked list problems solved by relinking nodes in place."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional[ListNode] = None

    @classmethod
    def from_iterable(cls, values: Iterable[int]) -> Optional[ListNode]:
        """Build a list holding ``values`` in order; ``None`` when there are none."""
        dummy = cls()
        tail = dummy
        for value in values:
            tail.next = cls(value)
            tail = tail.next
        return dummy.next

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the ``n``-th node counted from the end (1 is the last node)."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    lead = head
    for _ in range(n):
        if lead is None:
            raise ValueError(f"the list is shorter than {n} nodes")
        lead = lead.next
    assert head is not None
    if lead is None:
        return head.next
    trail = head
    lead = lead.next
    while lead is not None:
        trail = trail.next  # type: ignore[assignment]
        lead = lead.next
    trail.next = trail.next.next  # type: ignore[union-attr]
    return head


def add_two_numbers(
    l1: Optional[ListNode], l2: Optional[ListNode]
) -> Optional[ListNode]:
    """Sum of two numbers whose decimal digits are stored least significant first."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None or carry:
        value = carry
        if l1 is not None:
            value += l1.val
            l1 = l1.next
        if l2 is not None:
            value += l2.val
            l2 = l2.next
        carry, digit = divmod(value, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    prev: Optional[ListNode] = None
    node = head
    while node is not None:
        node.next, prev, node = prev, node, node.next
    return prev


def delete_middle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Unlink the node at index ``len // 2``; a list of fewer than two nodes becomes empty."""
    if head is None or head.next is None:
        return None
    prev = head
    slow = head.next
    fast = head.next.next
    while fast is not None and fast.next is not None:
        prev = slow  # type: ignore[assignment]
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
    prev.next = slow.next  # type: ignore[union-attr]
    return head


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list."""
    dummy = ListNode()
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val < list2.val:
            tail.next, list1 = list1, list1.next
        else:
            tail.next, list2 = list2, list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def pair_sum(head: Optional[ListNode]) -> int:
    """Largest sum of a node and its twin (the node at the mirrored position)."""
    first_half: list[int] = []
    slow = fast = head
    while fast is not None and fast.next is not None:
        first_half.append(slow.val)  # type: ignore[union-attr]
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
    best = 0
    while slow is not None and first_half:
        best = max(best, first_half.pop() + slow.val)
        slow = slow.next
    return best


def swap_pairs(head: Optional[ListNode]) -> Optional[ListNode]:
    """Swap every two adjacent nodes and return the new head."""
    dummy = ListNode(next=head)
    prev = dummy
    while prev.next is not None and prev.next.next is not None:
        first = prev.next
        second = first.next
        first.next = second.next
        second.next = first
        prev.next = second
        prev = first
    return dummy.next


def odd_even_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Group nodes at odd positions before those at even positions, keeping order."""
    if head is None or head.next is None:
        return head
    odd = head
    even_head = even = head.next
    while even is not None and even.next is not None:
        odd.next = even.next
        odd = odd.next
        even.next = odd.next
        even = even.next
    odd.next = even_head
    return head