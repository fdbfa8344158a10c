"""Singly linked lists and the classic algorithms over them."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    val: int
    next: Optional["ListNode"] = None


class LinkedList:
    """A singly linked list that tracks both ends."""

    def __init__(self) -> None:
        self.head: Optional[ListNode] = None
        self.tail: Optional[ListNode] = None

    def push_front(self, val: int) -> None:
        """Insert ``val`` before the head."""
        node = ListNode(val, self.head)
        if self.head is None:
            self.tail = node
        self.head = node

    def push_back(self, val: int) -> None:
        """Append ``val`` after the tail."""
        node = ListNode(val)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node

    def __iter__(self) -> Iterator[int]:
        return _walk(self.head)

    def format(self) -> str:
        """Render the list as ``a->b->...->NULL``."""
        return "".join(f"{val}->" for val in self) + "NULL"


def _walk(head: Optional[ListNode]) -> Iterator[int]:
    node = head
    while node is not None:
        yield node.val
        node = node.next


def _length(head: Optional[ListNode]) -> int:
    return sum(1 for _ in _walk(head))


def _advance(node: Optional[ListNode], steps: int) -> Optional[ListNode]:
    for _ in range(steps):
        assert node is not None
        node = node.next
    return node


def from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a chain of nodes holding ``values``; return its head."""
    dummy = ListNode(0)
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of an acyclic chain starting at ``head``."""
    return list(_walk(head))


def remove_elements(head: Optional[ListNode], val: int) -> Optional[ListNode]:
    """Unlink every node holding ``val``; return the new head."""
    dummy = ListNode(0, head)
    prev = dummy
    while prev.next is not None:
        if prev.next.val == val:
            prev.next = prev.next.next
        else:
            prev = prev.next
    return dummy.next


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether following ``next`` from ``head`` ever loops."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def get_intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node shared by both chains, or None."""
    len_a, len_b = _length(head_a), _length(head_b)
    a = _advance(head_a, max(len_a - len_b, 0))
    b = _advance(head_b, max(len_b - len_a, 0))
    while a is not None and b is not None and a is not b:
        a, b = a.next, b.next
    return a


def middle_node(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the middle node; for an even length, the second of the two middles."""
    return _advance(head, _length(head) // 2)


def remove_cycle(head: Optional[ListNode]) -> bool:
    """Break the cycle reachable from ``head``, if any; return whether there was one."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            break
    else:
        return False

    assert fast is not None
    slow = head
    if slow is fast:
        while fast.next is not slow:
            fast = fast.next
        fast.next = None
        return True

    prev = fast
    while slow is not fast:
        slow = slow.next
        prev = fast
        fast = fast.next
    prev.next = None
    return True


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the ``n``-th node counted from the end (1-based); return the new head."""
    count = _length(head)
    if not 1 <= n <= count:
        raise ValueError(f"n must be between 1 and {count}, got {n}")
    index = count - n
    if index == 0:
        assert head is not None
        return head.next
    before = _advance(head, index - 1)
    assert before is not None and before.next is not None
    before.next = before.next.next
    return head