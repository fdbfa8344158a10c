"""A last-in first-out stack and a helper that inserts at its bottom."""

from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")


class Stack(Generic[T]):
    """A last-in first-out stack."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    def push(self, val: T) -> None:
        """Put ``val`` on top."""
        self._items.appendleft(val)

    def pop(self) -> T:
        """Remove and return the top value; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.popleft()

    def top(self) -> T:
        """Return the top value without removing it; raise IndexError when empty."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[0]

    def is_empty(self) -> bool:
        """Tell whether the stack holds no values."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


def push_at_bottom(stack: Stack[T], val: T) -> None:
    """Place ``val`` beneath every value already on ``stack``."""
    if stack.is_empty():
        stack.push(val)
        return
    top = stack.pop()
    push_at_bottom(stack, val)
    stack.push(top)