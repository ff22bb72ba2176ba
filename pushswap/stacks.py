"""The two-stack machine and its recorded operations."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


class PushSwap:
    """Two stacks, a and b, with the top of each at index 0.

    Every operation that changes the stacks is appended to ``ops``;
    an operation that cannot apply does nothing and is not recorded.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.ops: list[str] = []

    def pa(self) -> None:
        """Move the top of b onto a."""
        if not self.b:
            return
        self.a.appendleft(self.b.popleft())
        self.ops.append("pa")

    def pb(self) -> None:
        """Move the top of a onto b."""
        if not self.a:
            return
        self.b.appendleft(self.a.popleft())
        self.ops.append("pb")

    def ra(self) -> None:
        """Rotate a: the top element goes to the bottom."""
        if len(self.a) <= 1:
            return
        self.a.rotate(-1)
        self.ops.append("ra")

    def sa(self) -> None:
        """Swap the two top elements of a."""
        if len(self.a) <= 1:
            return
        first = self.a.popleft()
        second = self.a.popleft()
        self.a.appendleft(first)
        self.a.appendleft(second)
        self.ops.append("sa")

    def rra(self) -> None:
        """Reverse-rotate a: the bottom element goes to the top."""
        if len(self.a) <= 1:
            return
        self.a.rotate(1)
        self.ops.append("rra")