from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, Iterator, List, Optional, Tuple, TypeVar

from .errors import CapacityExceeded

T = TypeVar("T")


@dataclass(frozen=True)
class Request:
    """A floor-to-floor trip waiting for an elevator."""

    request_id: int
    start_floor: int
    target_floor: int
    created_at: int = 0


class RequestQueue:
    """Bounded FIFO of pending requests, kept in arrival order."""

    def __init__(self, capacity: int = 100) -> None:
        self.capacity = capacity
        self._items: Deque[Request] = deque()

    def enqueue(self, request: Request) -> None:
        if self.is_full:
            raise CapacityExceeded(self.capacity)
        self._items.append(request)

    @property
    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def drain_matching(self, match: Callable[[Request], Optional[T]]) -> List[Tuple[Request, T]]:
        """Remove every request ``match`` accepts, in one pass over arrival order.

        ``match`` returns ``None`` to leave a request queued. Requests left in
        the queue keep their relative order.
        """
        matched: List[Tuple[Request, T]] = []
        remaining: Deque[Request] = deque()
        for request in self._items:
            result = match(request)
            if result is None:
                remaining.append(request)
            else:
                matched.append((request, result))
        self._items = remaining
        return matched

    def __iter__(self) -> Iterator[Request]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)
