"""Binary heap ordered by a caller-supplied predicate."""

from __future__ import annotations

import heapq
import operator
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

from .errors import EmptyContainerError

T = TypeVar("T")

Outranks = Callable[[Any, Any], bool]


class _Entry(Generic[T]):
    """Heap slot comparing items through the owning heap's predicate."""

    __slots__ = ("item", "_greater_than")

    def __init__(self, item: T, greater_than: Outranks) -> None:
        self.item = item
        self._greater_than = greater_than

    def __lt__(self, other: _Entry[T]) -> bool:
        # heapq keeps the smallest entry first; "smaller" means higher priority.
        return self._greater_than(self.item, other.item)


class PriorityHeap(Generic[T]):
    """Mutable heap returning the element of highest priority first.

    ``greater_than(a, b)`` must return ``True`` when ``a`` has strictly higher
    priority than ``b``. The default, :func:`operator.gt`, yields a max-heap.
    Duplicates are kept as independent entries.
    """

    def __init__(
        self,
        greater_than: Outranks = operator.gt,
        *,
        items: Iterable[T] = (),
    ) -> None:
        self._greater_than = greater_than
        self._heap: list[_Entry[T]] = [_Entry(item, greater_than) for item in items]
        if self._heap:
            heapq.heapify(self._heap)

    @classmethod
    def from_iterable(
        cls, items: Iterable[T], greater_than: Outranks = operator.gt
    ) -> PriorityHeap[T]:
        """Build a heap from existing elements in linear time."""

        return cls(greater_than, items=items)

    def push(self, item: T) -> None:
        heapq.heappush(self._heap, _Entry(item, self._greater_than))

    def pop(self) -> T:
        """Remove and return the element of highest priority."""

        if not self._heap:
            raise EmptyContainerError("pop")
        return heapq.heappop(self._heap).item

    def peek(self) -> T:
        if not self._heap:
            raise EmptyContainerError("peek")
        return self._heap[0].item

    def size(self) -> int:
        return len(self._heap)

    def clear(self) -> None:
        self._heap.clear()

    def take(self) -> PriorityHeap[T]:
        """Move every element into a new heap, leaving this one empty."""

        moved: PriorityHeap[T] = PriorityHeap(self._greater_than)
        moved._heap, self._heap = self._heap, []
        return moved

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __iter__(self) -> Iterator[T]:
        # Heap order, not priority order.
        return (entry.item for entry in self._heap)

    def __copy__(self) -> PriorityHeap[T]:
        raise TypeError("PriorityHeap cannot be copied; use take() to move it")

    def __deepcopy__(self, memo: dict[int, Any]) -> PriorityHeap[T]:
        raise TypeError("PriorityHeap cannot be copied; use take() to move it")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={len(self._heap)})"


__all__ = ["Outranks", "PriorityHeap"]
