"""Bounded max-heap of patients ordered by age."""

from __future__ import annotations

from typing import Iterator

from .patient import Patient

DEFAULT_CAPACITY = 100


class HeapFullError(OverflowError):
    """Raised when inserting into a full heap."""


class HeapEmptyError(LookupError):
    """Raised when taking from an empty heap."""


def left_child(index: int) -> int:
    """Index of the left child of a node."""
    return 2 * index + 1


def right_child(index: int) -> int:
    """Index of the right child of a node."""
    return 2 * index + 2


def parent(index: int) -> int:
    """Index of the parent of a node; the root is its own parent."""
    return (index - 1) // 2 if index > 0 else 0


class PriorityHeap:
    """Priority queue in which the oldest patient is served first."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Patient] = []

    def _sift_down(self, index: int) -> None:
        size = len(self._items)
        while True:
            largest = index
            for child in (left_child(index), right_child(index)):
                if child < size and self._items[child].age > self._items[largest].age:
                    largest = child
            if largest == index:
                return
            self._items[index], self._items[largest] = (
                self._items[largest],
                self._items[index],
            )
            index = largest

    def _build(self) -> None:
        for index in range(len(self._items) // 2, -1, -1):
            self._sift_down(index)

    def insert(self, patient: Patient) -> None:
        """Add a patient; HeapFullError when at capacity."""
        if self.is_full():
            raise HeapFullError("Heap cheia!")
        self._items.append(patient)
        self._build()

    def pop(self) -> Patient:
        """Remove and return the patient with the highest age."""
        if not self._items:
            raise HeapEmptyError("Heap vazia!")
        top = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._sift_down(0)
        return top

    def is_full(self) -> bool:
        """Whether the heap holds as many patients as it can."""
        return len(self._items) >= self.capacity

    def clear(self) -> None:
        """Remove every patient."""
        self._items.clear()

    def __iter__(self) -> Iterator[Patient]:
        """Iterate in heap storage order, the top first."""
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)