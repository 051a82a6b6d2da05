"""First-come, first-served service queue."""

from __future__ import annotations

from collections import deque
from typing import Iterator

from .patient import Patient


class EmptyQueueError(LookupError):
    """Raised when taking a patient from an empty queue."""


class ServiceQueue:
    """Patients waiting for service, head first."""

    def __init__(self) -> None:
        self._patients: deque[Patient] = deque()

    def enqueue(self, patient: Patient) -> None:
        """Add a patient at the end of the queue."""
        self._patients.append(patient)

    def dequeue(self) -> Patient:
        """Remove and return the patient at the head of the queue."""
        if not self._patients:
            raise EmptyQueueError("Fila vazia.")
        return self._patients.popleft()

    def remove(self, patient: Patient) -> None:
        """Remove the first occurrence of a patient; ValueError if absent."""
        try:
            self._patients.remove(patient)
        except ValueError:
            raise ValueError("patient is not in the queue") from None

    def push_front(self, patient: Patient) -> None:
        """Put a patient at the head of the queue regardless of order."""
        self._patients.appendleft(patient)

    def clear(self) -> None:
        """Empty the queue."""
        self._patients.clear()

    def __iter__(self) -> Iterator[Patient]:
        return iter(self._patients)

    def __len__(self) -> int:
        return len(self._patients)