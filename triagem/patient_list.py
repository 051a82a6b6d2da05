"""Registry of all patients, newest first."""

from __future__ import annotations

from collections import deque
from typing import Iterator

from .patient import Patient


class PatientList:
    """Registered patients, the most recently added first."""

    def __init__(self) -> None:
        self._patients: deque[Patient] = deque()

    def add(self, patient: Patient) -> None:
        """Register a patient at the front of the list."""
        self._patients.appendleft(patient)

    def remove(self, patient: Patient) -> None:
        """Remove a patient; a patient not in the list is ignored."""
        try:
            self._patients.remove(patient)
        except ValueError:
            pass

    def find(self, rg: str) -> Patient | None:
        """Return the first patient with this RG, or None."""
        return next((p for p in self._patients if p.rg == rg), None)

    def clear(self) -> None:
        """Remove every patient."""
        self._patients.clear()

    def __iter__(self) -> Iterator[Patient]:
        return iter(self._patients)

    def __len__(self) -> int:
        return len(self._patients)