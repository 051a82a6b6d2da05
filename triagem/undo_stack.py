"""Stack of queue actions that can be undone."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from .patient import Patient


class Action(Enum):
    """What happened to a patient in the service queue."""

    ADDED = 0
    REMOVED = 1

    @property
    def label(self) -> str:
        """Text shown in the action log."""
        return "Adicionado" if self is Action.ADDED else "Removido"


@dataclass(frozen=True)
class ActionRecord:
    """One logged action."""

    patient: Patient
    action: Action


class EmptyStackError(LookupError):
    """Raised when popping from an empty stack."""


class UndoStack:
    """Logged actions, the most recent on top."""

    def __init__(self) -> None:
        self._records: list[ActionRecord] = []

    def push(self, patient: Patient, action: Action) -> None:
        """Record an action on top of the stack."""
        self._records.append(ActionRecord(patient, action))

    def pop(self) -> ActionRecord:
        """Remove and return the most recent action."""
        if not self._records:
            raise EmptyStackError("Pilha vazia.")
        return self._records.pop()

    def clear(self) -> None:
        """Forget every action."""
        self._records.clear()

    def __iter__(self) -> Iterator[ActionRecord]:
        """Iterate from the most recent action to the oldest."""
        return reversed(self._records)

    def __len__(self) -> int:
        return len(self._records)