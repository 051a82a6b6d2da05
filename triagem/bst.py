"""Binary search trees of patients ordered by entry date parts or age."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator

from .patient import Patient


class SortKey(Enum):
    """Field a patient tree is ordered by."""

    YEAR = 1
    MONTH = 2
    DAY = 3
    AGE = 4

    def of(self, patient: Patient) -> int:
        """Return the value of this key for a patient."""
        if self is SortKey.YEAR:
            return patient.entry.year
        if self is SortKey.MONTH:
            return patient.entry.month
        if self is SortKey.DAY:
            return patient.entry.day
        return patient.age


@dataclass(eq=False)
class _Node:
    patient: Patient
    left: _Node | None = None
    right: _Node | None = None


class PatientTree:
    """Unbalanced binary search tree; equal keys go to the right."""

    def __init__(self, key: SortKey) -> None:
        self.key = key
        self._root: _Node | None = None
        self._size = 0

    def insert(self, patient: Patient) -> None:
        """Add a patient at the position its key gives it."""
        node = _Node(patient)
        if self._root is None:
            self._root = node
        else:
            value = self.key.of(patient)
            current = self._root
            while True:
                if value < self.key.of(current.patient):
                    if current.left is None:
                        current.left = node
                        break
                    current = current.left
                else:
                    if current.right is None:
                        current.right = node
                        break
                    current = current.right
        self._size += 1

    def remove(self, patient: Patient) -> None:
        """Remove this very patient; LookupError if it is not in the tree."""
        value = self.key.of(patient)
        parent: _Node | None = None
        node = self._root
        while node is not None and node.patient is not patient:
            parent = node
            node = node.left if value < self.key.of(node.patient) else node.right

        if node is None:
            raise LookupError("Paciente não encontrado na árvore.")

        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.patient = successor.patient
            self._replace_child(successor_parent, successor, successor.right)
        else:
            child = node.left if node.left is not None else node.right
            self._replace_child(parent, node, child)

        self._size -= 1

    def _replace_child(
        self, parent: _Node | None, old: _Node, new: _Node | None
    ) -> None:
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def in_order(self) -> Iterator[Patient]:
        """Patients from the smallest key to the largest."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.patient
            node = node.right

    def pre_order(self) -> Iterator[Patient]:
        """Patients with each node before its subtrees."""
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node.patient
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def post_order(self) -> Iterator[Patient]:
        """Patients with each node after its subtrees."""
        reverse: list[Patient] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            reverse.append(node.patient)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        yield from reversed(reverse)

    def clear(self) -> None:
        """Remove every patient."""
        self._root = None
        self._size = 0

    def __len__(self) -> int:
        return self._size


class TreeIndex:
    """The four search trees kept over the registered patients."""

    def __init__(self) -> None:
        self.year = PatientTree(SortKey.YEAR)
        self.month = PatientTree(SortKey.MONTH)
        self.day = PatientTree(SortKey.DAY)
        self.age = PatientTree(SortKey.AGE)

    def _trees(self) -> tuple[PatientTree, ...]:
        return (self.year, self.month, self.day, self.age)

    def add(self, patient: Patient) -> None:
        """Insert a patient into every tree."""
        for tree in self._trees():
            tree.insert(patient)

    def rebuild(self, patients: Iterable[Patient]) -> None:
        """Empty every tree and fill them again from the given patients."""
        self.clear()
        for patient in patients:
            self.add(patient)

    def rebuild_age(self, patients: Iterable[Patient]) -> None:
        """Empty the age tree and fill it again from the given patients."""
        self.age.clear()
        for patient in patients:
            self.age.insert(patient)

    def clear(self) -> None:
        """Empty every tree."""
        for tree in self._trees():
            tree.clear()