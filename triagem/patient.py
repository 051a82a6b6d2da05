"""Patient records and their entry dates."""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field


@dataclass(frozen=True)
class EntryDate:
    """Calendar day on which a patient was registered."""

    day: int
    month: int
    year: int

    @classmethod
    def today(cls) -> EntryDate:
        """Return the current local date."""
        now = datetime.date.today()
        return cls(now.day, now.month, now.year)

    def __str__(self) -> str:
        return f"{self.day:02d}/{self.month:02d}/{self.year:04d}"


@dataclass(eq=False)
class Patient:
    """A registered patient.

    Patients compare by identity: two records with the same data are still
    different patients as far as lists, queues and trees are concerned.
    """

    name: str
    rg: str
    age: int
    entry: EntryDate = field(default_factory=EntryDate.today)

    def is_valid(self) -> bool:
        """A patient can be queued only with a positive age."""
        return self.age > 0

    def describe(self) -> str:
        """Return the patient's data as shown on screen."""
        return (
            f"Nome: {self.name}\n"
            f"RG: {self.rg}\n"
            f"Idade: {self.age}\n"
            f"Entrada: {self.entry}\n"
            "\n"
        )


def create_patient(name: str, rg: str, age: int) -> Patient:
    """Create a patient whose entry date is today."""
    return Patient(name, rg, age, EntryDate.today())