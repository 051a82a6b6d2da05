"""Loading and saving the patient registry as a text file."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable

from .bst import TreeIndex
from .patient import EntryDate, Patient
from .patient_list import PatientList
from .views import Console, bottom_line, isolated_title, menu_item, menu_title

_MENU_ITEMS = (
    "1. Carregar Lista de Pacientes",
    "2. Salvar Lista de Pacientes",
    "0. Voltar ao Menu Principal",
)

_INT = r"([+-]?\d+)"
_RECORD = re.compile(
    r"\s*Nome:\s*(\S+)\s+Idade:\s*" + _INT
    + r"\s+RG:\s*(\S+)\s+Entrada:\s*" + _INT + "/" + _INT + "/" + _INT + r"\s*"
)


def show_storage_menu(console: Console) -> None:
    """Display the load/save menu."""
    console.clear()
    console.write(
        menu_title("Carregar/Salvar")
        + "".join(map(menu_item, _MENU_ITEMS))
        + bottom_line()
    )


def parse_records(text: str) -> list[Patient]:
    """Read patients from saved text; ValueError on a malformed record."""
    patients = []
    position = 0
    while text[position:].strip():
        match = _RECORD.match(text, position)
        if match is None:
            raise ValueError(f"malformed patient record at offset {position}")
        name, age, rg, day, month, year = match.groups()
        patients.append(
            Patient(name, rg, int(age), EntryDate(int(day), int(month), int(year)))
        )
        position = match.end()
    return patients


def format_records(patients: Iterable[Patient]) -> str:
    """Write patients in the saved text format."""
    return "".join(
        f"Nome: {p.name}\nIdade: {p.age}\nRG: {p.rg}\n"
        f"Entrada: {p.entry.day}/{p.entry.month}/{p.entry.year}\n\n"
        for p in patients
    )


def load_file(
    console: Console, path: str | Path, patients: PatientList, index: TreeIndex
) -> list[Patient]:
    """Add every patient stored in a file to the registry and trees."""
    text = Path(path).read_text(encoding="utf-8")
    console.clear()
    console.write(isolated_title("Carregar Lista de Pacientes"))

    loaded = parse_records(text)
    for patient in loaded:
        patients.add(patient)
        index.add(patient)

    console.write("\nLista de pacientes carregada com sucesso!\n\n")
    console.pause()
    return loaded


def save_file(console: Console, path: str | Path, patients: PatientList) -> None:
    """Write the registry to a file, replacing its content."""
    with open(path, "w", encoding="utf-8") as stream:
        console.clear()
        console.write(isolated_title("Salvar Lista de Pacientes"))
        stream.write(format_records(patients))

    console.write("\nLista de pacientes salva com sucesso!\n\n")
    console.pause()