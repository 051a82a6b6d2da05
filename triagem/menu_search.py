"""Search menu: registered patients listed by entry date parts or age."""

from __future__ import annotations

from .bst import PatientTree
from .views import Console, bottom_line, isolated_title, menu_item, menu_title

_MENU_ITEMS = (
    "1. Registros por Ano",
    "2. Registros por Mes",
    "3. Registros por Dia",
    "4. Registros por Idade",
    "0. Voltar ao Menu Principal",
)


def show_search_menu(console: Console) -> None:
    """Display the search menu."""
    console.clear()
    console.write(
        menu_title("Pesquisar") + "".join(map(menu_item, _MENU_ITEMS)) + bottom_line()
    )


def show_records(console: Console, tree: PatientTree, title: str) -> None:
    """Show every patient of a tree from the smallest key to the largest."""
    console.clear()
    console.write(isolated_title(title))
    if not len(tree):
        console.write("Nenhum registro encontrado.\n\n")
        console.pause()
        return

    console.write("".join(patient.describe() for patient in tree.in_order()))
    console.pause()