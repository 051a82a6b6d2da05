"""About screen."""

from __future__ import annotations

from .views import Console, bottom_line, menu_item, menu_title

_ABOUT_ITEMS = (
    "Ciclo: 7",
    "Curso: Engenharia de Robos",
    "Disciplina: Estruturas de Dados",
    "14/05/2025",
)


def show_about_menu(console: Console) -> None:
    """Display information about the program."""
    console.clear()
    console.write(
        menu_title("Sobre") + "".join(map(menu_item, _ABOUT_ITEMS)) + bottom_line()
    )