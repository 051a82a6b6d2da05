"""Boxed menu rendering and console input/output."""

from __future__ import annotations

import sys
from typing import Callable

WIDTH = 40

_TOP_LEFT = "\u2554"
_TOP_RIGHT = "\u2557"
_BOTTOM_LEFT = "\u255a"
_BOTTOM_RIGHT = "\u255d"
_HORIZONTAL = "\u2550"
_VERTICAL = "\u2551"
_TEE_LEFT = "\u2560"
_TEE_RIGHT = "\u2563"

_CLEAR_SCREEN = "\x1b[2J\x1b[H"
_PAUSE_MESSAGE = "Pressione qualquer tecla para continuar. . ."


def _rule(left: str, right: str) -> str:
    return f"{left}{_HORIZONTAL * WIDTH}{right}\n"


def _centered(text: str) -> str:
    padding = max(0, (WIDTH - len(text)) // 2)
    return f"{_VERTICAL}{' ' * padding}{text.ljust(WIDTH - padding)}{_VERTICAL}\n"


def top_line() -> str:
    """Upper border of a menu box."""
    return _rule(_TOP_LEFT, _TOP_RIGHT)


def bottom_line() -> str:
    """Lower border of a menu box."""
    return _rule(_BOTTOM_LEFT, _BOTTOM_RIGHT)


def menu_item(text: str) -> str:
    """One left-aligned line inside a menu box."""
    return f"{_VERTICAL}{text.ljust(WIDTH)}{_VERTICAL}\n"


def menu_title(text: str) -> str:
    """Top border, centred title and separator opening a menu box."""
    return top_line() + _centered(text) + _rule(_TEE_LEFT, _TEE_RIGHT)


def isolated_title(text: str) -> str:
    """A closed box holding only a centred title, followed by a blank line."""
    return top_line() + _centered(text) + bottom_line() + "\n"


def main_menu() -> str:
    """The main menu box."""
    items = (
        "1. Cadastrar",
        "2. Atendimento",
        "3. Atendimento Prioritario",
        "4. Pesquisar",
        "5. Desfazer",
        "6. Carregar/Salvar",
        "7. Sobre",
        "0. Sair",
    )
    return menu_title("Menu Principal") + "".join(map(menu_item, items)) + bottom_line()


def _stdout_write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


class Console:
    """Terminal input and output through replaceable callables.

    ``input_fn`` takes no arguments and returns one line of input;
    ``output_fn`` receives text to display.
    """

    def __init__(
        self,
        input_fn: Callable[[], str] | None = None,
        output_fn: Callable[[str], None] | None = None,
    ) -> None:
        self._input = input_fn if input_fn is not None else input
        self._output = output_fn if output_fn is not None else _stdout_write

    def write(self, text: str) -> None:
        """Display text as is."""
        self._output(text)

    def prompt(self, text: str) -> str:
        """Show a prompt and return the first word typed, skipping blank lines."""
        self.write(text)
        while True:
            words = self._input().split()
            if words:
                return words[0]

    def read_int(self, text: str) -> int:
        """Show a prompt until an integer is typed and return it."""
        while True:
            answer = self.prompt(text)
            try:
                return int(answer)
            except ValueError:
                continue

    def read_option(self) -> int:
        """Ask for a menu option."""
        self.write("\n")
        return self.read_int("Digite uma opcao: ")

    def pause(self) -> None:
        """Wait for the user to press Enter."""
        self.write(_PAUSE_MESSAGE)
        self._input()
        self.write("\n")

    def clear(self) -> None:
        """Clear the terminal screen."""
        self.write(_CLEAR_SCREEN)