"""The interactive clinic application."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Mapping

from .bst import TreeIndex
from .menu_about import show_about_menu
from .menu_priority import (
    dequeue_priority,
    enqueue_priority,
    show_priority_menu,
    show_priority_queue,
)
from .menu_register import (
    ask_patient,
    consult_patient,
    register_new_patient,
    remove_patient,
    show_full_list,
    show_register_menu,
    update_patient,
)
from .menu_search import show_records, show_search_menu
from .menu_service import dequeue_patient, enqueue_patient, show_queue, show_service_menu
from .menu_undo import show_action_log, show_undo_menu, undo_last_action
from .patient_list import PatientList
from .priority_heap import PriorityHeap
from .service_queue import ServiceQueue
from .storage import load_file, save_file, show_storage_menu
from .undo_stack import UndoStack
from .views import Console, main_menu

DEFAULT_LOAD_PATH = Path("src/pacientes.txt")
DEFAULT_SAVE_PATH = Path("src/pacientesSalvos.txt")

_Action = Callable[[Console], object]


@dataclass
class Clinic:
    """All the structures the application works on."""

    patients: PatientList = field(default_factory=PatientList)
    queue: ServiceQueue = field(default_factory=ServiceQueue)
    heap: PriorityHeap = field(default_factory=PriorityHeap)
    stack: UndoStack = field(default_factory=UndoStack)
    index: TreeIndex = field(default_factory=TreeIndex)
    load_path: Path = DEFAULT_LOAD_PATH
    save_path: Path = DEFAULT_SAVE_PATH

    def _submenu(
        self,
        console: Console,
        show: Callable[[Console], None],
        actions: Mapping[int, _Action],
    ) -> None:
        while True:
            show(console)
            option = console.read_option()
            if option == 0:
                return
            action = actions.get(option)
            if action is not None:
                action(console)

    def _register_actions(self) -> dict[int, _Action]:
        return {
            1: lambda c: register_new_patient(c, self.patients, self.index),
            2: lambda c: consult_patient(c, ask_patient(c, self.patients)),
            3: lambda c: show_full_list(c, self.patients),
            4: lambda c: update_patient(
                c, self.patients, ask_patient(c, self.patients), self.index
            ),
            5: lambda c: remove_patient(
                c, ask_patient(c, self.patients), self.patients, self.index
            ),
        }

    def _service_actions(self) -> dict[int, _Action]:
        return {
            1: lambda c: enqueue_patient(
                c, self.queue, ask_patient(c, self.patients), self.stack
            ),
            2: lambda c: dequeue_patient(c, self.queue, self.stack),
            3: lambda c: show_queue(c, self.queue),
        }

    def _priority_actions(self) -> dict[int, _Action]:
        return {
            1: lambda c: enqueue_priority(c, self.heap, ask_patient(c, self.patients)),
            2: lambda c: dequeue_priority(c, self.heap),
            3: lambda c: show_priority_queue(c, self.heap),
        }

    def _search_actions(self) -> dict[int, _Action]:
        return {
            1: lambda c: show_records(c, self.index.year, "Pesquisar por Ano"),
            2: lambda c: show_records(c, self.index.month, "Pesquisar por Mes"),
            3: lambda c: show_records(c, self.index.day, "Pesquisar por Dia"),
            4: lambda c: show_records(c, self.index.age, "Pesquisar por Idade"),
        }

    def _undo_actions(self) -> dict[int, _Action]:
        return {
            1: lambda c: show_action_log(c, self.stack),
            2: lambda c: undo_last_action(c, self.stack, self.queue),
        }

    def _storage_actions(self) -> dict[int, _Action]:
        return {
            1: lambda c: load_file(c, self.load_path, self.patients, self.index),
            2: lambda c: save_file(c, self.save_path, self.patients),
        }

    def run(self, console: Console) -> None:
        """Run the main menu until the user chooses to leave."""
        submenus = {
            1: (show_register_menu, self._register_actions()),
            2: (show_service_menu, self._service_actions()),
            3: (show_priority_menu, self._priority_actions()),
            4: (show_search_menu, self._search_actions()),
            5: (show_undo_menu, self._undo_actions()),
            6: (show_storage_menu, self._storage_actions()),
        }
        while True:
            console.clear()
            console.write(main_menu())
            option = console.read_option()
            if option == 0:
                return
            if option == 7:
                show_about_menu(console)
                console.pause()
            elif option in submenus:
                show, actions = submenus[option]
                self._submenu(console, show, actions)
            else:
                console.write("Opcao invalida. Tente novamente.\n")


def main(argv: list[str] | None = None) -> int:
    """Start the interactive application."""
    parser = argparse.ArgumentParser(prog="triagem", description="Clinic queue manager.")
    parser.add_argument("--load", type=Path, default=DEFAULT_LOAD_PATH,
                        help="file read by the load option")
    parser.add_argument("--save", type=Path, default=DEFAULT_SAVE_PATH,
                        help="file written by the save option")
    args = parser.parse_args(argv)

    clinic = Clinic(load_path=args.load, save_path=args.save)
    try:
        clinic.run(Console())
    except EOFError:
        return 0
    except OSError as error:
        name = error.filename if error.filename is not None else error
        print(f"Erro ao abrir o arquivo: {name}", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"Erro ao ler o arquivo: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())