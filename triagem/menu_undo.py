"""Undo menu: action log and undoing the last queue action."""

from __future__ import annotations

from .service_queue import ServiceQueue
from .undo_stack import Action, ActionRecord, UndoStack
from .views import Console, bottom_line, isolated_title, menu_item, menu_title

_MENU_ITEMS = (
    "1. Log de Acoes",
    "2. Desfazer Ultima Acao",
    "0. Voltar ao Menu Principal",
)


def show_undo_menu(console: Console) -> None:
    """Display the undo menu."""
    console.clear()
    console.write(
        menu_title("Desfazer") + "".join(map(menu_item, _MENU_ITEMS)) + bottom_line()
    )


def show_action_log(console: Console, stack: UndoStack) -> None:
    """List logged actions, the most recent first."""
    console.clear()
    console.write(isolated_title("Log de Acoes"))
    if not stack:
        console.write("Nenhuma acao registrada.\n\n")
        console.pause()
        return

    console.write(
        "".join(
            f"Paciente: {record.patient.name} | Acao: {record.action.label}\n"
            for record in stack
        )
    )
    console.write("\n")
    console.pause()


def undo_last_action(
    console: Console, stack: UndoStack, queue: ServiceQueue
) -> ActionRecord | None:
    """Reverse the most recent queue action and return it."""
    console.clear()
    console.write(isolated_title("Desfazer Ultima Acao"))
    if not stack:
        console.write("Nenhuma acao registrada.\n\n")
        console.pause()
        return None

    record = stack.pop()
    patient = record.patient
    if record.action is Action.ADDED:
        console.write(f"Paciente {patient.name} removido da fila.\n")
        if len(queue) == 1:
            queue.dequeue()
        else:
            try:
                queue.remove(patient)
            except ValueError:
                pass
    else:
        console.write(f"Paciente {patient.name} adicionado novamente a fila.\n")
        queue.push_front(patient)

    console.pause()
    return record