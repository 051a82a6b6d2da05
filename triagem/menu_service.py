"""Regular service queue menu."""

from __future__ import annotations

from .patient import Patient
from .service_queue import ServiceQueue
from .undo_stack import Action, UndoStack
from .views import Console, bottom_line, isolated_title, menu_item, menu_title

_MENU_ITEMS = (
    "1. Enfileirar Paciente",
    "2. Desenfileirar Paciente",
    "3. Mostrar Fila",
    "0. Voltar ao Menu Principal",
)


def show_service_menu(console: Console) -> None:
    """Display the service menu."""
    console.clear()
    console.write(
        menu_title("Atendimento") + "".join(map(menu_item, _MENU_ITEMS)) + bottom_line()
    )


def enqueue_patient(
    console: Console,
    queue: ServiceQueue,
    patient: Patient | None,
    stack: UndoStack,
) -> bool:
    """Queue a valid patient and log the action; return whether it was queued."""
    console.clear()
    console.write(isolated_title("Enfileirar Paciente"))
    if patient is None or not patient.is_valid():
        console.write("Paciente invalido.\n\n")
        console.pause()
        return False

    queue.enqueue(patient)
    stack.push(patient, Action.ADDED)

    console.write(f"Paciente {patient.name} enfileirado com sucesso!\n\n")
    console.pause()
    return True


def dequeue_patient(
    console: Console, queue: ServiceQueue, stack: UndoStack
) -> Patient | None:
    """Serve the patient at the head of the queue and log the action."""
    console.clear()
    console.write(isolated_title("Desenfileirar Paciente"))
    if not queue:
        console.write("Fila vazia.\n\n")
        console.pause()
        return None

    patient = queue.dequeue()
    stack.push(patient, Action.REMOVED)

    console.write("Paciente desenfileirado com sucesso!\n\n")
    console.pause()
    return patient


def show_queue(console: Console, queue: ServiceQueue) -> None:
    """Show the patients waiting in the queue."""
    console.clear()
    console.write(isolated_title("Fila de Atendimento"))
    if not queue:
        console.write("Nenhum paciente na fila.\n\n")
    else:
        console.write("".join(patient.describe() for patient in queue))
    console.pause()