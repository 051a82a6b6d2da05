"""Priority service menu, oldest patients first."""

from __future__ import annotations

from .patient import Patient
from .priority_heap import PriorityHeap
from .views import Console, bottom_line, isolated_title, menu_item, menu_title

_MENU_ITEMS = (
    "1. Enfileirar Paciente ",
    "2. Desenfileirar Paciente ",
    "3. Mostrar Fila",
    "0. Voltar ao Menu Principal",
)


def show_priority_menu(console: Console) -> None:
    """Display the priority service menu."""
    console.clear()
    console.write(
        menu_title("Atendimento Prioritario")
        + "".join(map(menu_item, _MENU_ITEMS))
        + bottom_line()
    )


def enqueue_priority(
    console: Console, heap: PriorityHeap, patient: Patient | None
) -> bool:
    """Put a valid patient in the priority queue; return whether it was."""
    console.clear()
    console.write(isolated_title("Enfileirar Paciente Prioritario"))
    if patient is None or not patient.is_valid():
        console.write("Paciente invalido.\n\n")
        console.pause()
        return False

    if heap.is_full():
        console.write("Fila prioritaria cheia.\n")
        return False

    heap.insert(patient)
    console.write(f"Paciente {patient.name} enfileirado com sucesso!\n")
    console.pause()
    return True


def dequeue_priority(console: Console, heap: PriorityHeap) -> Patient | None:
    """Serve the oldest patient in the priority queue."""
    console.clear()
    console.write(isolated_title("Desenfileirar Paciente Prioritario"))
    if not heap:
        console.write("Fila prioritaria vazia.\n")
        console.pause()
        return None

    console.write("Paciente desenfileirado com sucesso!\n")
    patient = heap.pop()
    console.pause()
    return patient


def show_priority_queue(console: Console, heap: PriorityHeap) -> None:
    """Show the patients in the priority queue in heap order."""
    console.clear()
    console.write(isolated_title("Fila Prioritaria"))
    if not heap:
        console.write("Fila prioritaria vazia.\n")
    else:
        console.write("".join(patient.describe() for patient in heap))
    console.pause()