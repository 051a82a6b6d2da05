from triagem.menu_service import (
    dequeue_patient,
    enqueue_patient,
    show_queue,
    show_service_menu,
)
from triagem.patient import EntryDate, Patient
from triagem.service_queue import ServiceQueue
from triagem.undo_stack import Action, UndoStack
from triagem.views import Console, menu_title


def make_console(*answers):
    lines = iter(answers)
    out = []
    return Console(lambda: next(lines), out.append), out


def make_patient(name, age):
    return Patient(name, name.lower(), age, EntryDate(3, 4, 2024))


def test_menu_shows_title():
    console, out = make_console()
    show_service_menu(console)
    assert menu_title("Atendimento") in "".join(out)


def test_enqueue_valid_patient_logs_action():
    console, out = make_console("")
    queue, stack = ServiceQueue(), UndoStack()
    ana = make_patient("Ana", 30)
    assert enqueue_patient(console, queue, ana, stack) is True
    assert list(queue) == [ana]
    record = stack.pop()
    assert record.patient is ana and record.action is Action.ADDED
    assert "Paciente Ana enfileirado com sucesso!" in "".join(out)


def test_enqueue_invalid_patient_rejected():
    console, out = make_console("", "")
    queue, stack = ServiceQueue(), UndoStack()
    assert enqueue_patient(console, queue, make_patient("Ana", 0), stack) is False
    assert enqueue_patient(console, queue, None, stack) is False
    assert len(queue) == 0 and len(stack) == 0
    assert "Paciente invalido." in "".join(out)


def test_dequeue_empty_queue():
    console, out = make_console("")
    queue, stack = ServiceQueue(), UndoStack()
    assert dequeue_patient(console, queue, stack) is None
    assert len(stack) == 0
    assert "Fila vazia." in "".join(out)


def test_dequeue_is_fifo_and_logged():
    console, _ = make_console("")
    queue, stack = ServiceQueue(), UndoStack()
    ana, bia = make_patient("Ana", 30), make_patient("Bia", 40)
    queue.enqueue(ana)
    queue.enqueue(bia)
    assert dequeue_patient(console, queue, stack) is ana
    assert list(queue) == [bia]
    assert stack.pop().action is Action.REMOVED


def test_show_queue_empty_and_filled():
    console, out = make_console("", "")
    queue = ServiceQueue()
    show_queue(console, queue)
    assert "Nenhum paciente na fila." in "".join(out)
    ana, bia = make_patient("Ana", 30), make_patient("Bia", 40)
    queue.enqueue(ana)
    queue.enqueue(bia)
    out.clear()
    show_queue(console, queue)
    assert ana.describe() + bia.describe() in "".join(out)