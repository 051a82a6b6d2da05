from triagem.menu_undo import show_action_log, show_undo_menu, undo_last_action
from triagem.patient import EntryDate, Patient
from triagem.service_queue import ServiceQueue
from triagem.undo_stack import Action, UndoStack
from triagem.views import Console, menu_title


def make_console(*answers):
    lines = iter(answers)
    out = []
    return Console(lambda: next(lines), out.append), out


def make_patient(name, age=30):
    return Patient(name, name.lower(), age, EntryDate(7, 8, 2024))


def test_menu_shows_title():
    console, out = make_console()
    show_undo_menu(console)
    assert menu_title("Desfazer") in "".join(out)


def test_empty_log():
    console, out = make_console("")
    show_action_log(console, UndoStack())
    assert "Nenhuma acao registrada." in "".join(out)


def test_log_lists_most_recent_first():
    console, out = make_console("")
    stack = UndoStack()
    stack.push(make_patient("Ana"), Action.ADDED)
    stack.push(make_patient("Bia"), Action.REMOVED)
    show_action_log(console, stack)
    text = "".join(out)
    first = text.index("Paciente: Bia | Acao: Removido")
    second = text.index("Paciente: Ana | Acao: Adicionado")
    assert first < second


def test_undo_with_empty_stack():
    console, out = make_console("")
    queue = ServiceQueue()
    assert undo_last_action(console, UndoStack(), queue) is None
    assert "Nenhuma acao registrada." in "".join(out)


def test_undo_add_removes_patient_from_queue():
    console, _ = make_console("")
    ana, bia, caio = make_patient("Ana"), make_patient("Bia"), make_patient("Caio")
    queue, stack = ServiceQueue(), UndoStack()
    for p in (ana, bia, caio):
        queue.enqueue(p)
    stack.push(bia, Action.ADDED)
    record = undo_last_action(console, stack, queue)
    assert record.patient is bia
    assert list(queue) == [ana, caio]
    assert len(stack) == 0


def test_undo_add_with_single_patient_empties_queue():
    console, out = make_console("")
    ana = make_patient("Ana")
    queue, stack = ServiceQueue(), UndoStack()
    queue.enqueue(ana)
    stack.push(ana, Action.ADDED)
    undo_last_action(console, stack, queue)
    assert len(queue) == 0
    assert "Paciente Ana removido da fila." in "".join(out)


def test_undo_remove_puts_patient_back_in_front():
    console, out = make_console("", "")
    ana, bia = make_patient("Ana"), make_patient("Bia")
    queue, stack = ServiceQueue(), UndoStack()
    stack.push(ana, Action.REMOVED)
    undo_last_action(console, stack, queue)
    assert list(queue) == [ana]
    queue.enqueue(bia)
    stack.push(bia, Action.REMOVED)
    undo_last_action(console, stack, queue)
    assert list(queue) == [bia, ana, bia]
    assert "Paciente Bia adicionado novamente a fila." in "".join(out)