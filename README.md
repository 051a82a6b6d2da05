# triagem

An interactive terminal program for a small clinic's front desk. It keeps a
register of patients and lets you:

- register, look up, update and remove patients (looked up by RG);
- put registered patients into a first-come service queue and call them out;
- put patients into a priority queue where the oldest patient is served first
  (up to 100 at a time);
- list the register ordered by entry year, month, day or by age;
- view the log of service-queue actions and undo the most recent one;
- load patients from a text file and save the register back to one.

The screens and messages are in Portuguese.

## Installing

```
pip install .
```

## Running

```
triagem
triagem --load pacientes.txt --save saida.txt
```

`--load` names the file read by the load option (default
`src/pacientes.txt`) and `--save` the file written by the save option
(default `src/pacientesSalvos.txt`), both relative to the working directory.

The main menu is numbered; type an option and press Enter. `0` goes back from
a sub-menu and, in the main menu, quits. Ending the input (Ctrl-D) also quits.

```
1. Cadastrar
2. Atendimento
3. Atendimento Prioritario
4. Pesquisar
5. Desfazer
6. Carregar/Salvar
7. Sobre
0. Sair
```

Only the first word typed at a prompt is used, so a patient's name and RG are
single words. Numeric prompts repeat until a whole number is typed. The entry
date is the day the patient is registered. A patient whose age is zero or less
cannot join either queue, and a patient with age zero is treated as not found
when consulting, updating or removing.

Some behaviour worth knowing:

- Loading adds the file's patients to the register; it does not replace what
  is already there.
- Updating a patient re-sorts the age listing only; the year, month and day
  listings are rebuilt when a patient is removed.
- Undoing an "Adicionado" action takes that patient out of the service queue;
  undoing a "Removido" action puts the patient back at the head of the queue.
- Patients with equal keys are listed in the order they were indexed.
- If the load file cannot be opened or holds a malformed record, or the save
  file cannot be written, the program prints an error and exits with status 1.

## File format

Each record looks like this, with a blank line after it:

```
Nome: Ana
Idade: 34
RG: 123456
Entrada: 14/5/2025
```

`triagem.storage.parse_records` reads this text into patients and
`triagem.storage.format_records` writes it.

## Using it from Python

The pieces can be used on their own, without the menus:

```python
from triagem.patient import create_patient
from triagem.service_queue import ServiceQueue
from triagem.priority_heap import PriorityHeap
from triagem.bst import TreeIndex

ana = create_patient("Ana", "123456", 34)
bia = create_patient("Bia", "654321", 71)

queue = ServiceQueue()
queue.enqueue(ana)
queue.enqueue(bia)
assert queue.dequeue() is ana

heap = PriorityHeap(100)
heap.insert(ana)
heap.insert(bia)
assert heap.pop().name == "Bia"

index = TreeIndex()
index.add(ana)
index.add(bia)
assert [p.name for p in index.age.in_order()] == ["Ana", "Bia"]
```

Taking from an empty `ServiceQueue`, `PriorityHeap` or `UndoStack` raises
`EmptyQueueError`, `HeapEmptyError` or `EmptyStackError`; inserting into a full
heap raises `HeapFullError`. The menus run against a `triagem.views.Console`,
whose input and output callables can be replaced.

## What it does not do

Only the patient register can be saved to a file. The service queue, the
priority queue and the action log live in memory and are lost when the
program exits. Nothing is saved automatically.

## Running the tests

```
pip install .[test]
pytest
```