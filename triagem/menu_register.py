"""Patient registration menu: register, consult, list, update and remove."""

from __future__ import annotations

from .bst import TreeIndex
from .patient import Patient, create_patient
from .patient_list import PatientList
from .views import Console, bottom_line, isolated_title, menu_item, menu_title

_MENU_ITEMS = (
    "1. Cadastrar Novo Paciente",
    "2. Consultar Paciente",
    "3. Mostrar Lista De Pacientes",
    "4. Atualizar Paciente",
    "5. Remover Paciente",
    "0. Voltar ao Menu Principal",
)


def _missing(patient: Patient | None) -> bool:
    # A search that finds nobody yields None; an age of zero also marks
    # a record that cannot be acted upon.
    return patient is None or patient.age == 0


def show_register_menu(console: Console) -> None:
    """Display the registration menu."""
    console.clear()
    console.write(
        menu_title("Cadastrar") + "".join(map(menu_item, _MENU_ITEMS)) + bottom_line()
    )


def register_new_patient(
    console: Console, patients: PatientList, index: TreeIndex
) -> Patient:
    """Ask for a new patient's data, register it everywhere and return it."""
    console.clear()
    console.write(isolated_title("Cadastrar Novo Paciente"))
    name = console.prompt("Nome: ")
    rg = console.prompt("RG: ")
    age = console.read_int("Idade: ")

    patient = create_patient(name, rg, age)
    patients.add(patient)
    index.add(patient)

    console.write("\nPaciente cadastrado com sucesso!\n\n")
    console.pause()
    return patient


def ask_patient(console: Console, patients: PatientList) -> Patient | None:
    """Ask for an RG and return the matching patient, or None."""
    console.clear()
    console.write(isolated_title("Buscar Paciente"))
    rg = console.prompt("Digite o RG do paciente: ")
    return patients.find(rg)


def consult_patient(console: Console, patient: Patient | None) -> None:
    """Show a patient's data, or a message when there is none."""
    console.clear()
    console.write(isolated_title("Consultar Paciente"))
    if _missing(patient):
        console.write("\nPaciente nao encontrado.\n\n")
    else:
        console.write(patient.describe())
    console.pause()


def show_full_list(console: Console, patients: PatientList) -> None:
    """Show every registered patient."""
    console.clear()
    console.write(isolated_title("Lista Completa de Pacientes"))
    if not patients:
        console.write("Lista vazia.\n")
    else:
        console.write("".join(patient.describe() for patient in patients))
    console.pause()


def update_patient(
    console: Console,
    patients: PatientList,
    patient: Patient | None,
    index: TreeIndex,
) -> bool:
    """Ask for new data for a patient; return whether it was updated."""
    console.clear()
    console.write(isolated_title("Atualizar Paciente"))
    if _missing(patient):
        console.write("Paciente nao encontrado.\n\n")
        console.pause()
        return False

    patient.name = console.prompt("Nome: ")
    patient.rg = console.prompt("RG: ")
    patient.age = console.read_int("Idade: ")
    index.rebuild_age(patients)

    console.write("\nPaciente atualizado com sucesso!\n\n")
    console.pause()
    return True


def remove_patient(
    console: Console,
    patient: Patient | None,
    patients: PatientList,
    index: TreeIndex,
) -> bool:
    """Remove a patient from the registry and trees; return whether it was."""
    console.clear()
    console.write(isolated_title("Remover Paciente"))
    if _missing(patient):
        console.write("Paciente nao encontrado.\n\n")
        console.pause()
        return False

    patients.remove(patient)
    index.rebuild(patients)

    console.write("\nPaciente removido com sucesso!\n\n")
    console.pause()
    return True