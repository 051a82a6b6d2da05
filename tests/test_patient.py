import datetime

import pytest

from triagem.patient import EntryDate, Patient, create_patient


def test_entry_date_str_is_zero_padded():
    assert str(EntryDate(5, 3, 2025)) == "05/03/2025"


def test_entry_date_today_matches_calendar():
    before = datetime.date.today()
    entry = EntryDate.today()
    after = datetime.date.today()
    assert (entry.year, entry.month, entry.day) in {
        (before.year, before.month, before.day),
        (after.year, after.month, after.day),
    }


def test_create_patient_sets_fields_and_today():
    patient = create_patient("Ana", "123", 30)
    assert patient.name == "Ana"
    assert patient.rg == "123"
    assert patient.age == 30
    today = datetime.date.today()
    assert patient.entry.year == today.year
    assert patient.entry.month == today.month


@pytest.mark.parametrize("age, valid", [(30, True), (1, True), (0, False), (-5, False)])
def test_is_valid_depends_on_age(age, valid):
    assert Patient("Ana", "123", age, EntryDate(1, 1, 2025)).is_valid() is valid


def test_describe_layout():
    patient = Patient("Ana", "123", 30, EntryDate(5, 3, 2025))
    assert patient.describe() == "Nome: Ana\nRG: 123\nIdade: 30\nEntrada: 05/03/2025\n\n"


def test_describe_lines_start_with_labels():
    lines = create_patient("Bruno", "987", 44).describe().splitlines()
    assert lines[0].startswith("Nome: ")
    assert lines[1].startswith("RG: ")
    assert lines[2].startswith("Idade: ")
    assert lines[3].startswith("Entrada: ")


def test_patients_compare_by_identity():
    first = Patient("Ana", "123", 30, EntryDate(1, 1, 2025))
    second = Patient("Ana", "123", 30, EntryDate(1, 1, 2025))
    assert first == first
    assert (first == second) is False


def test_entry_date_is_immutable():
    entry = EntryDate(1, 2, 2024)
    with pytest.raises(AttributeError):
        entry.day = 3
    assert entry.day == 1
    assert str(entry) == "01/02/2024"