from triagem.bst import PatientTree, SortKey
from triagem.menu_search import show_records, show_search_menu
from triagem.patient import EntryDate, Patient
from triagem.views import Console


def make_console(lines):
    feed = iter(lines)
    output = []

    def read():
        try:
            return next(feed)
        except StopIteration:
            raise EOFError from None

    return Console(read, output.append), output


def test_search_menu_lists_every_option():
    console, output = make_console([])
    show_search_menu(console)
    text = "".join(output)
    assert "Pesquisar" in text
    assert "4. Registros por Idade" in text
    assert "0. Voltar ao Menu Principal" in text


def test_empty_tree_reports_no_records():
    console, output = make_console([""])
    show_records(console, PatientTree(SortKey.AGE), "Pesquisar por Idade")
    text = "".join(output)
    assert "Pesquisar por Idade" in text
    assert "Nenhum registro encontrado." in text


def test_records_are_shown_in_key_order():
    tree = PatientTree(SortKey.AGE)
    day = EntryDate(1, 1, 2024)
    for name, age in (("Bruno", 50), ("Ana", 20), ("Carla", 35)):
        tree.insert(Patient(name, name.lower(), age, day))
    console, output = make_console([""])
    show_records(console, tree, "Pesquisar por Idade")
    text = "".join(output)
    assert "Nenhum registro encontrado." not in text
    assert text.index("Nome: Ana") < text.index("Nome: Carla") < text.index("Nome: Bruno")


def test_records_by_year_order():
    tree = PatientTree(SortKey.YEAR)
    tree.insert(Patient("Novo", "1", 10, EntryDate(1, 1, 2025)))
    tree.insert(Patient("Velho", "2", 10, EntryDate(1, 1, 2020)))
    console, output = make_console([""])
    show_records(console, tree, "Pesquisar por Ano")
    text = "".join(output)
    assert text.index("Nome: Velho") < text.index("Nome: Novo")