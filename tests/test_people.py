import io

from cozybean.people import Barista, Cashier, Employee, Manager, Person


def _capture(action):
    out = io.StringIO()
    action(out)
    return out.getvalue()


def test_person_display():
    text = _capture(Person("Ana", "P1").display)
    assert text == "Name: Ana, ID: P1\n"


def test_employee_clock_in_mentions_uniform():
    emp = Employee("Ben", "E1", "W1", "Green apron")
    text = _capture(emp.clock_in)
    assert text.startswith("Ben")
    assert "clocked in wearing uniform: Green apron" in text


def test_barista_make_drinks_and_brew():
    barista = Barista("Cai", "E2", "W2", "Apron", 12)
    drinks = _capture(barista.make_drinks)
    assert drinks.startswith("Cai is making 12")
    assert drinks.rstrip("\n").endswith(" drinks.")
    brew = _capture(barista.brew_coffee)
    assert brew.strip() == "Cai is brewing coffee."


def test_barista_is_an_employee():
    barista = Barista("Cai", "E2", "W2", "Apron", 3)
    text = _capture(barista.clock_in)
    assert "clocked in wearing uniform: Apron" in text


def test_cashier_messages():
    cashier = Cashier("Dee", "E3", "W3", "Vest", 2)
    payment = _capture(cashier.process_payment)
    assert "is processing a payment at register $2" in payment
    receipt = _capture(cashier.give_receipt)
    assert receipt.strip() == "Dee is giving a receipt."


def test_manager_work_schedule_mentions_department():
    manager = Manager("Eve", "M1", "W4", "Suit", "Front")
    text = _capture(manager.work_schedule)
    assert text.startswith("Manager Eve")
    assert "for the Front department." in text


def test_manager_hire_adds_to_team_and_announces():
    manager = Manager("Eve", "M1", "W4", "Suit", "Front")
    barista = Barista("Cai", "E2", "W2", "Apron", 3)
    text = _capture(lambda out: manager.hire_employee(barista, out))
    assert text == "Manager Eve hired: Name: Cai, ID: E2\n"
    assert list(manager.team) == [barista]


def test_manager_display_team_in_hiring_order():
    manager = Manager("Eve", "M1", "W4", "Suit", "Front")
    first = Barista("Cai", "E2", "W2", "Apron", 3)
    second = Cashier("Dee", "E3", "W3", "Vest", 1)
    sink = io.StringIO()
    manager.hire_employee(first, sink)
    manager.hire_employee(second, sink)
    text = _capture(manager.display_team)
    lines = text.splitlines()
    assert lines[0] == ""
    assert lines[1] == "Team under Manager Eve:"
    assert lines[2:] == ["Name: Cai, ID: E2", "Name: Dee, ID: E3"]
    assert len(manager.team) == 2


def test_new_manager_has_empty_team():
    manager = Manager("Eve", "M1", "W4", "Suit", "Front")
    text = _capture(manager.display_team)
    assert text.splitlines() == ["", "Team under Manager Eve:"]