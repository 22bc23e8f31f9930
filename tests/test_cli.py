import io

import pytest

from cozybean.cli import build_master_menu, main, order_summary, run
from cozybean.menu_item import Beverage, Food


def _session(text):
    out = io.StringIO()
    order = run(io.StringIO(text), out)
    return order, out.getvalue()


def test_master_menu_contents():
    menu = build_master_menu()
    assert len(menu) == 16
    latte = menu.search_item("Latte")
    assert latte is not None
    assert latte.price == 4.50
    assert latte.category() == "Beverage"
    assert menu.search_item("Pretzels").category() == "Food"


def test_order_summary_empty():
    assert order_summary([]) == "Your order is empty.\n"


def test_order_summary_lists_items_and_total():
    items = [Beverage("Coffee", 3.50, True, "Small", 80), Food("Muffin", 2.95, True, (), 310)]
    lines = order_summary(items).splitlines()
    assert lines[0] == "Coffee - $3.5"
    assert lines[1].startswith("Muffin - $")
    assert lines[2].startswith("Total: $")
    assert float(lines[2][len("Total: $"):]) == pytest.approx(sum(i.price for i in items))


def test_immediate_checkout():
    order, text = _session("3\n")
    assert order == []
    assert text.startswith("----- Welcome to The Cozy Bean -----")
    assert "Your order is empty." in text
    assert text.rstrip().endswith("Thank you for visiting The Cozy Bean!")


def test_order_a_hot_drink():
    order, text = _session("1 1 1 5 3")
    assert [item.name for item in order] == ["Coffee"]
    assert "Added: Coffee" in text
    assert "Coffee - $3.5" in text


def test_choosing_fourth_item_leaves_section():
    order, text = _session("1 1 4 3")
    assert [item.name for item in order] == ["Caramel Macchiato"]
    assert "Thank you for visiting The Cozy Bean!" in text


def test_order_food_and_drink():
    order, _ = _session("2 2 1 9 1 3 2 9 3")
    assert [item.name for item in order] == ["Turkey Sandwich", "Berry Smoothie"]


def test_back_entry_returns_to_categories():
    order, text = _session("1 2 3 9 3")
    assert order == []
    assert text.count("Cold Beverages") == 2
    assert "          3. Back" in text


def test_invalid_main_choice():
    order, text = _session("7 x 3")
    assert order == []
    assert text.count("Invalid choice.") == 2


def test_input_running_out_ends_session():
    order, text = _session("1 1 2")
    assert [item.name for item in order] == ["Espresso"]
    assert "Your Order Summary" not in text


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 3 2 4 3\n"))
    assert main([]) == 0
    captured = capsys.readouterr().out
    assert "Added: Pretzels" in captured
    assert "Thank you for visiting The Cozy Bean!" in captured