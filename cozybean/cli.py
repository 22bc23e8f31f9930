"""Interactive ordering at The Cozy Bean."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Iterator, Optional, Sequence, TextIO

from .menu import Menu
from .menu_item import Beverage, Food, MenuItem

_INDENT = "          "

_MAIN_MENU = (
    "\n" + _INDENT + "Here is our menu: ",
    _INDENT + "1. Beverages",
    _INDENT + "2. Food",
    _INDENT + "3. Checkout & Exit",
)

_BEVERAGE_MENU = (
    "\n" + _INDENT + "Please select a category: ",
    _INDENT + "1. Hot Beverages",
    _INDENT + "2. Cold Beverages",
    _INDENT + "3. Non-Caffeinated",
    _INDENT + "4. Back to Main Menu",
)

_FOOD_MENU = (
    "\n" + _INDENT + "Please select a category: ",
    _INDENT + "1. Pastries",
    _INDENT + "2. Sandwiches",
    _INDENT + "3. Snacks",
    _INDENT + "4. Back to Main Menu",
)

_BEVERAGE_GROUPS = (
    ("Coffee", "Espresso", "Latte", "Caramel Macchiato"),
    ("Iced Coffee", "Iced Latte"),
    ("Tea", "Berry Smoothie"),
)

_FOOD_GROUPS = (
    ("Croissant", "Blueberry Scone", "Muffin"),
    ("Turkey Sandwich", "Ham Sandwich", "Veggie Sandwich"),
    ("Chips", "Pretzels"),
)

_PROMPT = "Enter your choice: "
_LEAVE_SECTION = 4


class _InputExhausted(Exception):
    """Raised when no more choices can be read."""


class _ChoiceReader:
    """Reads whitespace-separated integer choices from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._tokens: Iterator[str] = (tok for line in stream for tok in line.split())

    def next_choice(self) -> int:
        token = next(self._tokens, None)
        if token is None:
            raise _InputExhausted
        try:
            return int(token)
        except ValueError:
            return 0


def build_master_menu() -> Menu:
    """Return the full café menu."""
    return Menu(
        [
            Beverage("Coffee", 3.50, True, "Small", 80),
            Beverage("Espresso", 3.00, True, "Small", 85),
            Beverage("Latte", 4.50, True, "Medium", 75),
            Beverage("Caramel Macchiato", 5.00, True, "Large", 78),
            Beverage("Iced Coffee", 3.75, True, "Large", 40),
            Beverage("Iced Latte", 4.25, True, "Large", 42),
            Beverage("Tea", 2.50, True, "Medium", 65),
            Beverage("Berry Smoothie", 4.95, True, "Medium", 5),
            Food("Croissant", 3.25, True, (), 300),
            Food("Blueberry Scone", 3.75, True, (), 320),
            Food("Muffin", 2.95, True, (), 310),
            Food("Turkey Sandwich", 6.99, True, (), 550),
            Food("Ham Sandwich", 6.50, True, (), 540),
            Food("Veggie Sandwich", 5.99, True, (), 500),
            Food("Chips", 1.50, True, (), 200),
            Food("Pretzels", 1.75, True, (), 210),
        ]
    )


def order_summary(order: Iterable[MenuItem]) -> str:
    """Return the checkout text for ``order``: one line per item and a total."""
    items = list(order)
    if not items:
        return "Your order is empty.\n"
    lines = [f"{item.name} - ${item.price:g}" for item in items]
    total = 0.0
    for item in items:
        total += item.price
    lines.append(f"Total: ${total:g}")
    return "\n".join(lines) + "\n"


def _show_choices(names: Sequence[str], out: TextIO) -> None:
    for number, name in enumerate(names, start=1):
        print(f"{_INDENT}{number}. {name}", file=out)
    print(f"{_INDENT}{len(names) + 1}. Back", file=out)


def _section(
    header: Sequence[str],
    groups: Sequence[Sequence[str]],
    menu: Menu,
    order: list[MenuItem],
    reader: _ChoiceReader,
    out: TextIO,
) -> None:
    while True:
        print("\n".join(header), file=out)
        print(_PROMPT, end="", file=out)
        choice = reader.next_choice()
        if not 1 <= choice <= len(groups):
            return
        names = groups[choice - 1]
        _show_choices(names, out)
        choice = reader.next_choice()
        if 1 <= choice <= len(names):
            item = menu.search_item(names[choice - 1])
            if item is not None:
                order.append(item)
                print(f"Added: {item.name}", file=out)
        # The last number read decides whether the section is left.
        if choice == _LEAVE_SECTION:
            return


def run(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> list[MenuItem]:
    """Run an ordering session and return the items ordered.

    The session ends at checkout or when the input runs out.
    """
    source = stdin if stdin is not None else sys.stdin
    out = stdout if stdout is not None else sys.stdout
    reader = _ChoiceReader(source)
    menu = build_master_menu()
    order: list[MenuItem] = []

    print("----- Welcome to The Cozy Bean -----", file=out)
    try:
        while True:
            print("\n".join(_MAIN_MENU), file=out)
            print(_PROMPT, end="", file=out)
            choice = reader.next_choice()
            if choice == 1:
                _section(_BEVERAGE_MENU, _BEVERAGE_GROUPS, menu, order, reader, out)
            elif choice == 2:
                _section(_FOOD_MENU, _FOOD_GROUPS, menu, order, reader, out)
            elif choice == 3:
                print("\n----- Your Order Summary -----", file=out)
                print(order_summary(order), end="", file=out)
                print("Thank you for visiting The Cozy Bean!", file=out)
                break
            else:
                print("Invalid choice.", file=out)
    except _InputExhausted:
        pass
    return order


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start an ordering session on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="cozybean", description="Order food and drinks at The Cozy Bean."
    )
    parser.parse_args(argv)
    run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())