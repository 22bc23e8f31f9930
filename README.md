# cozybean

An ordering counter for a small coffee shop, The Cozy Bean. It has a
menu of beverages and food, a staff roster of baristas, cashiers and
managers, and an interactive prompt where a customer picks items and
checks out.

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Ordering at the counter

```
cozybean
```

The command reads numbers from standard input. The main menu offers:

1. Beverages: hot beverages, cold beverages or non-caffeinated drinks
2. Food: pastries, sandwiches or snacks
3. Checkout & Exit

Any other number prints `Invalid choice.` and shows the main menu again.

Inside Beverages or Food, pick a category by its number; any number other
than 1, 2 or 3 goes back to the main menu. The category's items are then
listed. Entering an item's number adds it to the order and prints
`Added: <name>`; any other number adds nothing. After that the category
list is shown again, except that a choice of 4 returns to the main menu.
Input that is not a number counts as 0.

Checkout prints each ordered item as `name - $price`, then
`Total: $<sum>`, or `Your order is empty.` when nothing was ordered. The
session also ends quietly when the input runs out.

The same session can be driven from code: `cozybean.cli.run(stdin,
stdout)` takes any text streams and returns the list of items ordered.
`build_master_menu()` returns the full shop menu as a `Menu`, and
`order_summary(order)` returns the checkout text for a sequence of items.

## Using the library

```python
from cozybean.menu import Menu
from cozybean.menu_item import Beverage, Food

menu = Menu()
menu.add_item(Beverage("Latte", 4.50, True, "Medium", 75))
menu.add_item(Food("Muffin", 2.95, True, [], 310))
menu.sort_by_price()
menu.display()            # Muffin - $2.95, then Latte - $4.5

latte = menu.search_item("Latte")
print(latte.category())   # Beverage
menu.remove_item("Muffin")
print(len(menu))          # 1
```

`Menu` iterates over its items in order. `Food` keeps at most five
ingredients, returned by `allergens()`. Underneath, `Menu` is built on
`cozybean.linked_list.LinkedList`, a singly linked list with `add_back`,
`remove` and `search` by name, `sort_by_price`, `get(index)` and
`display_all`.

Staff members print what they are doing:

```python
from cozybean.people import Barista, Cashier, Manager

manager = Manager("Dana", "M1", "W100", "Black apron", "Cafe")
manager.hire_employee(Barista("Sam", "B1", "W101", "Green apron", 12))
manager.hire_employee(Cashier("Lee", "C1", "W102", "Green apron", 2))
manager.display_team()
```

Every printing method takes an optional `file` argument and writes to
standard output when it is not given.

## What it does not do

Orders live only for the length of a session: nothing is saved, no
payment is taken and no receipt is printed beyond the checkout text.
Staff and the menu shown at the counter are not connected; the counter
always uses the fixed menu from `build_master_menu()`.