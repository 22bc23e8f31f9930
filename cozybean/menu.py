"""The café menu: a collection of menu items kept in a linked list."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, TextIO

from .linked_list import LinkedList
from .menu_item import MenuItem


class Menu:
    """An ordered set of menu items that can be searched, pruned and sorted."""

    def __init__(self, items: Optional[Iterable[MenuItem]] = None) -> None:
        self._items: LinkedList[MenuItem] = LinkedList(items)

    def add_item(self, item: MenuItem) -> None:
        """Append ``item`` to the end of the menu."""
        self._items.add_back(item)

    def remove_item(self, name: str) -> bool:
        """Remove the first item called ``name``; report whether one was found."""
        return self._items.remove(name)

    def search_item(self, name: str) -> Optional[MenuItem]:
        """Return the first item called ``name``, or ``None``."""
        return self._items.search(name)

    def sort_by_price(self) -> None:
        """Order the menu by ascending price."""
        self._items.sort_by_price()

    def display(self, file: Optional[TextIO] = None) -> None:
        """Write one ``name - $price`` line per item."""
        self._items.display_all(file)

    def __iter__(self) -> Iterator[MenuItem]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)