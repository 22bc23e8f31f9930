"""A singly linked list of menu entries, searchable by name and sortable by price."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Generic, Iterable, Iterator, Optional, TextIO, TypeVar

T = TypeVar("T")


@dataclass
class Node(Generic[T]):
    """One link of a :class:`LinkedList`."""

    data: T
    next: Optional["Node[T]"] = None


class LinkedList(Generic[T]):
    """Singly linked list that appends at the back.

    Name-based operations (:meth:`remove`, :meth:`search`) and
    :meth:`sort_by_price` expect the stored values to have ``name`` and
    ``price`` attributes.
    """

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._head: Optional[Node[T]] = None
        for item in items or ():
            self.add_back(item)

    @property
    def head(self) -> Optional[Node[T]]:
        """The first node, or ``None`` when the list is empty."""
        return self._head

    def _nodes(self) -> Iterator[Node[T]]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def add_back(self, value: T) -> None:
        """Append ``value`` at the end of the list."""
        new_node = Node(value)
        if self._head is None:
            self._head = new_node
            return
        last = self._head
        while last.next is not None:
            last = last.next
        last.next = new_node

    def remove(self, name: str) -> bool:
        """Unlink the first value whose name is ``name``; report whether one was found."""
        previous: Optional[Node[T]] = None
        for node in self._nodes():
            if getattr(node.data, "name") == name:
                if previous is None:
                    self._head = node.next
                else:
                    previous.next = node.next
                return True
            previous = node
        return False

    def search(self, name: str) -> Optional[T]:
        """Return the first value whose name is ``name``, or ``None``."""
        return next(
            (node.data for node in self._nodes() if getattr(node.data, "name") == name),
            None,
        )

    def sort_by_price(self) -> None:
        """Order values by ascending price, keeping equal prices in their order."""
        if self._head is None or self._head.next is None:
            return
        swapped = True
        while swapped:
            swapped = False
            for node in self._nodes():
                following = node.next
                if following is None:
                    break
                if getattr(node.data, "price") > getattr(following.data, "price"):
                    node.data, following.data = following.data, node.data
                    swapped = True

    def display_all(self, file: Optional[TextIO] = None) -> None:
        """Write one ``name - $price`` line per value."""
        out = file if file is not None else sys.stdout
        for value in self:
            item: Any = value
            print(f"{item.name} - ${item.price:g}", file=out)

    def clear(self) -> None:
        """Remove every value."""
        self._head = None

    def get(self, index: int) -> Optional[T]:
        """Return the value at ``index``, or ``None`` past the end.

        A negative index yields the first value.
        """
        node = self._head
        steps = 0
        while steps < index and node is not None:
            node = node.next
            steps += 1
        return None if node is None else node.data

    def __iter__(self) -> Iterator[T]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())