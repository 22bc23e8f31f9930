"""Items sold at the café: beverages and food."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterable

MAX_INGREDIENTS = 5


@dataclass
class MenuItem(ABC):
    """Something on the menu, with a name, a price and availability."""

    name: str
    price: float
    available: bool = True

    @abstractmethod
    def category(self) -> str:
        """The menu section this item belongs to."""


@dataclass
class Beverage(MenuItem):
    """A drink of a given size served at a given temperature."""

    size: str = ""
    temperature: int = 0

    def category(self) -> str:
        return "Beverage"


@dataclass
class Food(MenuItem):
    """A food item with up to five listed ingredients."""

    ingredients: Iterable[str] = field(default_factory=tuple)
    calories: int = 0

    def __post_init__(self) -> None:
        self.ingredients = tuple(self.ingredients)[:MAX_INGREDIENTS]

    def category(self) -> str:
        return "Food"

    def allergens(self) -> list[str]:
        """The listed ingredients, in order."""
        return list(self.ingredients)