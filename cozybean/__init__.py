"""Coffee-shop menu, staff and interactive ordering counter."""

__version__ = "0.1.0"
__all__ = ["cli", "linked_list", "menu", "menu_item", "people"]