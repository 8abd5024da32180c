from .item import Item
from .category import Category
from .favourite import Favourite

__all__ = [
    "Item",
    "Category",
    "Favourite",
]
