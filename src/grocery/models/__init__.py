"""Models package for the grocery app."""
from .base import Base
from .client import Client
from .list import GroceryList
from .product import Product
from .item import GroceryListItem

__all__ = ['Base', 'Client', 'GroceryList', 'Product', 'GroceryListItem']
