"""View-models for the grocery app.

View-models own screen state and notify subscribers when it changes.
Views bind to them and never touch the services directly.
"""
from .dispatcher import ImmediateDispatcher, MainThreadDispatcher
from .observable import CollectionChanged, ObservableCollection, ObservableObject, PropertyChanged
from .grocery_list_items import GroceryListItemsViewModel
from .change_color import ChangeColorViewModel

__all__ = [
    'ImmediateDispatcher',
    'MainThreadDispatcher',
    'CollectionChanged',
    'ObservableCollection',
    'ObservableObject',
    'PropertyChanged',
    'GroceryListItemsViewModel',
    'ChangeColorViewModel',
]
