"""Navigation and toast surfaces used by the view-models."""
from typing import Any, Dict, Optional, Protocol

# Routes
CHANGE_COLOR_ROUTE = "ChangeColorView"
BACK_ROUTE = ".."

# Navigation parameter holding the list a screen works on
GROCERY_LIST_PARAM = "GroceryList"


class Navigator(Protocol):
    """Moves the UI to another screen."""

    async def go_to(self, route: str, params: Optional[Dict[str, Any]] = None) -> None:
        ...


class Notifier(Protocol):
    """Shows short-lived toast messages."""

    async def show(self, message: str) -> None:
        ...
