"""View-model behind the screen that renames and recolors a list."""
from typing import Any, Dict, Optional

from grocery.models import GroceryList
from grocery.services.base_service import Result
from grocery.services.list_service import ListService
from grocery.utils.logger import get_logger
from .navigation import BACK_ROUTE, GROCERY_LIST_PARAM, Navigator, Notifier
from .observable import ObservableObject

logger = get_logger(__name__)

LIST_SAVED_MESSAGE = "Lijst is bijgewerkt."


class ChangeColorViewModel(ObservableObject):
    """Edits the name and color of the list it was opened for."""

    def __init__(
        self,
        list_service: ListService,
        navigator: Navigator,
        notifier: Notifier
    ):
        super().__init__()
        self._list_service = list_service
        self._navigator = navigator
        self._notifier = notifier
        self._grocery_list: Optional[GroceryList] = None
        self._name = ""
        self._color = ""

    def apply_query_attributes(self, params: Dict[str, Any]) -> None:
        """Take the list to edit from navigation parameters."""
        grocery_list = params.get(GROCERY_LIST_PARAM)
        if grocery_list is None:
            raise KeyError(f"Missing navigation parameter: {GROCERY_LIST_PARAM}")
        self._set_property("grocery_list", grocery_list)
        self.name = grocery_list.name
        self.color = grocery_list.color or ""

    @property
    def grocery_list(self) -> Optional[GroceryList]:
        return self._grocery_list

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._set_property("name", value or "")

    @property
    def color(self) -> str:
        return self._color

    @color.setter
    def color(self, value: str) -> None:
        self._set_property("color", value or "")

    async def save(self) -> Result[GroceryList]:
        """
        Store the new name and color, then go back.

        Returns:
            Result of the list update; on failure the screen stays open
        """
        if self._grocery_list is None:
            return Result.fail("Geen lijst geselecteerd")

        result = self._list_service.update_list(
            self._grocery_list.id,
            self._name,
            self._color
        )
        if not result.success:
            logger.debug("List update rejected", list_id=self._grocery_list.id, error=result.error)
            await self._notifier.show(result.error)
            return result

        await self._notifier.show(LIST_SAVED_MESSAGE)
        await self._navigator.go_to(BACK_ROUTE)
        return result

    async def cancel(self) -> None:
        """Go back without saving."""
        await self._navigator.go_to(BACK_ROUTE)
