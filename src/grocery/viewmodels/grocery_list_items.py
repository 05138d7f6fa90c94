"""View-model behind the grocery list items screen."""
import threading
from datetime import date
from typing import Any, Dict, List, Optional
from urllib.parse import urlencode

from grocery.config.settings import GrocerySettings, get_settings
from grocery.domain.errors import ExportCancelled
from grocery.domain.types import items_to_json
from grocery.models import GroceryList, GroceryListItem, Product
from grocery.services.file_saver import FileSaverService
from grocery.services.item_service import ItemService
from grocery.services.product_service import ProductService
from grocery.utils.logger import get_logger
from .dispatcher import Dispatcher, ImmediateDispatcher
from .navigation import CHANGE_COLOR_ROUTE, GROCERY_LIST_PARAM, Navigator, Notifier
from .observable import ObservableCollection, ObservableObject

logger = get_logger(__name__)


def unloaded_list() -> GroceryList:
    """The placeholder list shown before a real list is selected."""
    return GroceryList(id=0, name="None", created_on=date.min, color="", owner_id=0)


class GroceryListItemsViewModel(ObservableObject):
    """Shows the items on one grocery list and the products that can be added.

    The catalog products that are in stock and not yet on the list form the
    available set. available_products is that set filtered by the search
    text. Every mutation of an observable collection is posted to the
    dispatcher so it runs on the UI thread.
    """

    def __init__(
        self,
        item_service: ItemService,
        product_service: ProductService,
        file_saver: FileSaverService,
        navigator: Navigator,
        notifier: Notifier,
        dispatcher: Optional[Dispatcher] = None,
        settings: Optional[GrocerySettings] = None
    ):
        super().__init__()
        self._item_service = item_service
        self._product_service = product_service
        self._file_saver = file_saver
        self._navigator = navigator
        self._notifier = notifier
        self._dispatcher = dispatcher or ImmediateDispatcher()
        self._settings = settings or get_settings()

        # Every product that may be added, before the search filter
        self._all_available_products: List[Product] = []

        self.my_grocery_list_items: ObservableCollection[GroceryListItem] = ObservableCollection()
        self.available_products: ObservableCollection[Product] = ObservableCollection()

        self._grocery_list = unloaded_list()
        self._search_text = ""
        self._my_message = ""
        self._load(self._grocery_list.id)

    # Properties

    @property
    def grocery_list(self) -> GroceryList:
        return self._grocery_list

    @grocery_list.setter
    def grocery_list(self, value: GroceryList) -> None:
        self.select_list(value)

    @property
    def is_loaded(self) -> bool:
        return self._grocery_list.id != 0

    @property
    def search_text(self) -> str:
        return self._search_text

    @search_text.setter
    def search_text(self, value: Optional[str]) -> None:
        self._set_property("search_text", value or "")
        self._update_available_products(self._search_text)

    @property
    def my_message(self) -> str:
        """Text of the last toast shown by this screen."""
        return self._my_message

    @property
    def all_available_products(self) -> List[Product]:
        """Copy of the available set, ignoring the search text."""
        return list(self._all_available_products)

    # Loading

    def select_list(self, grocery_list: GroceryList) -> None:
        """
        Make a list the active one and reload everything derived from it.

        Selecting the current list again reloads as well.

        Args:
            grocery_list: The list to show
        """
        if grocery_list is None:
            raise ValueError("grocery_list is required")
        self._set_property("grocery_list", grocery_list)
        self._load(grocery_list.id)

    def _load(self, list_id: int) -> None:
        items = self._item_service.get_all_on_grocery_list_id(list_id)
        self._dispatcher.begin_invoke(lambda: self.my_grocery_list_items.reset(items))
        self._get_available_products(items)
        logger.debug(
            "Grocery list loaded",
            list_id=list_id,
            item_count=len(items),
            available_count=len(self._all_available_products)
        )

    def _get_available_products(self, items: List[GroceryListItem]) -> None:
        on_list = {item.product_id for item in items}
        self._all_available_products = [
            p for p in self._product_service.get_all()
            if p.id not in on_list and p.stock > 0
        ]
        self._update_available_products(self._search_text)

    # Searching

    def filter_products(self, query: Optional[str]) -> List[Product]:
        """
        Filter the available set by name.

        Matching is a case-insensitive substring test on the trimmed query.
        An empty query matches everything. Nothing is changed.

        Args:
            query: Search text, may be None

        Returns:
            The matching products in catalog order
        """
        q = (query or "").strip().lower()
        if not q:
            return list(self._all_available_products)
        return [
            p for p in self._all_available_products
            if p.name and q in p.name.lower()
        ]

    def search(self, query: Optional[str] = None) -> None:
        """
        Show the available products matching a query.

        Args:
            query: Search text; None uses search_text
        """
        self._update_available_products(self._search_text if query is None else query)

    def _update_available_products(self, query: Optional[str]) -> None:
        products = self.filter_products(query)
        self._dispatcher.begin_invoke(lambda: self.available_products.reset(products))

    # Commands

    def add_product(self, product: Optional[Product]) -> None:
        """
        Put a product on the active list and take one from stock.

        Does nothing when product is None, no list is loaded or the
        product is not in the available set.
        Service errors propagate.

        Args:
            product: The product to add
        """
        if product is None:
            return
        if not self.is_loaded:
            logger.debug("No list selected, not adding", product_id=product.id)
            return
        if not any(p.id == product.id for p in self._all_available_products):
            logger.debug("Product not available, not adding", product_id=product.id)
            return

        item = GroceryListItem(
            grocery_list_id=self._grocery_list.id,
            product_id=product.id,
            amount=1
        )
        self._item_service.add(item)
        product.stock -= 1
        self._product_service.update(product)

        product_id = product.id

        def remove_from_display() -> None:
            for shown in self.available_products:
                if shown.id == product_id:
                    self.available_products.remove(shown)

        self._dispatcher.begin_invoke(remove_from_display)
        self._all_available_products = [
            p for p in self._all_available_products if p.id != product_id
        ]

        logger.info(
            "Product added to list",
            list_id=self._grocery_list.id,
            product_id=product_id,
            stock=product.stock
        )
        self._load(self._grocery_list.id)

    async def change_color(self) -> None:
        """Open the screen that renames and recolors the active list."""
        params: Dict[str, Any] = {GROCERY_LIST_PARAM: self._grocery_list}
        query = urlencode({"Name": self._grocery_list.name})
        await self._navigator.go_to(f"{CHANGE_COLOR_ROUTE}?{query}", params)

    async def share_grocery_list(self, cancel_event: Optional[threading.Event] = None) -> None:
        """
        Export the items on the list to a JSON file and report the outcome.

        Failures are shown as a toast and never raised. A cancelled export
        shows nothing.

        Args:
            cancel_event: Set to abort the save
        """
        filename = self._settings.EXPORT_FILENAME
        try:
            content = items_to_json(self.my_grocery_list_items)
            await self._file_saver.save_file(filename, content, cancel_event)
            await self._show_toast(self._settings.EXPORT_SUCCESS_MESSAGE)
            logger.info(
                "Grocery list exported",
                list_id=self._grocery_list.id,
                item_count=len(self.my_grocery_list_items),
                filename=filename
            )
        except ExportCancelled:
            logger.info("Grocery list export cancelled", list_id=self._grocery_list.id)
        except Exception as e:
            logger.warning("Grocery list export failed", list_id=self._grocery_list.id, error=str(e))
            try:
                await self._show_toast(f"{self._settings.EXPORT_FAILURE_PREFIX}{e}")
            except Exception:
                logger.exception("Could not show export failure toast")

    async def _show_toast(self, message: str) -> None:
        self._set_property("my_message", message)
        await self._notifier.show(message)
