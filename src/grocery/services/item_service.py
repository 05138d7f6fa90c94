"""Grocery list item service."""
from typing import List, Optional
from sqlalchemy import select

from grocery.models import GroceryListItem
from grocery.domain.types import ItemId, ListId
from .base_service import BaseService


class ItemService(BaseService):
    """Service for reading and storing the items on grocery lists.

    Database errors are not caught here; they propagate to the caller.
    """

    def get_all_on_grocery_list_id(self, list_id: ListId) -> List[GroceryListItem]:
        """
        Get all items on a grocery list.

        Args:
            list_id: ID of the list

        Returns:
            Items on the list, ordered by ID
        """
        items = list(
            self.session.execute(
                select(GroceryListItem)
                .where(GroceryListItem.grocery_list_id == list_id)
                .order_by(GroceryListItem.id)
            ).scalars().all()
        )
        self.logger.debug("Loaded list items", list_id=list_id, item_count=len(items))
        return items

    def get(self, item_id: ItemId) -> Optional[GroceryListItem]:
        """Get a single item by ID."""
        return self.session.get(GroceryListItem, item_id)

    def add(self, item: GroceryListItem) -> GroceryListItem:
        """
        Persist a new list item.

        Args:
            item: The item to store; its ID is assigned by the database

        Returns:
            The stored item
        """
        with self.transaction.transaction() as session:
            session.add(item)
            session.flush()  # Get ID before commit
            item_id = item.id

        self._log_action(
            "add_item",
            item_id=item_id,
            list_id=item.grocery_list_id,
            product_id=item.product_id
        )
        return item

    def delete(self, item: GroceryListItem) -> None:
        """Remove an item from its list."""
        item_id = item.id
        with self.transaction.transaction() as session:
            session.delete(item)

        self._log_action("delete_item", item_id=item_id)
