"""List management service."""
from typing import Optional, List
from dataclasses import dataclass
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError
from sqlalchemy import select, func

from grocery.models import GroceryList, GroceryListItem
from grocery.domain.types import ListId, UpdateListCommand
from .base_service import BaseService, Result


@dataclass
class ListSummary:
    """Summary of a grocery list."""
    id: int
    name: str
    color: str
    item_count: int


def _first_error(e: ValidationError) -> str:
    """Get the message of the first validation error without pydantic's prefix."""
    message = e.errors()[0]["msg"]
    return message.removeprefix("Value error, ")


class ListService(BaseService):
    """Service for managing a client's grocery lists."""

    def get_all(self) -> List[GroceryList]:
        """Get all lists owned by the client, ordered by ID."""
        return list(
            self.session.execute(
                select(GroceryList)
                .where(GroceryList.owner_id == self.client_id)
                .order_by(GroceryList.id)
            ).scalars().all()
        )

    def get(self, list_id: ListId) -> Optional[GroceryList]:
        """Get a list by ID, or None if it does not exist or is not the client's."""
        list_ = self.session.get(GroceryList, list_id)
        if list_ is None or list_.owner_id != self.client_id:
            return None
        return list_

    def list_summaries(self) -> List[ListSummary]:
        """Get all of the client's lists with their item counts."""
        results = self.session.execute(
            select(GroceryList, func.count(GroceryListItem.id).label("item_count"))
            .outerjoin(GroceryListItem)
            .where(GroceryList.owner_id == self.client_id)
            .group_by(GroceryList.id)
            .order_by(GroceryList.id)
        ).all()
        return [
            ListSummary(
                id=list_.id,
                name=list_.name,
                color=list_.color,
                item_count=item_count
            )
            for list_, item_count in results
        ]

    def create_list(self, name: str, color: str = "") -> Result[GroceryList]:
        """
        Create a new grocery list.

        Args:
            name: Name of the list
            color: Optional #RRGGBB color

        Returns:
            Result containing the created list or error
        """
        try:
            command = UpdateListCommand(list_id=0, name=name, color=color)
        except ValidationError as e:
            return Result.fail(_first_error(e))

        try:
            with self.transaction.transaction() as session:
                if self._name_taken(command.name):
                    return self._handle_duplicate_error(command.name)

                list_ = GroceryList(
                    name=command.name,
                    color=command.color,
                    owner_id=self.client_id
                )
                session.add(list_)
                session.flush()  # Get ID before commit
                list_id = list_.id

            self._log_action("create_list", list_id=list_id, list_name=command.name)
            return Result.ok(list_)

        except IntegrityError:
            self.logger.debug("Integrity error while creating list", list_name=name)
            return self._handle_duplicate_error(command.name)

    def update_list(
        self,
        list_id: int,
        name: str,
        color: Optional[str] = None
    ) -> Result[GroceryList]:
        """
        Rename and/or recolor a grocery list.

        Args:
            list_id: ID of the list to update
            name: New name for the list
            color: New #RRGGBB color, empty to clear it, None to keep it

        Returns:
            Result containing the updated list or error
        """
        list_ = self.get(list_id)
        if list_ is None:
            return Result.fail("Lijst niet gevonden")

        try:
            command = UpdateListCommand(
                list_id=list_id,
                name=name,
                color=list_.color if color is None else color
            )
        except ValidationError as e:
            self.logger.debug("List update validation failed", list_id=list_id, error=str(e))
            return Result.fail(_first_error(e))

        try:
            with self.transaction.transaction():
                if self._name_taken(command.name, exclude_id=list_id):
                    return self._handle_duplicate_error(command.name)

                old_name = list_.name
                list_.name = command.name
                list_.color = command.color

            self._log_action(
                "update_list",
                list_id=list_id,
                old_name=old_name,
                new_name=command.name,
                color=command.color
            )
            return Result.ok(list_)

        except IntegrityError:
            self.logger.debug("Integrity error while updating list", list_id=list_id)
            return self._handle_duplicate_error(command.name)

    def _name_taken(self, name: str, exclude_id: Optional[int] = None) -> bool:
        """Check whether the client already has a list with this name."""
        query = select(GroceryList.id).where(
            GroceryList.name == name,
            GroceryList.owner_id == self.client_id
        )
        if exclude_id is not None:
            query = query.where(GroceryList.id != exclude_id)
        return self.session.execute(query).first() is not None

    def _handle_duplicate_error(self, name: str) -> Result[GroceryList]:
        """Build the failed result for a duplicate list name."""
        return Result.fail(
            f"De naam '{name}' bestaat al",
            suggestions=[
                "Kies een andere naam",
                f"Voeg een nummer of omschrijving toe aan '{name}'"
            ]
        )
