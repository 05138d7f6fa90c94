"""GroceryList model for the grocery app."""
from datetime import date
from sqlalchemy import String, Date, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin


class GroceryList(Base, TimestampMixin):
    """Model representing a grocery list."""

    __tablename__ = "grocery_lists"

    # Ensure list names are unique per client
    __table_args__ = (
        UniqueConstraint('name', 'owner_id', name='uq_list_name_owner'),
    )

    # Primary key
    id: Mapped[int] = mapped_column(primary_key=True)

    # Fields
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    created_on: Mapped[date] = mapped_column(Date, default=date.today, nullable=False)
    # Hex color like "#FF0000", empty when none was picked
    color: Mapped[str] = mapped_column(String(7), default="", nullable=False)
    owner_id: Mapped[int] = mapped_column(
        ForeignKey("clients.id"),
        nullable=False
    )

    # Relationships
    owner = relationship("Client", back_populates="lists")

    items = relationship(
        "GroceryListItem",
        back_populates="grocery_list",
        cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<GroceryList(id={self.id}, name='{self.name}')>"
