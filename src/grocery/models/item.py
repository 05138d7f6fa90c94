"""GroceryListItem model for the grocery app."""
from sqlalchemy import ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin


class GroceryListItem(Base, TimestampMixin):
    """Model linking a product to a grocery list with an amount."""

    __tablename__ = "grocery_list_items"

    # A product appears at most once per list
    __table_args__ = (
        UniqueConstraint('grocery_list_id', 'product_id', name='uq_item_list_product'),
    )

    # Primary key
    id: Mapped[int] = mapped_column(primary_key=True)

    # Fields
    amount: Mapped[int] = mapped_column(Integer, default=1, nullable=False)

    # Foreign keys
    grocery_list_id: Mapped[int] = mapped_column(
        ForeignKey("grocery_lists.id"),
        nullable=False
    )
    product_id: Mapped[int] = mapped_column(
        ForeignKey("products.id"),
        nullable=False
    )

    # Relationships
    grocery_list = relationship(
        "GroceryList",
        back_populates="items"
    )
    product = relationship("Product")

    def __repr__(self) -> str:
        return (
            f"<GroceryListItem(id={self.id}, list_id={self.grocery_list_id}, "
            f"product_id={self.product_id}, amount={self.amount})>"
        )
