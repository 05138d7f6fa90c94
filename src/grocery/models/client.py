"""Client model for the grocery app."""
from typing import Optional
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin


class Client(Base, TimestampMixin):
    """Model representing a client who owns grocery lists."""

    __tablename__ = "clients"

    # Primary key
    id: Mapped[int] = mapped_column(primary_key=True)

    # Fields
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[Optional[str]] = mapped_column(String(255), unique=True)

    # Relationships
    lists = relationship(
        "GroceryList",
        back_populates="owner",
        cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<Client(id={self.id}, name='{self.name}')>"
