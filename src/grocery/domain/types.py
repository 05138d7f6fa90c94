"""Domain types for the grocery app."""
import re
from typing import NewType, Optional, Annotated
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator


# Strong types for IDs
ClientId = NewType('ClientId', int)
ListId = NewType('ListId', int)
ProductId = NewType('ProductId', int)
ItemId = NewType('ItemId', int)

HEX_COLOR_PATTERN = re.compile(r"^#[0-9A-Fa-f]{6}$")


class GroceryListItemRecord(BaseModel):
    """A list item as written to a JSON export."""
    id: int = Field(serialization_alias="Id")
    grocery_list_id: int = Field(serialization_alias="GroceryListId")
    product_id: int = Field(serialization_alias="ProductId")
    amount: Annotated[int, Field(ge=0, serialization_alias="Amount")]

    model_config = ConfigDict(from_attributes=True)


_records_adapter = TypeAdapter(list[GroceryListItemRecord])


def items_to_json(items) -> str:
    """
    Serialize list items to a plain JSON array.

    Args:
        items: GroceryListItem models (or anything with the same attributes)

    Returns:
        UTF-8 JSON text, one object per item
    """
    records = [GroceryListItemRecord.model_validate(item) for item in items]
    return _records_adapter.dump_json(records, by_alias=True).decode("utf-8")


# Command Models
class UpdateListCommand(BaseModel):
    """Command for renaming and recoloring a list."""
    list_id: ListId
    name: Annotated[str, Field(min_length=1, max_length=100)]
    color: Optional[str] = ""

    @field_validator('name', mode='before')
    @classmethod
    def strip_name(cls, v):
        """Trim surrounding whitespace from the name."""
        if isinstance(v, str):
            v = v.strip()
        if not v:
            raise ValueError('Naam mag niet leeg zijn')
        return v

    @field_validator('color')
    @classmethod
    def color_must_be_hex(cls, v: Optional[str]) -> str:
        """Validate that color is empty or a #RRGGBB value."""
        v = (v or "").strip()
        if v and not HEX_COLOR_PATTERN.match(v):
            raise ValueError('Kleur moet de vorm #RRGGBB hebben')
        return v.upper()
