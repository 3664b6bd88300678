"""Entity: Product."""

from operator import attrgetter
from typing import Any

from pydantic import Field, field_validator

from src.catalog.entities.core._base import Entity


class Product(Entity):
    """Product entity representing a catalog item.

    The id is assigned by the store on insert and never changes afterwards.
    Updates replace name, price and description as a whole.
    """

    name: str = Field(description="Product name")
    price: float = Field(description="Unit price")
    description: str | None = Field(default=None, description="Free-text description")

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value

    def matches(self, term: str) -> bool:
        """Case-insensitive substring match against name or description."""
        needle = term.lower()
        return needle in self.name.lower() or needle in (self.description or "").lower()

    def __eq__(self, other: Any) -> bool:
        """Compare products by business attributes."""
        if not isinstance(other, Product):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.price == other.price
            and self.description == other.description
        )

    def __hash__(self) -> int:
        return hash((
            self.id,
            self.name,
            self.price,
            self.description,
        ))


# Sort column -> key extractor; unknown columns fall back to "id".
# Names compare case-sensitively by code point.
PRODUCT_SORT_KEYS = {
    "id": attrgetter("id"),
    "name": attrgetter("name"),
    "price": attrgetter("price"),
}
