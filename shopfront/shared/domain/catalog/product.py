"""Product value record."""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Product(BaseModel):
    """An immutable catalog entry.

    ``price`` is a non-negative integer in the smallest currency unit.
    Construction is strict: strings are not parsed into prices and
    booleans are not accepted as integers, so bad records fail with a
    ``pydantic.ValidationError`` instead of being coerced.
    """
    model_config = ConfigDict(frozen=True, extra='forbid', strict=True)

    id: str = Field(min_length=1, description="Unique key within a catalog or cart")
    title: str
    price: int = Field(ge=0, description="Price in the smallest currency unit")
    image: str = Field(default="", description="Opaque image reference (asset path or URL)")

    @field_validator('id')
    @classmethod
    def _id_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("product id must not be blank")
        return value

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Product":
        """Build a product from a flat ``{id, title, price, image}`` record."""
        return cls.model_validate(record)

    def to_record(self) -> Dict[str, Any]:
        return self.model_dump()


def display_price(amount: int, currency_symbol: str = "$") -> str:
    """Format an amount in the smallest currency unit, e.g. 1250 -> '$12.50'."""
    major, minor = divmod(amount, 100)
    return f"{currency_symbol}{major:,}.{minor:02d}"
