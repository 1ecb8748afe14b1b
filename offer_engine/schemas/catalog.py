"""Product catalog schemas: display metadata looked up by id."""

from __future__ import annotations

from pydantic import Field, field_validator

from offer_engine.models.enums import ProductType
from offer_engine.schemas.base import CamelModel


class ProductAttribute(CamelModel):
    """One display tile attribute, e.g. label "Up to", value "$50,000"."""

    label: str
    value: str
    subtext: str | None = None  # e.g. "APR*", "/mo."


class Product(CamelModel):
    """Catalog product. Referenced from campaign products by id only."""

    id: str
    name: str
    type: ProductType
    description: str | None = None
    image_url: str | None = None
    attributes: list[ProductAttribute] = Field(default_factory=list)
    is_active: bool = True

    @field_validator("attributes", mode="before")
    @classmethod
    def _none_as_empty(cls, v: object) -> object:
        return [] if v is None else v
