"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from wms.domain.model.product import ProductRecord


@dataclass(frozen=True)
class ProductSpec:
    """Input: a product to add (id and price optional)."""

    name: str
    category: str
    price: str | None = None
    id: str | None = None


@dataclass(frozen=True)
class PriceUpdateSpec:
    """Input: a new price for an existing product."""

    id: str
    price: str


@dataclass(frozen=True)
class StockSheet:
    """Input: a warehouse's products plus price updates to apply in order."""

    warehouse: str
    products: list[ProductSpec] = field(default_factory=list)
    price_updates: list[PriceUpdateSpec] = field(default_factory=list)


@dataclass(frozen=True)
class ProductDTO:
    """Output: a single product as displayed to the user."""

    id: str
    name: str
    category: str
    price: str  # formatted, e.g. "$5.00"

    @staticmethod
    def from_record(record: ProductRecord) -> ProductDTO:
        return ProductDTO(
            id=str(record.id),
            name=record.name,
            category=record.category.name,
            price=str(record.price),
        )


@dataclass(frozen=True)
class CategoryStockDTO:
    """Output: the products of one category."""

    category: str
    products: list[ProductDTO]


@dataclass(frozen=True)
class PriceChangeDTO:
    """Output: one entry of the price change log."""

    product_id: str
    product_name: str
    old_price: str
    current_price: str
