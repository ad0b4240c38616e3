"""InventoryContext: owns the category and warehouse registries."""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID

from wms.domain.exceptions import ValidationError
from wms.domain.registry import CategoryRegistry, WarehouseRegistry


@dataclass
class InventoryContext:
    """State shared by the application handlers.

    Create one per process (see ``bootstrap``) or one per test; two
    contexts never share categories or warehouses.
    """

    categories: CategoryRegistry = field(default_factory=CategoryRegistry)
    warehouses: WarehouseRegistry = field(default_factory=WarehouseRegistry)


def parse_product_id(raw: str | UUID | None) -> UUID | None:
    """Turn user input into a product id; blank input means "generate one"."""
    if raw is None or isinstance(raw, UUID):
        return raw
    if not raw.strip():
        return None
    try:
        return UUID(raw.strip())
    except ValueError as exc:
        raise ValidationError(f"Invalid product id: {raw!r}") from exc
