"""Warehouse aggregate: a named container of products.

The Warehouse owns its ProductRecords and the log of records that were
replaced by price changes. All business invariants are enforced here:

- product ids are unique within ``get_products()``
- every price change that alters the value leaves exactly one snapshot
  of the previous record in ``get_changed_products()``
"""

from __future__ import annotations

import threading
import uuid
from decimal import Decimal
from uuid import UUID

import structlog

from wms.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    ValidationError,
)
from wms.domain.model.category import Category
from wms.domain.model.product import ProductRecord
from wms.domain.model.value_objects import Money

logger = structlog.get_logger(__name__)


class Warehouse:
    """Aggregate root for stock held in one warehouse.

    Build instances through ``WarehouseRegistry.get_instance()``; a
    warehouse created without a name is anonymous and never shared.
    """

    def __init__(self, name: str | None = None) -> None:
        self._name = name
        self._products: list[ProductRecord] = []
        self._changed_products: list[ProductRecord] = []
        self._lock = threading.Lock()

    @property
    def name(self) -> str | None:
        return self._name

    def __repr__(self) -> str:
        return f"Warehouse(name={self._name!r}, products={len(self._products)})"

    # --- Commands -------------------------------------------------------------

    def add_product(
        self,
        product_id: UUID | None,
        name: str,
        category: Category,
        price: Money | Decimal | str | int | None = None,
    ) -> ProductRecord:
        """Add a new product and return its record.

        A missing *product_id* is replaced by a random UUID and a missing
        *price* by zero. Re-using an existing id is rejected; change the
        price with ``update_product_price()`` instead.
        """
        if not name:
            raise ValidationError("Product name can't be null or empty")
        if category is None:
            raise ValidationError("Category can't be null")

        final_price = Money.zero() if price is None else Money.of(price)

        with self._lock:
            if product_id is None:
                product_id = uuid.uuid4()
            elif self._find(product_id) is not None:
                raise DuplicateEntityError(
                    f"Product with id {product_id} already exists, "
                    "use update_product_price for updates"
                )
            record = ProductRecord(
                id=product_id, name=name, category=category, price=final_price
            )
            self._products.append(record)

        logger.info(
            "product_added",
            warehouse=self._name,
            product_id=str(record.id),
            category=category.name,
            price=str(record.price.amount),
        )
        return record

    def update_product_price(
        self, product_id: UUID, new_price: Money | Decimal | str | int
    ) -> ProductRecord:
        """Replace the product's record with one carrying *new_price*.

        Setting the price it already has is a no-op. Otherwise the old
        record goes to the change log and the new record is appended at
        the end of the product sequence. Returns the record now held.

        Prices compare by numeric value: unlike a scale-sensitive
        comparison, 5.0 and 5.00 are the same price and no change is logged.
        """
        if new_price is None:
            raise ValidationError("Price cannot be null")
        price = Money.of(new_price)

        with self._lock:
            current = self._find(product_id)
            if current is None:
                raise EntityNotFoundError(f"Product with id {product_id} doesn't exist")
            if current.price == price:
                return current

            updated = current.with_price(price)
            self._changed_products.append(current)
            self._products = [p for p in self._products if p.id != product_id]
            self._products.append(updated)

        logger.info(
            "product_price_changed",
            warehouse=self._name,
            product_id=str(product_id),
            old_price=str(current.price.amount),
            new_price=str(price.amount),
        )
        return updated

    # --- Queries --------------------------------------------------------------

    def get_products(self) -> tuple[ProductRecord, ...]:
        return tuple(self._products)

    def get_product_by_id(self, product_id: UUID) -> ProductRecord | None:
        return self._find(product_id)

    def get_changed_products(self) -> tuple[ProductRecord, ...]:
        """Snapshots of replaced records, oldest change first."""
        return tuple(self._changed_products)

    def get_products_grouped_by_categories(self) -> dict[Category, list[ProductRecord]]:
        """Group products by category.

        Keys appear in the order their first product appears; products
        keep their relative order inside each group.
        """
        groups: dict[Category, list[ProductRecord]] = {}
        for record in self._products:
            groups.setdefault(record.category, []).append(record)
        return groups

    def get_products_by(self, category: Category) -> list[ProductRecord]:
        return self.get_products_grouped_by_categories().get(category, [])

    def is_empty(self) -> bool:
        return not self._products

    # --- Internal helpers -----------------------------------------------------

    def _find(self, product_id: UUID) -> ProductRecord | None:
        for record in self._products:
            if record.id == product_id:
                return record
        return None
