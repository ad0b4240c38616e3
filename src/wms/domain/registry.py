"""Registries that hand out one Category / Warehouse per canonical name.

Registries are plain objects owned by an ``InventoryContext``; their
lifetime is the context's lifetime. Entries are never evicted.
"""

from __future__ import annotations

import threading

import structlog

from wms.domain.exceptions import ValidationError
from wms.domain.model.category import Category
from wms.domain.model.value_objects import canonical_name
from wms.domain.model.warehouse import Warehouse

logger = structlog.get_logger(__name__)

_ANONYMOUS = object()


class CategoryRegistry:

    def __init__(self) -> None:
        self._categories: dict[str, Category] = {}
        self._lock = threading.Lock()

    def of(self, name: str) -> Category:
        """Return the Category for *name*, creating it on first request."""
        if name is None:
            raise ValidationError("Category name can't be null")
        if not name:
            raise ValidationError("Category name can't be empty")

        key = canonical_name(name)
        with self._lock:
            category = self._categories.get(key)
            if category is None:
                category = Category(key)
                self._categories[key] = category
                logger.debug("category_created", category=key)
        return category

    def categories(self) -> tuple[Category, ...]:
        return tuple(self._categories.values())


class WarehouseRegistry:

    def __init__(self) -> None:
        self._warehouses: dict[str, Warehouse] = {}
        self._lock = threading.Lock()

    def get_instance(self, name: str | None = _ANONYMOUS) -> Warehouse:  # type: ignore[assignment]
        """Return a warehouse.

        Without an argument a new anonymous warehouse is returned and
        nothing is registered. With a name, the warehouse registered under
        its canonical form is returned, created on first request.
        """
        if name is _ANONYMOUS:
            return Warehouse()
        if name is None:
            raise ValidationError("Warehouse name cannot be null")

        key = canonical_name(name)
        with self._lock:
            warehouse = self._warehouses.get(key)
            if warehouse is None:
                warehouse = Warehouse(key)
                self._warehouses[key] = warehouse
                logger.debug("warehouse_created", warehouse=key)
        return warehouse

    def names(self) -> tuple[str, ...]:
        return tuple(self._warehouses)
