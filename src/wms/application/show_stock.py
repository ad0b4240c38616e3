"""Application service: Show Stock use case (query)."""

from __future__ import annotations

from wms.application.context import InventoryContext
from wms.application.dto import CategoryStockDTO, ProductDTO


class ShowStockHandler:

    def __init__(self, context: InventoryContext) -> None:
        self._context = context

    def handle(
        self, warehouse_name: str, category_name: str | None = None
    ) -> list[CategoryStockDTO]:
        """List the warehouse's products grouped by category.

        With *category_name* only that category is returned, possibly
        with no products.
        """
        warehouse = self._context.warehouses.get_instance(warehouse_name)

        if category_name is not None:
            category = self._context.categories.of(category_name)
            groups = {category: warehouse.get_products_by(category)}
        else:
            groups = warehouse.get_products_grouped_by_categories()

        return [
            CategoryStockDTO(
                category=category.name,
                products=[ProductDTO.from_record(r) for r in records],
            )
            for category, records in groups.items()
        ]
