"""Application service: Add Product use case."""

from __future__ import annotations

from wms.application.context import InventoryContext, parse_product_id
from wms.application.dto import ProductDTO


class AddProductHandler:

    def __init__(self, context: InventoryContext) -> None:
        self._context = context

    def handle(
        self,
        warehouse_name: str,
        name: str,
        category_name: str,
        price: str | None = None,
        product_id: str | None = None,
    ) -> ProductDTO:
        """Add a product to the named warehouse."""
        warehouse = self._context.warehouses.get_instance(warehouse_name)
        category = self._context.categories.of(category_name)

        record = warehouse.add_product(
            parse_product_id(product_id), name, category, price
        )
        return ProductDTO.from_record(record)
