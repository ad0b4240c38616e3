"""Application service: Update Product Price use case."""

from __future__ import annotations

from wms.application.context import InventoryContext, parse_product_id
from wms.application.dto import ProductDTO
from wms.domain.exceptions import ValidationError


class UpdateProductPriceHandler:

    def __init__(self, context: InventoryContext) -> None:
        self._context = context

    def handle(self, warehouse_name: str, product_id: str, new_price: str) -> ProductDTO:
        """Change a product's price and return the product as it is now.

        Setting the current price again leaves the change log untouched.
        """
        uid = parse_product_id(product_id)
        if uid is None:
            raise ValidationError("Product id is required")

        warehouse = self._context.warehouses.get_instance(warehouse_name)
        record = warehouse.update_product_price(uid, new_price)
        return ProductDTO.from_record(record)
