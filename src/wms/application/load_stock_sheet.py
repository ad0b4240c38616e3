"""Application service: Load Stock Sheet use case.

Adds every product listed in a sheet to its warehouse, then applies the
sheet's price updates in order. The first invalid entry aborts the load.
"""

from __future__ import annotations

from wms.application.add_product import AddProductHandler
from wms.application.context import InventoryContext
from wms.application.dto import StockSheet
from wms.application.update_product_price import UpdateProductPriceHandler
from wms.domain.model.warehouse import Warehouse


class LoadStockSheetHandler:

    def __init__(self, context: InventoryContext) -> None:
        self._context = context
        self._add_product = AddProductHandler(context)
        self._update_price = UpdateProductPriceHandler(context)

    def handle(self, sheet: StockSheet) -> Warehouse:
        for spec in sheet.products:
            self._add_product.handle(
                warehouse_name=sheet.warehouse,
                name=spec.name,
                category_name=spec.category,
                price=spec.price,
                product_id=spec.id,
            )

        for update in sheet.price_updates:
            self._update_price.handle(
                warehouse_name=sheet.warehouse,
                product_id=update.id,
                new_price=update.price,
            )

        return self._context.warehouses.get_instance(sheet.warehouse)
