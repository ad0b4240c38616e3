"""Application service: Show Price Changes use case (query)."""

from __future__ import annotations

from wms.application.context import InventoryContext
from wms.application.dto import PriceChangeDTO


class ShowPriceChangesHandler:

    def __init__(self, context: InventoryContext) -> None:
        self._context = context

    def handle(self, warehouse_name: str) -> list[PriceChangeDTO]:
        """Return the change log, oldest first, next to each current price."""
        warehouse = self._context.warehouses.get_instance(warehouse_name)

        changes = []
        for snapshot in warehouse.get_changed_products():
            current = warehouse.get_product_by_id(snapshot.id)
            changes.append(
                PriceChangeDTO(
                    product_id=str(snapshot.id),
                    product_name=snapshot.name,
                    old_price=str(snapshot.price),
                    current_price=str(current.price) if current else "-",
                )
            )
        return changes
