"""ProductRecord: an immutable snapshot of a product held in a warehouse.

Price changes never mutate a record. The warehouse swaps in a new record
built by ``with_price()`` and keeps the old one in its change log.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from uuid import UUID

from wms.domain.model.category import Category
from wms.domain.model.value_objects import Money


@dataclass(frozen=True)
class ProductRecord:

    id: UUID
    name: str
    category: Category
    price: Money

    def with_price(self, new_price: Money) -> ProductRecord:
        """Return a copy of this record carrying *new_price*."""
        return replace(self, price=new_price)
