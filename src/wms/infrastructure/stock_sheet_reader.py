"""Reads a JSON stock sheet into a StockSheet DTO.

Expected shape::

    {
      "warehouse": "Main",
      "products": [
        {"id": "<uuid, optional>", "name": "Cable",
         "category": "electronics", "price": "5.00"}
      ],
      "price_updates": [{"id": "<uuid>", "price": "7.50"}]
    }

The file is only read; nothing is written back.
"""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from wms.application.dto import PriceUpdateSpec, ProductSpec, StockSheet
from wms.domain.exceptions import ValidationError


class JsonStockSheetReader:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def read(self, default_warehouse: str) -> StockSheet:
        raw = self._load_raw()
        try:
            return StockSheet(
                warehouse=str(raw.get("warehouse") or default_warehouse),
                products=[self._to_product(item) for item in raw.get("products", [])],
                price_updates=[
                    self._to_price_update(item) for item in raw.get("price_updates", [])
                ],
            )
        except (KeyError, TypeError, AttributeError) as exc:
            raise ValidationError(
                f"Malformed stock sheet {self._file_path.name}: {exc}"
            ) from exc

    # --- Serialization helpers ------------------------------------------------

    def _load_raw(self) -> dict:
        try:
            raw = json.loads(
                self._file_path.read_text(encoding="utf-8"), parse_float=Decimal
            )
        except json.JSONDecodeError as exc:
            raise ValidationError(
                f"Stock sheet {self._file_path.name} is not valid JSON: {exc}"
            ) from exc
        if not isinstance(raw, dict):
            raise ValidationError(
                f"Stock sheet {self._file_path.name} must contain a JSON object"
            )
        return raw

    def _to_product(self, item: dict) -> ProductSpec:
        product_id = item.get("id")
        if product_id is not None:
            self._require_str(item, "id")
        return ProductSpec(
            name=self._require_str(item, "name"),
            category=self._require_str(item, "category"),
            price=_optional_str(item.get("price")),
            id=product_id,
        )

    def _to_price_update(self, item: dict) -> PriceUpdateSpec:
        return PriceUpdateSpec(
            id=self._require_str(item, "id"), price=str(item["price"])
        )

    def _require_str(self, item: dict, key: str) -> str:
        value = item[key]
        if not isinstance(value, str):
            raise ValidationError(
                f"Malformed stock sheet {self._file_path.name}: "
                f"{key!r} must be a string, got {type(value).__name__}"
            )
        return value


def _optional_str(value: object) -> str | None:
    return None if value is None else str(value)
