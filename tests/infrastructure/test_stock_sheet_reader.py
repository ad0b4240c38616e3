"""Tests for the JSON stock sheet reader and settings loader."""

import json

import pytest

from wms.application.dto import PriceUpdateSpec, ProductSpec
from wms.domain.exceptions import ValidationError
from wms.infrastructure.config import Settings, load_settings
from wms.infrastructure.stock_sheet_reader import JsonStockSheetReader


def _write(tmp_path, payload) -> JsonStockSheetReader:
    path = tmp_path / "sheet.json"
    text = payload if isinstance(payload, str) else json.dumps(payload)
    path.write_text(text, encoding="utf-8")
    return JsonStockSheetReader(path)


class TestJsonStockSheetReader:

    def test_reads_products_and_updates(self, tmp_path):
        reader = _write(tmp_path, {
            "warehouse": "Main",
            "products": [
                {"id": "a1", "name": "Cable", "category": "electronics", "price": "5.00"},
                {"name": "Dune", "category": "books"},
            ],
            "price_updates": [{"id": "a1", "price": "7.50"}],
        })
        sheet = reader.read(default_warehouse="Fallback")
        assert sheet.warehouse == "Main"
        assert sheet.products == [
            ProductSpec(name="Cable", category="electronics", price="5.00", id="a1"),
            ProductSpec(name="Dune", category="books"),
        ]
        assert sheet.price_updates == [PriceUpdateSpec(id="a1", price="7.50")]

    def test_numeric_prices_stay_exact(self, tmp_path):
        reader = _write(tmp_path, '{"products": [{"name": "A", "category": "b", "price": 0.1}]}')
        assert reader.read("Main").products[0].price == "0.1"

    def test_default_warehouse(self, tmp_path):
        reader = _write(tmp_path, {"products": []})
        assert reader.read(default_warehouse="Fallback").warehouse == "Fallback"

    def test_missing_field_rejected(self, tmp_path):
        reader = _write(tmp_path, {"products": [{"name": "Cable"}]})
        with pytest.raises(ValidationError, match="Malformed stock sheet"):
            reader.read("Main")

    def test_non_string_fields_rejected(self, tmp_path):
        for item in (
            {"name": 42, "category": "books"},
            {"name": "Dune", "category": 5},
            {"name": "Dune", "category": "books", "id": 7},
        ):
            reader = _write(tmp_path, {"products": [item]})
            with pytest.raises(ValidationError, match="must be a string"):
                reader.read("Main")

    def test_non_string_update_id_rejected(self, tmp_path):
        reader = _write(tmp_path, {"price_updates": [{"id": 1, "price": "2"}]})
        with pytest.raises(ValidationError, match="'id' must be a string"):
            reader.read("Main")

    def test_invalid_json_rejected(self, tmp_path):
        reader = _write(tmp_path, "{not json")
        with pytest.raises(ValidationError, match="not valid JSON"):
            reader.read("Main")

    def test_non_object_rejected(self, tmp_path):
        reader = _write(tmp_path, [])
        with pytest.raises(ValidationError, match="must contain a JSON object"):
            reader.read("Main")


class TestLoadSettings:

    def test_defaults(self, monkeypatch):
        for var in ("WMS_LOG_LEVEL", "WMS_LOG_JSON", "WMS_DEFAULT_WAREHOUSE"):
            monkeypatch.delenv(var, raising=False)
        assert load_settings() == Settings()

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("WMS_LOG_LEVEL", "debug")
        monkeypatch.setenv("WMS_LOG_JSON", "yes")
        monkeypatch.setenv("WMS_DEFAULT_WAREHOUSE", "Backup")
        assert load_settings() == Settings(
            log_level="DEBUG", log_json=True, default_warehouse="Backup"
        )

    def test_unknown_log_level_falls_back_to_warning(self, monkeypatch):
        monkeypatch.setenv("WMS_LOG_LEVEL", "verbose")
        assert load_settings().log_level == "WARNING"
