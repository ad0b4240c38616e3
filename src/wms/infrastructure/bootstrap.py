"""Composition root: wires settings, logging and the inventory context.

This is the only place in the codebase that knows about *all* layers.
"""

from __future__ import annotations

from pathlib import Path

from wms.application.context import InventoryContext
from wms.infrastructure.config import Settings, load_settings
from wms.infrastructure.logging import configure_logging
from wms.infrastructure.stock_sheet_reader import JsonStockSheetReader


def settings() -> Settings:
    return load_settings()


def init_app(app_settings: Settings) -> InventoryContext:
    """Configure logging and return a fresh, empty context."""
    configure_logging(app_settings.log_level, json=app_settings.log_json)
    return InventoryContext()


def stock_sheet_reader(file_path: Path) -> JsonStockSheetReader:
    return JsonStockSheetReader(file_path)
