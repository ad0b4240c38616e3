"""Category value: the label products are grouped under."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Category:
    """A product category.

    ``name`` is already canonical. Obtain instances through
    ``CategoryRegistry.of()`` so each canonical name maps to one object.
    """

    name: str

    def __str__(self) -> str:
        return self.name
