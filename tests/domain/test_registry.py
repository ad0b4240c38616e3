"""Unit tests for the category and warehouse registries."""

import pytest

from wms.domain.exceptions import ValidationError
from wms.domain.model.warehouse import Warehouse
from wms.domain.registry import CategoryRegistry, WarehouseRegistry


class TestCategoryRegistry:

    def test_name_is_canonicalized(self):
        registry = CategoryRegistry()
        assert registry.of("electronics").name == "Electronics"

    def test_remainder_kept_verbatim(self):
        registry = CategoryRegistry()
        assert registry.of("tOYS").name == "TOYS"

    def test_same_instance_for_first_letter_case_variants(self):
        registry = CategoryRegistry()
        assert registry.of("books") is registry.of("Books")

    def test_different_remainder_is_different_category(self):
        registry = CategoryRegistry()
        assert registry.of("books") is not registry.of("bOOKS")

    def test_null_name_rejected(self):
        with pytest.raises(ValidationError, match="can't be null"):
            CategoryRegistry().of(None)

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError, match="can't be empty"):
            CategoryRegistry().of("")

    def test_categories_in_registration_order(self):
        registry = CategoryRegistry()
        registry.of("tools")
        registry.of("books")
        registry.of("Tools")
        assert [c.name for c in registry.categories()] == ["Tools", "Books"]

    def test_registries_are_isolated(self):
        assert CategoryRegistry().of("books") is not CategoryRegistry().of("books")


class TestWarehouseRegistry:

    def test_anonymous_instances_are_distinct(self):
        registry = WarehouseRegistry()
        first = registry.get_instance()
        second = registry.get_instance()
        assert first is not second
        assert first.name is None

    def test_anonymous_instances_do_not_share_products(self):
        registry = WarehouseRegistry()
        category = CategoryRegistry().of("books")
        first = registry.get_instance()
        second = registry.get_instance()
        first.add_product(None, "Dune", category)
        assert second.is_empty()

    def test_anonymous_instances_not_registered(self):
        registry = WarehouseRegistry()
        registry.get_instance()
        assert registry.names() == ()

    def test_named_instance_reused(self):
        registry = WarehouseRegistry()
        assert registry.get_instance("Books") is registry.get_instance("books")

    def test_named_instance_is_canonicalized(self):
        registry = WarehouseRegistry()
        warehouse = registry.get_instance("main")
        assert isinstance(warehouse, Warehouse)
        assert warehouse.name == "Main"
        assert registry.names() == ("Main",)

    def test_null_name_rejected(self):
        with pytest.raises(ValidationError, match="cannot be null"):
            WarehouseRegistry().get_instance(None)

    def test_empty_name_allowed(self):
        registry = WarehouseRegistry()
        assert registry.get_instance("") is registry.get_instance("")
