"""Tests for domain/model/component.py, code_element.py and dependency.py."""

import pytest

from archfinder.domain.model.code_element import CodeElement
from archfinder.domain.model.component import Component
from archfinder.domain.model.dependency import Dependency
from archfinder.domain.model.enums import CodeElementRole, TypeCategory, Visibility


class TestComponentCreation:
    """Tests for Component construction."""

    def test_primary_code_element_created(self) -> None:
        component = Component("Order", "shop.Order")

        assert len(component.code_elements) == 1
        element = component.code_elements[0]
        assert element.type_name == "shop.Order"
        assert element.role is CodeElementRole.PRIMARY

    def test_component_without_type_has_no_code(self) -> None:
        component = Component("Billing")

        assert component.code_elements == ()
        assert component.primary_element is None
        assert component.category is None

    def test_empty_name_raises(self) -> None:
        with pytest.raises(ValueError, match="name"):
            Component("")

    def test_identity_equality(self) -> None:
        assert Component("Order", "shop.Order") != Component("Order", "shop.Order")


class TestSupportingTypes:
    """Tests for Component.add_supporting_type()."""

    def test_added_after_primary(self) -> None:
        component = Component("Order", "shop.Order")
        component.add_supporting_type("shop.OrderImpl")

        assert [e.type_name for e in component.code_elements] == ["shop.Order", "shop.OrderImpl"]
        assert component.supporting_types == frozenset({"shop.OrderImpl"})

    def test_adding_twice_returns_same_element(self) -> None:
        component = Component("Order", "shop.Order")
        first = component.add_supporting_type("shop.OrderImpl")
        second = component.add_supporting_type("shop.OrderImpl")

        assert first is second
        assert len(component.code_elements) == 2

    def test_adding_primary_type_keeps_primary_role(self) -> None:
        component = Component("Order", "shop.Order")
        element = component.add_supporting_type("shop.Order")

        assert element.role is CodeElementRole.PRIMARY

    def test_empty_type_raises(self) -> None:
        with pytest.raises(ValueError, match="type_name"):
            Component("Order", "shop.Order").add_supporting_type("")


class TestSetPrimaryType:
    """Tests for Component.set_primary_type()."""

    def test_replaces_primary(self) -> None:
        component = Component("Order", "shop.Order")
        component.set_primary_type("legacy.Order")

        assert component.type_name == "legacy.Order"
        assert not component.has_type("shop.Order")
        assert component.primary_element is not None
        assert component.primary_element.type_name == "legacy.Order"

    def test_promotes_supporting_element(self) -> None:
        component = Component("Order", "shop.Order")
        component.add_supporting_type("shop.OrderImpl")
        component.set_primary_type("shop.OrderImpl")

        assert component.supporting_types == frozenset()
        assert component.primary_element.role is CodeElementRole.PRIMARY


class TestUses:
    """Tests for Component.uses()."""

    def test_records_edge(self) -> None:
        order = Component("Order", "shop.Order")
        repo = Component("OrderRepository", "shop.OrderRepository")

        dependency = order.uses(repo, "reads")

        assert dependency == Dependency("Order", "OrderRepository", "reads")
        assert order.dependencies == (dependency,)
        assert order.depends_on("OrderRepository")

    def test_second_edge_is_noop(self) -> None:
        order = Component("Order", "shop.Order")
        repo = Component("OrderRepository", "shop.OrderRepository")

        order.uses(repo, "reads")
        assert order.uses(repo, "writes") is None

        assert len(order.dependencies) == 1
        assert order.dependencies[0].description == "reads"

    def test_self_edge_ignored(self) -> None:
        order = Component("Order", "shop.Order")

        assert order.uses(order) is None
        assert order.dependencies == ()

    def test_dependencies_sorted_by_destination(self) -> None:
        order = Component("Order", "shop.Order")
        order.uses(Component("Zeta"))
        order.uses(Component("Alpha"))

        assert [d.destination for d in order.dependencies] == ["Alpha", "Zeta"]

    def test_none_destination_raises(self) -> None:
        with pytest.raises(TypeError, match="destination"):
            Component("Order").uses(None)  # type: ignore[arg-type]


class TestClassificationProperties:
    """Category and visibility come from the primary element."""

    def test_reads_primary_element(self) -> None:
        component = Component("Order", "shop.Order")
        element = component.primary_element
        element.category = TypeCategory.INTERFACE
        element.visibility = Visibility.PROTECTED

        assert component.category is TypeCategory.INTERFACE
        assert component.visibility is Visibility.PROTECTED


class TestCodeElement:
    """Tests for CodeElement."""

    def test_name_is_simple_name(self) -> None:
        assert CodeElement("shop.orders.Order", CodeElementRole.PRIMARY).name == "Order"

    def test_unclassified_by_default(self) -> None:
        element = CodeElement("shop.Order", CodeElementRole.SUPPORTING)
        assert element.visibility is None
        assert element.category is None
        assert not element.is_primary

    def test_empty_type_raises(self) -> None:
        with pytest.raises(ValueError, match="type_name"):
            CodeElement("", CodeElementRole.PRIMARY)


class TestDependency:
    """Tests for Dependency value object."""

    def test_self_dependency_raises(self) -> None:
        with pytest.raises(ValueError, match="self"):
            Dependency("Order", "Order")

    def test_empty_names_raise(self) -> None:
        with pytest.raises(ValueError, match="source"):
            Dependency("", "Order")
        with pytest.raises(ValueError, match="destination"):
            Dependency("Order", "")

    def test_str(self) -> None:
        assert str(Dependency("Order", "OrderRepository")) == "Order -> OrderRepository"
