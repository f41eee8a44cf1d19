"""Tests for infrastructure/analyzers/symbols.py."""

import ast

import pytest

from archfinder.infrastructure.analyzers.symbols import SymbolTable


def table(code: str, module: str = "app.services.order", *, is_package: bool = False):
    return SymbolTable.from_module(ast.parse(code), module, is_package=is_package)


class TestResolve:
    """Tests for SymbolTable.resolve."""

    def test_direct(self) -> None:
        symbols = SymbolTable("app")
        symbols.add("Order", "app.models.Order")

        assert symbols.resolve("Order") == "app.models.Order"

    def test_dotted_through_first_segment(self) -> None:
        symbols = SymbolTable("app")
        symbols.add("models", "app.models")

        assert symbols.resolve("models.Order") == "app.models.Order"

    def test_unknown(self) -> None:
        assert SymbolTable("app").resolve("Order") is None

    def test_empty_name_raises(self) -> None:
        with pytest.raises(ValueError, match="name must not be empty"):
            SymbolTable("app").resolve("")

    def test_add_empty_raises(self) -> None:
        with pytest.raises(ValueError):
            SymbolTable("app").add("", "x")
        with pytest.raises(ValueError):
            SymbolTable("app").add("x", "")


class TestFromModule:
    """Tests for SymbolTable.from_module."""

    def test_module_classes(self) -> None:
        symbols = table("class Order: ...")
        assert symbols.resolve("Order") == "app.services.order.Order"

    def test_import(self) -> None:
        symbols = table("import app.models")
        assert symbols.resolve("app.models.Order") == "app.models.Order"

    def test_import_as(self) -> None:
        symbols = table("import app.models as m")
        assert symbols.resolve("m.Order") == "app.models.Order"

    def test_from_import(self) -> None:
        symbols = table("from app.models import Order as O")
        assert symbols.resolve("O") == "app.models.Order"

    def test_relative_import(self) -> None:
        symbols = table("from ..models import Order")
        assert symbols.resolve("Order") == "app.models.Order"

    def test_relative_import_in_package(self) -> None:
        symbols = table("from .order import Order", module="app.services", is_package=True)
        assert symbols.resolve("Order") == "app.services.order.Order"

    def test_type_checking_block(self) -> None:
        code = (
            "from typing import TYPE_CHECKING\n"
            "if TYPE_CHECKING:\n"
            "    from app.models import Order\n"
        )
        assert table(code).resolve("Order") == "app.models.Order"

    def test_star_import_ignored(self) -> None:
        symbols = table("from app.models import *")
        assert symbols.resolve("Order") is None

    def test_escaping_relative_import_ignored(self) -> None:
        symbols = table("from .....x import Y")
        assert symbols.resolve("Y") is None
