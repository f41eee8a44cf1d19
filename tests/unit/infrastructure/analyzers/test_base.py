"""Tests for infrastructure/analyzers/base.py."""

import ast
from pathlib import Path

import pytest

from archfinder.domain.exceptions import ParsingError
from archfinder.domain.model.enums import Visibility
from archfinder.infrastructure.analyzers.base import (
    module_name_for,
    dotted_name,
    visibility_of_name,
    parse_string_annotation,
    absolute_import_target,
)


def expr(code: str) -> ast.expr:
    return ast.parse(code, mode="eval").body


class TestVisibilityOfName:
    """Tests for visibility_of_name function."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("Order", Visibility.PUBLIC),
            ("__Dunder__", Visibility.PUBLIC),
            ("_Helper", Visibility.PROTECTED),
            ("__Mangled", Visibility.PRIVATE),
        ],
    )
    def test_naming_convention(self, name: str, expected: Visibility) -> None:
        assert visibility_of_name(name) is expected


class TestModuleNameFor:
    """Tests for module_name_for function."""

    def test_module(self) -> None:
        assert module_name_for(Path("/src/app/models.py"), Path("/src")) == "app.models"

    def test_package_init(self) -> None:
        assert module_name_for(Path("/src/app/__init__.py"), Path("/src")) == "app"

    def test_not_under_root_raises(self) -> None:
        with pytest.raises(ParsingError, match="not under"):
            module_name_for(Path("/other/app.py"), Path("/src"))

    def test_invalid_identifier_raises(self) -> None:
        with pytest.raises(ParsingError, match="not valid Python identifier"):
            module_name_for(Path("/src/my-app/models.py"), Path("/src"))

    def test_root_init_raises(self) -> None:
        with pytest.raises(ParsingError, match="empty"):
            module_name_for(Path("/src/__init__.py"), Path("/src"))


class TestAbsoluteImportTarget:
    """Tests for absolute_import_target function."""

    def test_absolute(self) -> None:
        assert absolute_import_target("os.path", 0, "app.models") == "os.path"

    def test_absolute_without_module_raises(self) -> None:
        with pytest.raises(ValueError, match="absolute import"):
            absolute_import_target(None, 0, "app.models")

    def test_single_dot(self) -> None:
        assert absolute_import_target("repo", 1, "app.services.order") == "app.services.repo"

    def test_double_dot(self) -> None:
        assert absolute_import_target("models", 2, "app.services.order") == "app.models"

    def test_dot_only(self) -> None:
        assert absolute_import_target(None, 1, "app.services.order") == "app.services"

    def test_inside_package_init(self) -> None:
        assert absolute_import_target("order", 1, "app.services", is_package=True) == (
            "app.services.order"
        )

    def test_escaping_package_raises(self) -> None:
        with pytest.raises(ValueError, match="exceeds package depth"):
            absolute_import_target("x", 3, "app.models")


class TestDottedName:
    """Tests for dotted_name function."""

    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            ("Order", "Order"),
            ("models.Order", "models.Order"),
            ("a.b.C", "a.b.C"),
            ("list[Order]", "list"),
            ("service()", "service"),
            ("pkg.factory(1)", "pkg.factory"),
        ],
    )
    def test_names(self, code: str, expected: str) -> None:
        assert dotted_name(expr(code)) == expected

    @pytest.mark.parametrize("code", ["1", "'text'", "(a or b).c"])
    def test_non_names(self, code: str) -> None:
        assert dotted_name(expr(code)) is None


class TestParseStringAnnotation:
    """Tests for parse_string_annotation function."""

    def test_forward_reference(self) -> None:
        parsed = parse_string_annotation(expr("'models.Order'"))

        assert parsed is not None
        assert dotted_name(parsed) == "models.Order"

    def test_invalid_source(self) -> None:
        assert parse_string_annotation(expr("'not valid ('")) is None

    def test_non_string(self) -> None:
        assert parse_string_annotation(expr("Order")) is None
