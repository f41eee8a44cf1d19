"""Tests for application/matching/naming.py and patterns.py."""

import pytest

from archfinder.application.matching.naming import (
    NamePatternMatchStrategy,
    NameSuffixMatchStrategy,
)
from archfinder.application.matching.patterns import compile_type_pattern
from tests.factories import make_catalog, make_type


@pytest.fixture
def catalog():
    return make_catalog(
        make_type("shop.web.OrderController"),
        make_type("shop.web.admin.UserController"),
        make_type("shop.web.Controller"),
        make_type("shop.services.OrderService"),
        make_type("shop.web.OrderController.Form", nested=True),
    )


class TestCompileTypePattern:
    """Tests for dotted glob patterns."""

    @pytest.mark.parametrize(
        ("pattern", "fqn", "expected"),
        [
            ("shop.web.*", "shop.web.OrderController", True),
            ("shop.web.*", "shop.web.admin.UserController", False),
            ("shop.web.**", "shop.web.admin.UserController", True),
            ("shop.web.**", "shop.web", True),
            ("**.OrderService", "shop.services.OrderService", True),
            ("**.OrderService", "OrderService", True),
            ("**.*Controller", "shop.web.admin.UserController", True),
            ("shop.**.OrderService", "shop.services.OrderService", True),
            ("shop.?eb.*", "shop.web.OrderController", True),
            ("**", "anything.at.All", True),
        ],
    )
    def test_matching(self, pattern: str, fqn: str, expected: bool) -> None:
        assert compile_type_pattern(pattern).match(fqn) is expected

    def test_empty_pattern_raises(self) -> None:
        with pytest.raises(ValueError, match="empty"):
            compile_type_pattern("")

    def test_empty_segment_raises(self) -> None:
        with pytest.raises(ValueError, match="empty segment"):
            compile_type_pattern("shop..Order")

    def test_none_fqn_raises(self) -> None:
        with pytest.raises(TypeError):
            compile_type_pattern("a.*").match(None)  # type: ignore[arg-type]

    def test_str_is_original(self) -> None:
        assert str(compile_type_pattern("shop.**")) == "shop.**"


class TestNamePatternMatchStrategy:
    """Tests for match by FQN pattern."""

    def test_one_segment(self, catalog) -> None:
        strategy = NamePatternMatchStrategy("shop.web.*", technology="Flask")

        names = {c.type_name for c in strategy.find_candidates(catalog)}

        assert names == {"shop.web.OrderController", "shop.web.Controller"}

    def test_nested_types_skipped(self, catalog) -> None:
        names = {c.type_name for c in NamePatternMatchStrategy("**").find_candidates(catalog)}

        assert "shop.web.OrderController.Form" not in names


class TestNameSuffixMatchStrategy:
    """Tests for match by naming convention."""

    def test_suffix(self, catalog) -> None:
        strategy = NameSuffixMatchStrategy("Controller")

        names = {c.type_name for c in strategy.find_candidates(catalog)}

        assert names == {"shop.web.OrderController", "shop.web.admin.UserController"}

    def test_empty_suffix_raises(self) -> None:
        with pytest.raises(ValueError, match="suffix"):
            NameSuffixMatchStrategy("")
