"""AST-based type catalog adapter.

Builds a type catalog from Python sources without importing them:
classes become types, decorators become tags, bases become supertypes
and names used in class bodies become references.
"""

from __future__ import annotations

import ast
import logging
from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING

from archfinder.domain.exceptions.resolution import ParsingError
from archfinder.infrastructure.analyzers.base import module_name_for
from archfinder.infrastructure.analyzers.symbols import SymbolTable
from archfinder.infrastructure.analyzers.type_analyzer import RawType, TypeAnalyzer
from archfinder.infrastructure.catalog.in_memory import InMemoryTypeCatalog

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from archfinder.domain.model.type_info import TypeInfo

logger = logging.getLogger(__name__)


class AstTypeCatalog(InMemoryTypeCatalog):
    """Type catalog read from Python source files.

    References are narrowed to types the catalog knows: a used name
    `models.User.objects` becomes `app.models.User`, third-party and
    builtin names are dropped.

    FAIL-FIRST: raises ParsingError on unreadable or invalid files.
    """

    @classmethod
    def from_directory(cls, path: Path, root_path: Path | None = None) -> AstTypeCatalog:
        """Parse a directory recursively.

        Args:
            path: Directory to scan (skips __pycache__)
            root_path: Directory module names are relative to.
                None = parent of path, so path's name is the root package.

        Returns:
            Catalog of all classes found

        Raises:
            ParsingError: If any file cannot be read or parsed
        """
        if path is None:
            raise TypeError("path must not be None")
        if not path.is_dir():
            raise ParsingError(path, "not a directory")

        root = root_path if root_path is not None else path.parent
        analyzer = TypeAnalyzer()
        raw: list[RawType] = []

        for py_file in sorted(path.rglob("*.py")):
            if "__pycache__" in py_file.parts:
                continue
            module = module_name_for(py_file, root)
            tree = _parse(py_file)
            symbols = SymbolTable.from_module(
                tree, module, is_package=py_file.name == "__init__.py"
            )
            raw.extend(analyzer.analyze(tree, symbols))

        logger.debug("Read %d type(s) from %s", len(raw), path)
        return cls(_link(raw))

    @classmethod
    def from_sources(cls, sources: Mapping[str, str]) -> AstTypeCatalog:
        """Parse in-memory sources keyed by module name.

        Every source is read as a plain module, never as a package
        __init__, so relative imports resolve against its parent package.

        Raises:
            ParsingError: If a source has a syntax error
        """
        analyzer = TypeAnalyzer()
        raw: list[RawType] = []

        for module, source in sorted(sources.items()):
            path = Path(*module.split(".")).with_suffix(".py")
            try:
                tree = ast.parse(source, filename=str(path))
            except SyntaxError as e:
                raise ParsingError(path, f"syntax error: {e}") from e
            raw.extend(analyzer.analyze(tree, SymbolTable.from_module(tree, module)))

        return cls(_link(raw))


def _parse(path: Path) -> ast.Module:
    """Read and parse one file. FAIL-FIRST."""
    try:
        source = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ParsingError(path, "file not found") from e
    except PermissionError as e:
        raise ParsingError(path, "permission denied") from e
    except UnicodeDecodeError as e:
        raise ParsingError(path, f"encoding error: {e}") from e

    try:
        return ast.parse(source, filename=str(path))
    except SyntaxError as e:
        raise ParsingError(path, f"syntax error: {e}") from e


def _link(raw: Iterable[RawType]) -> list[TypeInfo]:
    """Narrow raw references to known types.

    Each dotted name maps to its longest prefix that is a known type.
    Supertypes count as references too.
    """
    raw = list(raw)
    known = frozenset(r.info.fqn for r in raw)

    linked: list[TypeInfo] = []
    for item in raw:
        references: set[str] = set()
        for name in (*item.raw_references, *item.info.supertypes):
            target = _longest_known_prefix(name, known)
            if target is not None:
                references.add(target)
        linked.append(replace(item.info, references=frozenset(references)))
    return linked


def _longest_known_prefix(name: str, known: frozenset[str]) -> str | None:
    parts = name.split(".")
    for end in range(len(parts), 0, -1):
        candidate = ".".join(parts[:end])
        if candidate in known:
            return candidate
    return None
