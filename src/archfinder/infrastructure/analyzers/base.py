"""Shared helpers for reading class metadata out of Python ASTs."""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING

from archfinder.domain.exceptions.resolution import ParsingError
from archfinder.domain.model.enums import Visibility

if TYPE_CHECKING:
    from pathlib import Path


def visibility_of_name(name: str) -> Visibility:
    """Visibility of a class from its name.

    `__Name__` is public, `__Name` is name-mangled and private,
    `_Name` is protected, anything else public.
    """
    if name.startswith("__"):
        return Visibility.PUBLIC if name.endswith("__") else Visibility.PRIVATE
    return Visibility.PROTECTED if name.startswith("_") else Visibility.PUBLIC


def module_name_for(source_file: Path, root: Path) -> str:
    """Dotted module name of a source file below root.

    Args:
        source_file: .py file
        root: Directory the dotted name starts at

    Returns:
        Module name; a package __init__ gives the package name

    Raises:
        ParsingError: If the file is outside root or its path is not importable
    """
    if not source_file.is_relative_to(root):
        raise ParsingError(source_file, f"not under {root}")

    segments = source_file.relative_to(root).with_suffix("").parts
    if segments[-1:] == ("__init__",):
        segments = segments[:-1]

    if not segments:
        raise ParsingError(source_file, "cannot derive a module name (empty)")

    invalid = [s for s in segments if not s.isidentifier()]
    if invalid:
        raise ParsingError(source_file, f"'{invalid[0]}' is not valid Python identifier")

    return ".".join(segments)


def absolute_import_target(
    target: str | None,
    level: int,
    importer: str,
    *,
    is_package: bool = False,
) -> str:
    """Absolute module an import statement refers to.

    Args:
        target: Module written after the dots (None for `from . import x`)
        level: Number of leading dots, 0 for absolute imports
        importer: Dotted name of the importing module
        is_package: Importer is a package __init__

    Returns:
        Absolute dotted module name

    Raises:
        ValueError: If an absolute import has no module, or the dots
            climb above the top-level package
    """
    if not level:
        if target is None:
            raise ValueError("absolute import must have module")
        return target

    # in a package __init__ one dot is the package itself
    package = importer if is_package else importer.rpartition(".")[0]
    for _ in range(level - 1):
        package = package.rpartition(".")[0]

    if not package:
        raise ValueError(
            f"relative import level {level} exceeds package depth of module '{importer}'"
        )

    return f"{package}.{target}" if target else package


def dotted_name(node: ast.expr) -> str | None:
    """Name or attribute chain as dotted string.

    `foo` → "foo", `foo.bar.Baz` → "foo.bar.Baz", anything else → None.
    Subscripts and calls are unwrapped to their base: `List[int]` → "List",
    `service()` → "service".
    """
    match node:
        case ast.Name(id=name):
            return name
        case ast.Attribute(value=value, attr=attr):
            base = dotted_name(value)
            return f"{base}.{attr}" if base is not None else None
        case ast.Call(func=func) | ast.Subscript(value=func):
            return dotted_name(func)
    return None


def parse_string_annotation(node: ast.expr) -> ast.expr | None:
    """Parse a forward reference annotation ("Foo", "pkg.Foo")."""
    if not isinstance(node, ast.Constant) or not isinstance(node.value, str):
        return None
    try:
        return ast.parse(node.value, mode="eval").body
    except SyntaxError:
        return None
