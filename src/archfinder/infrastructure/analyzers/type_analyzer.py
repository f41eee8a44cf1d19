"""Class analyzer producing catalog type metadata."""

from __future__ import annotations

import ast
from dataclasses import dataclass
from typing import TYPE_CHECKING

from archfinder.domain.model.enums import TypeCategory
from archfinder.domain.model.type_info import TypeInfo
from archfinder.infrastructure.analyzers.base import (
    dotted_name,
    visibility_of_name,
    parse_string_annotation,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

    from archfinder.infrastructure.analyzers.symbols import SymbolTable


_PROTOCOL_MARKERS = frozenset({"typing.Protocol", "typing_extensions.Protocol"})
_ABC_MARKERS = frozenset({"abc.ABC", "abc.ABCMeta"})
_ENUM_MARKERS = frozenset(
    {"enum.Enum", "enum.IntEnum", "enum.StrEnum", "enum.Flag", "enum.IntFlag"}
)
_ABSTRACT_DECORATORS = frozenset({"abc.abstractmethod", "abstractmethod"})


@dataclass(frozen=True, slots=True)
class RawType:
    """Type metadata before references are checked against the catalog.

    Attributes:
        info: Type metadata, references left empty
        raw_references: Resolved dotted names used by the type
    """

    info: TypeInfo
    raw_references: frozenset[str]


class TypeAnalyzer:
    """Extracts type metadata from class definitions.

    Top-level classes and classes nested in classes are reported.
    Classes defined inside functions are local and skipped.

    Stateless analyzer - no state between analyze() calls.
    """

    def analyze(self, tree: ast.Module, symbols: SymbolTable) -> tuple[RawType, ...]:
        """Analyze all classes of a module.

        Args:
            tree: Parsed module
            symbols: Symbol table of that module

        Returns:
            One RawType per class, outer classes before nested ones
        """
        if tree is None:
            raise TypeError("tree must not be None")
        if symbols is None:
            raise TypeError("symbols must not be None")

        return tuple(self._walk(tree.body, symbols.module, symbols, nested=False))

    def _walk(
        self,
        body: list[ast.stmt],
        prefix: str,
        symbols: SymbolTable,
        *,
        nested: bool,
    ) -> Iterator[RawType]:
        for node in body:
            if isinstance(node, ast.ClassDef):
                fqn = f"{prefix}.{node.name}"
                yield self._analyze_class(node, fqn, symbols, nested=nested)
                yield from self._walk(node.body, fqn, symbols, nested=True)

    def _analyze_class(
        self,
        node: ast.ClassDef,
        fqn: str,
        symbols: SymbolTable,
        *,
        nested: bool,
    ) -> RawType:
        supertypes = tuple(
            self._resolve(name, symbols)
            for base in node.bases
            if (name := dotted_name(base)) is not None
        )

        tags: set[str] = set()
        for decorator in node.decorator_list:
            name = dotted_name(decorator)
            if name is None:
                continue
            tags.add(name)
            tags.add(name.rsplit(".", 1)[-1])
            tags.add(self._resolve(name, symbols))

        return RawType(
            info=TypeInfo(
                fqn=fqn,
                category=self._category(node, supertypes, symbols),
                visibility=visibility_of_name(node.name),
                tags=frozenset(tags),
                supertypes=supertypes,
                is_nested=nested,
                docstring=ast.get_docstring(node, clean=True),
            ),
            raw_references=frozenset(self._references(node, symbols)),
        )

    def _resolve(self, name: str, symbols: SymbolTable) -> str:
        """Resolve a name through imports, keep it as written otherwise."""
        return symbols.resolve(name) or name

    def _category(
        self,
        node: ast.ClassDef,
        supertypes: tuple[str, ...],
        symbols: SymbolTable,
    ) -> TypeCategory:
        bases = set(supertypes)
        for keyword in node.keywords:
            if keyword.arg == "metaclass" and (name := dotted_name(keyword.value)):
                bases.add(symbols.resolve(name) or name)

        if bases & _ENUM_MARKERS:
            return TypeCategory.ENUM
        if bases & (_PROTOCOL_MARKERS | _ABC_MARKERS):
            return TypeCategory.INTERFACE
        if self._has_abstract_methods(node, symbols):
            return TypeCategory.ABSTRACT_CLASS
        return TypeCategory.CLASS

    def _has_abstract_methods(self, node: ast.ClassDef, symbols: SymbolTable) -> bool:
        for item in node.body:
            if isinstance(item, ast.FunctionDef | ast.AsyncFunctionDef):
                for decorator in item.decorator_list:
                    name = dotted_name(decorator)
                    if name and (symbols.resolve(name) or name) in _ABSTRACT_DECORATORS:
                        return True
        return False

    def _references(self, node: ast.ClassDef, symbols: SymbolTable) -> Iterator[str]:
        """Resolved names used anywhere in the class, nested classes excluded.

        Names that resolve through neither imports nor module classes are
        dropped (builtins, locals, self attributes).
        """
        for expr in _iter_expressions(node):
            name = dotted_name(expr)
            if name is None:
                continue
            resolved = symbols.resolve(name)
            if resolved is not None:
                yield resolved


def _iter_expressions(node: ast.ClassDef) -> Iterator[ast.expr]:
    """Name/Attribute nodes of a class, string annotations parsed.

    Nested ClassDef bodies are their own types and are not entered;
    their decorators and bases still count for the outer class.
    """
    stack: list[ast.AST] = [*node.bases, *node.decorator_list, *node.body]

    while stack:
        current = stack.pop()

        match current:
            case ast.ClassDef(bases=bases, decorator_list=decorators):
                stack.extend(bases)
                stack.extend(decorators)
                continue
            case ast.Name() | ast.Attribute():
                yield current
            case ast.arg(annotation=annotation) | ast.AnnAssign(annotation=annotation):
                if annotation is not None and (parsed := parse_string_annotation(annotation)):
                    stack.append(parsed)
            case ast.FunctionDef(returns=returns) | ast.AsyncFunctionDef(returns=returns):
                if returns is not None and (parsed := parse_string_annotation(returns)):
                    stack.append(parsed)

        stack.extend(ast.iter_child_nodes(current))
