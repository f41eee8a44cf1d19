"""Symbol table for name resolution."""

from __future__ import annotations

import ast
from dataclasses import dataclass, field

from archfinder.infrastructure.analyzers.base import absolute_import_target


@dataclass(slots=True)
class SymbolTable:
    """Maps names visible in one module to fully qualified names.

    Mutable - filled while reading a module.

    Handles:
    - import X / import X as Y
    - from X import Y / from X import Y as Z
    - classes defined in the module itself

    Star imports are not resolved: names they bring in stay unknown.

    Attributes:
        module: Module the table belongs to
        _direct: Local name → fully qualified name mapping
    """

    module: str
    _direct: dict[str, str] = field(default_factory=dict)

    def add(self, local_name: str, fqn: str) -> None:
        """Register a local name.

        Raises:
            ValueError: If either name is empty
        """
        if not local_name:
            raise ValueError("local_name must not be empty")
        if not fqn:
            raise ValueError("fqn must not be empty")
        self._direct[local_name] = fqn

    def resolve(self, name: str) -> str | None:
        """Resolve local name (possibly dotted) to fully qualified name.

        Returns:
            FQN, or None if the first segment is unknown
        """
        if not name:
            raise ValueError("name must not be empty")

        if name in self._direct:
            return self._direct[name]

        first, _, rest = name.partition(".")
        if rest and first in self._direct:
            return f"{self._direct[first]}.{rest}"

        return None

    @classmethod
    def from_module(cls, tree: ast.Module, module: str, *, is_package: bool = False) -> SymbolTable:
        """Build table from a parsed module.

        Imports anywhere in the module count, including TYPE_CHECKING
        blocks and function bodies: annotations rely on them.

        Args:
            tree: Parsed module
            module: Fully qualified module name
            is_package: Module is a package __init__

        Returns:
            Filled SymbolTable
        """
        table = cls(module=module)

        for node in tree.body:
            if isinstance(node, ast.ClassDef):
                table.add(node.name, f"{module}.{node.name}")

        for node in ast.walk(tree):
            match node:
                case ast.Import(names=names):
                    for alias in names:
                        if alias.asname:
                            table.add(alias.asname, alias.name)
                        else:
                            # import a.b binds "a"
                            head = alias.name.split(".", 1)[0]
                            table.add(head, head)

                case ast.ImportFrom(module=target, level=level, names=names):
                    try:
                        source = absolute_import_target(
                            target, level, module, is_package=is_package
                        )
                    except ValueError:
                        continue
                    for alias in names:
                        if alias.name == "*":
                            continue
                        table.add(alias.asname or alias.name, f"{source}.{alias.name}")

        return table
