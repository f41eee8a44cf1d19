"""Console reporter: ComponentRegistry → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table
from rich.tree import Tree

if TYPE_CHECKING:
    from archfinder.domain.model.component import Component
    from archfinder.domain.model.registry import ComponentRegistry


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        show_code: List code elements under each component.
        show_dependencies: Render the dependency tree section.
        width: Console width in characters.
    """

    show_code: bool = True
    show_dependencies: bool = True
    width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width <= 0:
            raise ValueError(f"width must be positive, got {self.width}")


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, registry: ComponentRegistry) -> str:
        """Format registry contents as rich formatted string.

        Args:
            registry: Registry after discovery.

        Returns:
            Formatted string with colors and tables.
        """
        output = StringIO()
        console = Console(file=output, force_terminal=True, width=self._config.width)

        self._render_header(console, registry)
        self._render_components(console, registry)

        if self._config.show_dependencies:
            self._render_dependencies(console, registry)

        return output.getvalue()

    def _render_header(self, console: Console, registry: ComponentRegistry) -> None:
        """Render header with summary."""
        console.print()
        console.rule(f"[bold]COMPONENTS OF {registry.name}[/bold]")
        console.print()
        console.print(
            f"[bold]Components:[/bold] {len(registry)}  "
            f"[bold]Dependencies:[/bold] {len(registry.dependencies)}"
        )
        console.print()

    def _render_components(self, console: Console, registry: ComponentRegistry) -> None:
        """Render one table row per component."""
        if not len(registry):
            console.print("[dim]No components found[/dim]")
            return

        table = Table(show_lines=False)
        table.add_column("Component", style="yellow")
        table.add_column("Technology")
        table.add_column("Category")
        table.add_column("Visibility")
        if self._config.show_code:
            table.add_column("Code")

        for component in registry.components:
            row = [
                component.name,
                component.technology,
                _enum_label(component.category),
                _enum_label(component.visibility),
            ]
            if self._config.show_code:
                row.append(_format_code(component))
            table.add_row(*row)

        console.print(table)
        console.print()

    def _render_dependencies(self, console: Console, registry: ComponentRegistry) -> None:
        """Render dependency tree (component → components it uses)."""
        console.print("[bold]DEPENDENCIES[/bold]")
        console.print()

        tree = Tree(registry.name)
        for component in registry.components:
            branch = tree.add(f"[yellow]{component.name}[/yellow]")
            for dependency in component.dependencies:
                label = dependency.destination
                if dependency.description:
                    label += f" [dim]({dependency.description})[/dim]"
                branch.add(label)

        console.print(tree)
        console.print()


def _enum_label(value: object) -> str:
    """Lower-case enum name, empty string for None."""
    name = getattr(value, "name", None)
    return name.lower() if name else ""


def _format_code(component: Component) -> str:
    """One line per code element, supporting ones dimmed."""
    lines: list[str] = []
    for element in component.code_elements:
        if element.is_primary:
            lines.append(element.type_name)
        else:
            lines.append(f"[dim]+ {element.type_name}[/dim]")
    return "\n".join(lines)
