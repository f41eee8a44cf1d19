"""JSON reporter for machine-readable output.

Stdlib-only reporter for JSON output.
"""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from archfinder.domain.model.code_element import CodeElement
    from archfinder.domain.model.component import Component
    from archfinder.domain.model.registry import ComponentRegistry


class JSONReporter:
    """JSON reporter for machine-readable output.

    Outputs the discovered component graph as JSON for diagram
    exporters, CI checks or other tools. Ordering is deterministic.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        self._output = output if output is not None else sys.stdout
        self._indent = indent

    def report(self, registry: ComponentRegistry) -> None:
        """Write registry contents as JSON.

        Args:
            registry: Registry after discovery
        """
        data = self.to_dict(registry)
        json.dump(data, self._output, indent=self._indent)
        self._output.write("\n")

    def to_dict(self, registry: ComponentRegistry) -> dict[str, object]:
        """Convert registry to JSON-serializable dict."""
        return {
            "container": {
                "name": registry.name,
                "description": registry.description,
                "technology": registry.technology,
            },
            "components": [self._component_to_dict(c) for c in registry.components],
            "dependencies": [
                {
                    "source": dep.source,
                    "destination": dep.destination,
                    "description": dep.description,
                }
                for dep in registry.dependencies
            ],
        }

    def _component_to_dict(self, component: Component) -> dict[str, object]:
        return {
            "name": component.name,
            "type": component.type_name,
            "description": component.description,
            "technology": component.technology,
            "category": _enum_name(component.category),
            "visibility": _enum_name(component.visibility),
            "code": [self._element_to_dict(e) for e in component.code_elements],
        }

    def _element_to_dict(self, element: CodeElement) -> dict[str, object]:
        return {
            "type": element.type_name,
            "role": element.role.name,
            "category": _enum_name(element.category),
            "visibility": _enum_name(element.visibility),
        }


def _enum_name(value: object) -> str | None:
    name = getattr(value, "name", None)
    return name if isinstance(name, str) else None
