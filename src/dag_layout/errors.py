"""Exception hierarchy for dag-layout."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dag_layout.layout.types import CycleDiagnostic


class DagLayoutError(Exception):
    """Base class for every error raised by dag-layout."""


class GraphFormatError(DagLayoutError, ValueError):
    """The input document is not a valid abstract graph."""


class ConfigError(DagLayoutError, ValueError):
    """A layout configuration or theme file is invalid."""


class CycleError(DagLayoutError):
    """Raised in strict mode when the input graph is not acyclic."""

    def __init__(self, diagnostic: CycleDiagnostic) -> None:
        self.diagnostic = diagnostic
        preview = ", ".join(diagnostic.unresolved[:5])
        more = "" if len(diagnostic.unresolved) <= 5 else f" (+{len(diagnostic.unresolved) - 5} more)"
        super().__init__(f"graph contains a cycle; {len(diagnostic.unresolved)} node(s) unlayered: {preview}{more}")
