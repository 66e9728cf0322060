"""Base parser protocol."""

from __future__ import annotations

from typing import Protocol

from dag_layout.ir.graph import GraphIR


class Parser(Protocol):
    """Protocol that all graph readers must implement."""

    def parse(self, src: str) -> GraphIR:
        """Parse source text into a GraphIR."""
        ...
