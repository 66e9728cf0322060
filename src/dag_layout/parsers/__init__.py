"""Parser registry: detect the input format and dispatch to the right reader."""

from __future__ import annotations

from dag_layout.ir.graph import GraphIR
from dag_layout.parsers.base import Parser
from dag_layout.parsers.edgelist import EdgeListParser
from dag_layout.parsers.json_graph import JsonGraphParser


def detect_format(src: str) -> str:
    """Detect the input format from source text. Returns 'json' or 'edgelist'."""
    stripped = src.lstrip()
    if stripped.startswith("{"):
        return "json"
    return "edgelist"


_PARSERS: dict[str, type[Parser]] = {
    "json": JsonGraphParser,
    "edgelist": EdgeListParser,
}


def load(src: str, fmt: str | None = None) -> GraphIR:
    """Parse ``src`` into a GraphIR, auto-detecting the format unless given."""
    fmt = fmt or detect_format(src)
    parser_cls = _PARSERS.get(fmt)
    if parser_cls is None:
        raise ValueError(f"Unsupported input format: {fmt}")
    return parser_cls().parse(src)


__all__ = ["EdgeListParser", "JsonGraphParser", "Parser", "detect_format", "load"]
