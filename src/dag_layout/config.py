"""Centralized configuration for dag-layout."""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from dag_layout.errors import ConfigError

DEFAULT_KIND_HEIGHTS: dict[str, float] = {
    "incast": 200,
    "outcast": 200,
    "op": 148,
    "tensor": 200,
}


@dataclass(frozen=True)
class LayoutConfig:
    """Geometry of the layered layout.

    Every node is ``node_width`` wide; its height comes from ``kind_heights``
    (falling back to ``default_height``) unless the node carries its own hint.
    Adjacent layers are ``column_step`` apart on the x axis, nodes within a
    layer at least ``vertical_step`` apart on the y axis, and ``padding`` is
    kept clear on every side of the canvas.
    """

    node_width: float = 250
    column_step: float = 330
    vertical_step: float = 220
    padding: float = 60
    kind_heights: Mapping[str, float] = field(default_factory=lambda: dict(DEFAULT_KIND_HEIGHTS))
    default_height: float = 124

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind_heights", MappingProxyType(dict(self.kind_heights)))

    def __hash__(self) -> int:
        return hash(
            (
                self.node_width,
                self.column_step,
                self.vertical_step,
                self.padding,
                tuple(sorted(self.kind_heights.items())),
                self.default_height,
            )
        )

    def height_for(self, kind: str | None) -> float:
        if kind is None:
            return self.default_height
        return self.kind_heights.get(kind, self.default_height)

    def validate(self) -> LayoutConfig:
        """Raise ConfigError when a dimension is out of range; return self otherwise."""
        for name in ("node_width", "column_step", "vertical_step", "default_height"):
            _require_number(name, getattr(self, name), allow_zero=False)
        _require_number("padding", self.padding, allow_zero=True)
        for kind, height in self.kind_heights.items():
            _require_number(f"kind_heights[{kind!r}]", height, allow_zero=False)
        return self

    def replace(self, **overrides: object) -> LayoutConfig:
        """Copy with the given fields replaced; ``None`` values are ignored."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return dataclasses.replace(self, **changes).validate()

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, object]) -> LayoutConfig:
        """Build a config from a theme dict; ``kind_heights`` merges over the defaults."""
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(mapping) - known)
        if unknown:
            raise ConfigError(f"unknown config key(s): {', '.join(unknown)}")

        values = dict(mapping)
        if "kind_heights" in values:
            heights = values["kind_heights"]
            if not isinstance(heights, Mapping):
                raise ConfigError("kind_heights must be an object mapping kind to height")
            values["kind_heights"] = {**DEFAULT_KIND_HEIGHTS, **heights}
        return cls(**values).validate()

    @classmethod
    def from_file(cls, path: str | Path) -> LayoutConfig:
        """Load a JSON theme file."""
        try:
            data = json.loads(Path(path).read_text())
        except json.JSONDecodeError as e:
            raise ConfigError(f"theme file '{path}' is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"theme file '{path}' must contain a JSON object")
        return cls.from_mapping(data)


def _require_number(name: str, value: object, *, allow_zero: bool) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"{name} must be a number, got {value!r}")
    if value < 0 or (value == 0 and not allow_zero):
        bound = "non-negative" if allow_zero else "positive"
        raise ConfigError(f"{name} must be {bound}, got {value!r}")
