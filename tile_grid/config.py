"""Tiling configuration.

``TilingConfig`` carries the two knobs of the image-to-graph pipeline: the
square tile edge length in pixels and the substring that marks a target tile
in its description. Instances are frozen and validated on construction.
"""

from dataclasses import dataclass, fields
from typing import Any, Mapping

DEFAULT_TARGET = "target"


@dataclass(frozen=True)
class TilingConfig:
    """Pipeline settings.

    Attributes:
        tile_size (int): Edge length of a square tile in pixels (> 0).
        target (str): Substring searched in tile descriptions.
    """

    tile_size: int
    target: str = DEFAULT_TARGET

    def __post_init__(self) -> None:
        if isinstance(self.tile_size, bool) or not isinstance(self.tile_size, int):
            raise ValueError(f"tile_size must be an int, got {self.tile_size!r}")
        if self.tile_size <= 0:
            raise ValueError(f"tile_size must be positive, got {self.tile_size}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "TilingConfig":
        """Build from a plain mapping (e.g. parsed JSON), ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        if "tile_size" not in data:
            raise ValueError("Missing required setting: tile_size")
        return cls(**{k: v for k, v in data.items() if k in known})
