"""End-to-end pipeline: image -> tiles -> neighbor graph -> nearest targets.

This is the batch driver a UI layer calls once per image. It slices the
raster, connects the tiles, and answers "nearest target" for every tile.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from PIL import Image
from pyrsistent.typing import PMap

from tile_grid.config import TilingConfig
from tile_grid.grid import build_neighbors
from tile_grid.predicates import description_contains
from tile_grid.search import nearest_matches
from tile_grid.slicing import TileSheet, slice_image
from tile_grid.tile import Tile
from tile_grid.types import TileID

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProcessResult:
    """Connected tile sheet and the per-tile nearest target."""

    sheet: TileSheet
    nearest: PMap[TileID, Optional[Tile]]


def process_image(image: Image.Image, config: TilingConfig) -> ProcessResult:
    sheet = slice_image(image, config.tile_size)
    build_neighbors(sheet.tiles, sheet.columns, sheet.rows)
    nearest = nearest_matches(sheet.tiles, description_contains(config.target))
    logger.info(
        "Created %d tiles (%dx%d, %dpx)",
        len(sheet.tiles),
        sheet.columns,
        sheet.rows,
        config.tile_size,
    )
    return ProcessResult(sheet=sheet, nearest=nearest)
