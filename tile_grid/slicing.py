"""Cut an in-memory raster into a row-major tile sequence.

The image is partitioned into ``floor(width / tile_size)`` columns and
``floor(height / tile_size)`` rows of square tiles; partial tiles along the
right and bottom edges are dropped. Each tile's ``image`` attribute holds its
crop. Decoding files is left to the caller, who passes a ``PIL.Image.Image``.
"""

from dataclasses import dataclass
from typing import List

from PIL import Image

from tile_grid.grid import tile_at, tile_index
from tile_grid.tile import Tile, make_tile


@dataclass(frozen=True)
class TileSheet:
    """Tiles cut from one image plus the grid dimensions they fill.

    Attributes:
        tiles (List[Tile]): Row-major tiles, ``len(tiles) == columns * rows``.
        columns (int): Tiles per row.
        rows (int): Tiles per column.
        tile_size (int): Tile edge length in pixels.
    """

    tiles: List[Tile]
    columns: int
    rows: int
    tile_size: int

    def tile_at(self, row: int, col: int) -> Tile:
        return tile_at(self.tiles, row, col, self.columns)


def slice_image(image: Image.Image, tile_size: int) -> TileSheet:
    """Crop ``image`` into square tiles of ``tile_size`` pixels.

    Raises:
        ValueError: If ``tile_size`` is not positive.
    """
    if tile_size <= 0:
        raise ValueError(f"tile_size must be positive, got {tile_size}")

    width, height = image.size
    columns = width // tile_size
    rows = height // tile_size

    tiles: List[Tile] = []
    for row in range(rows):
        for col in range(columns):
            x = col * tile_size
            y = row * tile_size
            crop = image.crop((x, y, x + tile_size, y + tile_size))
            tiles.append(make_tile(tile_index(row, col, columns), image=crop))

    return TileSheet(tiles=tiles, columns=columns, rows=rows, tile_size=tile_size)
