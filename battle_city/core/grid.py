"""Destructible tile map and its procedural generation."""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, List, Optional

from battle_city.core.settings import ArenaSettings

logger = logging.getLogger(__name__)


class Tile(IntEnum):
    EMPTY = 0
    BRICK = 1
    STEEL = 2


_TILE_CHARS = {Tile.EMPTY: ".", Tile.BRICK: "#", Tile.STEEL: "@"}


@dataclass(frozen=True)
class TileInfo:
    """Result of a world-coordinate lookup."""

    tile: Tile
    row: int
    col: int


class TileGrid:
    """Fixed-size grid of tiles addressed by row and column."""

    def __init__(
        self,
        settings: ArenaSettings,
        *,
        generate: bool = True,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.settings = settings
        self.tile_size = settings.tile_size
        self.rows = settings.rows
        self.cols = settings.cols
        self.tiles: List[List[Tile]] = [
            [Tile.EMPTY for _ in range(self.cols)] for _ in range(self.rows)
        ]
        if generate:
            self.generate(rng or random.Random(settings.seed))

    # ------------------------------------------------------------------
    # Generation
    def generate(self, rng: random.Random) -> None:
        settings = self.settings
        brick_threshold = settings.brick_chance
        steel_threshold = settings.brick_chance + settings.steel_chance
        for row in range(self.rows):
            for col in range(self.cols):
                if self._in_border(row, col):
                    self.tiles[row][col] = Tile.EMPTY
                    continue
                roll = rng.random()
                if roll < brick_threshold:
                    self.tiles[row][col] = Tile.BRICK
                elif roll < steel_threshold:
                    self.tiles[row][col] = Tile.STEEL
                else:
                    self.tiles[row][col] = Tile.EMPTY
        self._build_nest()
        logger.debug(
            "Generated %dx%d map: %d brick, %d steel",
            self.cols,
            self.rows,
            self.count(Tile.BRICK),
            self.count(Tile.STEEL),
        )

    def _in_border(self, row: int, col: int) -> bool:
        settings = self.settings
        return (
            row < settings.border_rows_top
            or row > self.rows - settings.border_rows_bottom - 1
            or col < settings.border_cols
            or col > self.cols - settings.border_cols - 1
        )

    def _build_nest(self) -> None:
        base_row = self.rows - 2
        base_col = self.cols // 2
        for row, col in (
            (base_row, base_col - 1),
            (base_row - 1, base_col - 1),
            (base_row - 1, base_col),
            (base_row - 1, base_col + 1),
            (base_row, base_col + 1),
        ):
            self.set_tile(row, col, Tile.BRICK)

    # ------------------------------------------------------------------
    # Queries
    def is_inside(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def tile_at(self, x: float, y: float) -> Optional[TileInfo]:
        col = math.floor(x / self.tile_size)
        row = math.floor(y / self.tile_size)
        if not self.is_inside(row, col):
            return None
        return TileInfo(self.tiles[row][col], row, col)

    def get(self, row: int, col: int) -> Optional[Tile]:
        if not self.is_inside(row, col):
            return None
        return self.tiles[row][col]

    def set_tile(self, row: int, col: int, tile: Tile) -> None:
        if self.is_inside(row, col):
            self.tiles[row][col] = tile

    def collides(self, x: float, y: float, w: float, h: float) -> bool:
        """Return True if any solid tile overlaps the rectangle.

        Every edge is pulled inwards by the collision epsilon so a box flush
        with a tile seam does not report the neighbouring tile.
        """

        eps = self.settings.collision_epsilon
        size = self.tile_size
        first_col = math.floor((x + eps) / size)
        last_col = math.floor((x + w - eps) / size)
        first_row = math.floor((y + eps) / size)
        last_row = math.floor((y + h - eps) / size)
        for row in range(max(0, first_row), min(self.rows - 1, last_row) + 1):
            for col in range(max(0, first_col), min(self.cols - 1, last_col) + 1):
                if self.tiles[row][col] != Tile.EMPTY:
                    return True
        return False

    def count(self, tile: Tile) -> int:
        return sum(row.count(tile) for row in self.tiles)

    def clear(self) -> None:
        for row in self.tiles:
            for col in range(self.cols):
                row[col] = Tile.EMPTY

    # ------------------------------------------------------------------
    # Utilities
    def iter_rows(self) -> Iterable[str]:
        for row in self.tiles:
            yield "".join(_TILE_CHARS[tile] for tile in row)


__all__ = ["Tile", "TileGrid", "TileInfo"]
