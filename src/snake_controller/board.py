"""Display sink that keeps the rendered map in a NumPy array."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from snake_controller.messages import Cell, DisplayInd, Message

if TYPE_CHECKING:
    from snake_controller.config import GameConfig

logger = logging.getLogger(__name__)

_GLYPHS: dict[Cell, str] = {
    Cell.FREE: ".",
    Cell.FOOD: "*",
    Cell.SNAKE: "#",
}


class Board:
    """NumPy-backed map of cell states, fed by ``DisplayInd`` commands.

    Coordinates are ``(x, y)``; the array is indexed ``[y, x]`` so that
    rows print top to bottom.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise ValueError("Board dimensions must be at least 1×1.")
        self.width = width
        self.height = height
        self.cells = np.zeros((height, width), dtype=np.int8)

    @classmethod
    def from_config(cls, config: GameConfig) -> Board:
        """Build a board showing the configured snake and food."""
        board = cls(config.width, config.height)
        for x, y in config.body:
            if board.in_bounds(x, y):
                board.set(x, y, Cell.SNAKE)
        fx, fy = config.food
        if board.in_bounds(fx, fy):
            board.set(fx, fy, Cell.FOOD)
        return board

    def send(self, message: Message) -> None:
        """Apply a display command."""
        if not isinstance(message, DisplayInd):
            raise TypeError(
                f"Board only accepts DisplayInd, got {type(message).__name__}."
            )
        if not self.in_bounds(message.x, message.y):
            logger.warning(
                "Ignoring display command outside the board: (%d, %d).",
                message.x, message.y,
            )
            return
        self.set(message.x, message.y, message.value)

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies within the board."""
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Cell:
        """Return the cell state at the given coordinate."""
        return Cell(self.cells[y, x])

    def set(self, x: int, y: int, value: Cell) -> None:
        """Set the cell state at the given coordinate."""
        self.cells[y, x] = value

    def free_cells(self) -> list[tuple[int, int]]:
        """Return ``(x, y)`` for every free cell, row by row."""
        ys, xs = np.where(self.cells == Cell.FREE)
        return list(zip(xs.tolist(), ys.tolist(), strict=True))

    def count(self, value: Cell) -> int:
        """Count the cells holding *value*."""
        return int(np.count_nonzero(self.cells == value))

    def render(self) -> str:
        """Return a text picture of the board."""
        return "\n".join(
            "".join(_GLYPHS[Cell(v)] for v in row) for row in self.cells
        )

    def to_dict(self) -> dict:
        """Serialize board state to a dictionary."""
        return {
            "width": self.width,
            "height": self.height,
            "cells": self.cells.tolist(),
        }
