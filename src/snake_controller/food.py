"""Food placement service."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from snake_controller.messages import FoodResp

if TYPE_CHECKING:
    from snake_controller.board import Board

logger = logging.getLogger(__name__)


class FoodService:
    """Answers food requests with a random free board cell.

    Uses a seeded NumPy RNG for deterministic, reproducible placement.
    """

    def __init__(
        self,
        board: Board,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.board = board
        self.rng = rng if rng is not None else np.random.default_rng()
        self.requests = 0

    def next_position(self) -> tuple[int, int] | None:
        """Pick a free cell, or ``None`` if the board is full."""
        free = self.board.free_cells()
        if not free:
            logger.warning("No free cells available for food placement.")
            return None
        return free[int(self.rng.integers(len(free)))]

    def respond(self) -> FoodResp | None:
        """Build the response to one ``FoodReq``."""
        self.requests += 1
        pos = self.next_position()
        if pos is None:
            return None
        return FoodResp(*pos)
