"""A playable game session wiring the controller to its collaborators."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import asdict, dataclass

import numpy as np

from snake_controller.board import Board
from snake_controller.config import GameConfig, parse_config
from snake_controller.controller import Controller
from snake_controller.food import FoodService
from snake_controller.messages import (
    Direction,
    DirectionInd,
    FoodInd,
    LooseInd,
    Message,
    ScoreInd,
    TimeoutInd,
)
from snake_controller.ports import QueuePort

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionConfig:
    """Settings for the collaborators around the controller."""

    seed: int | None = None
    max_food_retries: int = 100

    def __post_init__(self) -> None:
        if self.max_food_retries < 1:
            raise ValueError("max_food_retries must be at least 1.")

    def to_dict(self) -> dict:
        return asdict(self)


class ScoreKeeper:
    """Score port that tallies points and records a loss."""

    def __init__(self) -> None:
        self.score = 0
        self.lost = False

    def send(self, message: Message) -> None:
        if isinstance(message, ScoreInd):
            self.score += 1
        elif isinstance(message, LooseInd):
            self.lost = True
        else:
            raise TypeError(
                f"ScoreKeeper cannot handle {type(message).__name__}."
            )

    def to_dict(self) -> dict:
        return {"score": self.score, "lost": self.lost}


class GameSession:
    """Single game driven synchronously through the controller.

    Food requests raised by the controller are answered by the
    :class:`FoodService` before each call returns.
    """

    def __init__(
        self,
        config: str | GameConfig,
        session_config: SessionConfig | None = None,
    ) -> None:
        if isinstance(config, str):
            config = parse_config(config)
        self.config = config
        self.session_config = session_config or SessionConfig()

        self.board = Board.from_config(config)
        self.food_port = QueuePort()
        self.score_keeper = ScoreKeeper()
        self.food_service = FoodService(
            self.board, rng=np.random.default_rng(self.session_config.seed),
        )
        self.controller = Controller(
            self.board, self.food_port, self.score_keeper, config,
        )
        self.tick_count = 0

    @property
    def game_over(self) -> bool:
        return self.score_keeper.lost

    @property
    def score(self) -> int:
        return self.score_keeper.score

    def tick(self) -> dict:
        """Advance the game by one tick and return the state."""
        if self.game_over:
            return self.get_state()
        self._deliver(TimeoutInd())
        self.tick_count += 1
        if self.game_over:
            logger.info(
                "Game over at tick %d with score %d.",
                self.tick_count, self.score,
            )
        return self.get_state()

    def turn(self, direction: Direction) -> None:
        self._deliver(DirectionInd(direction))

    def place_food(self, x: int, y: int) -> None:
        """Offer an unsolicited food cell to the controller."""
        self._deliver(FoodInd(x, y))

    def run(self, moves: Iterable[Direction | None]) -> dict:
        """Play a sequence of moves, one tick per move.

        ``None`` keeps the current heading. Stops early on game over.
        """
        for move in moves:
            if self.game_over:
                break
            if move is not None:
                self.turn(move)
            self.tick()
        return self.get_state()

    def get_state(self) -> dict:
        """Return the full, serializable session state."""
        return {
            "tick": self.tick_count,
            "score": self.score,
            "game_over": self.game_over,
            "board": self.board.to_dict(),
            "controller": self.controller.to_dict(),
        }

    def _deliver(self, event: Message) -> None:
        self.controller.receive(event)
        self._answer_food_requests()

    def _answer_food_requests(self) -> None:
        retries = 0
        while self.food_port.drain():
            if retries >= self.session_config.max_food_retries:
                logger.warning(
                    "Food placement gave up after %d attempts.", retries,
                )
                return
            retries += 1
            response = self.food_service.respond()
            if response is None:
                logger.warning("Food request dropped: the board has no free cell.")
                return
            self.controller.receive(response)

