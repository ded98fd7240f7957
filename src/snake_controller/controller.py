"""Event-driven snake controller.

The controller owns the snake body, its heading and the food position.
It reacts to one event at a time and reports every visible consequence
through three ports: display, food and score.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from snake_controller.config import GameConfig, parse_config
from snake_controller.errors import UnexpectedEventError
from snake_controller.messages import (
    Cell,
    DirectionInd,
    DisplayInd,
    FoodInd,
    FoodReq,
    FoodResp,
    LooseInd,
    MessageId,
    ScoreInd,
    TimeoutInd,
)
from snake_controller.ports import Port

logger = logging.getLogger(__name__)


@dataclass
class Segment:
    """One body cell and the number of ticks it has left."""

    x: int
    y: int
    ttl: int

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "ttl": self.ttl}


class Controller:
    """Snake game decision core.

    ``config`` is either a configuration string or an already parsed
    :class:`GameConfig`. The ``i``-th body segment (head first) starts
    with ``ttl = length - i`` so the tail ages out one cell per tick.
    """

    def __init__(
        self,
        display_port: Port,
        food_port: Port,
        score_port: Port,
        config: str | GameConfig,
    ) -> None:
        if isinstance(config, str):
            config = parse_config(config)

        self._display_port = display_port
        self._food_port = food_port
        self._score_port = score_port

        self.width = config.width
        self.height = config.height
        self.direction = config.direction
        self.food_position: tuple[int, int] = config.food

        length = config.length
        self.segments: list[Segment] = [
            Segment(x, y, length - i) for i, (x, y) in enumerate(config.body)
        ]

        self._alive = True
        self._score = 0

        # One handler per accepted event kind, keyed by wire id.
        self._handlers: dict[MessageId, Callable] = {
            MessageId.TIMEOUT_IND: self._handle_timeout,
            MessageId.DIRECTION_IND: self._handle_direction,
            MessageId.FOOD_IND: self._handle_food_ind,
            MessageId.FOOD_RESP: self._handle_food_resp,
        }

    @property
    def head(self) -> Segment:
        """Return the head segment."""
        return self.segments[0]

    @property
    def alive(self) -> bool:
        """False once a ``LooseInd`` has been sent."""
        return self._alive

    @property
    def score(self) -> int:
        """Number of ``ScoreInd`` messages sent so far."""
        return self._score

    @property
    def map_dimension(self) -> tuple[int, int]:
        """Return ``(width, height)``."""
        return self.width, self.height

    def receive(self, event: object) -> None:
        """Handle a single event.

        Raises :class:`UnexpectedEventError` if the event is not one of
        ``TimeoutInd``, ``DirectionInd``, ``FoodInd`` or ``FoodResp``;
        in that case no state is touched.
        """
        message_id = getattr(type(event), "MESSAGE_ID", None)
        handler = self._handlers.get(message_id)
        if handler is None:
            raise UnexpectedEventError(event)
        handler(event)

    def occupies(self, x: int, y: int) -> bool:
        """Check whether any body segment lies on the given cell."""
        return any(seg.x == x and seg.y == y for seg in self.segments)

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether a cell lies on the map."""
        return 0 <= x < self.width and 0 <= y < self.height

    def to_dict(self) -> dict:
        """Serialize controller state to a dictionary."""
        return {
            "width": self.width,
            "height": self.height,
            "direction": self.direction.to_char(),
            "food": list(self.food_position),
            "segments": [seg.to_dict() for seg in self.segments],
            "alive": self._alive,
            "score": self._score,
        }

    # --- handlers ---

    def _handle_timeout(self, event: TimeoutInd) -> None:
        dx, dy = self.direction.delta
        head = self.head
        new_head = Segment(head.x + dx, head.y + dy, head.ttl)

        if self.occupies(new_head.x, new_head.y):
            self._lose("collided with itself", new_head)
            return

        if new_head.position == self.food_position:
            self._score += 1
            logger.info("Food eaten at %s, score %d.", new_head.position, self._score)
            self._score_port.send(ScoreInd())
            self._food_port.send(FoodReq())
        elif not self.in_bounds(new_head.x, new_head.y):
            self._lose("left the map", new_head)
            return
        else:
            for seg in self.segments:
                seg.ttl -= 1
                if seg.ttl == 0:
                    self._display(seg.x, seg.y, Cell.FREE)

        self.segments.insert(0, new_head)
        self._display(new_head.x, new_head.y, Cell.SNAKE)
        self.segments = [seg for seg in self.segments if seg.ttl > 0]

    def _handle_direction(self, event: DirectionInd) -> None:
        if event.direction.is_perpendicular_to(self.direction):
            self.direction = event.direction
        else:
            logger.debug(
                "Ignoring turn from %s to %s.",
                self.direction.name, event.direction.name,
            )

    def _handle_food_ind(self, event: FoodInd) -> None:
        self._resolve_food(event.x, event.y, free_previous=True)

    def _handle_food_resp(self, event: FoodResp) -> None:
        self._resolve_food(event.x, event.y, free_previous=False)

    # --- helpers ---

    def _resolve_food(self, x: int, y: int, free_previous: bool) -> None:
        """Accept or reject a proposed food cell.

        The food position is updated in both cases, even when the cell is
        rejected and a new one is requested.
        """
        if self.occupies(x, y):
            logger.debug("Food at (%d, %d) collides with the snake.", x, y)
            self._food_port.send(FoodReq())
        else:
            if free_previous:
                old_x, old_y = self.food_position
                self._display(old_x, old_y, Cell.FREE)
            self._display(x, y, Cell.FOOD)

        self.food_position = (x, y)

    def _display(self, x: int, y: int, value: Cell) -> None:
        self._display_port.send(DisplayInd(x, y, value))

    def _lose(self, reason: str, new_head: Segment) -> None:
        self._alive = False
        logger.info(
            "Snake %s at %s with score %d.",
            reason, new_head.position, self._score,
        )
        self._score_port.send(LooseInd())
