"""Event and command messages exchanged with the controller.

Every message carries a fixed ``MESSAGE_ID`` used for wire-level
identification. Inbound events are :class:`TimeoutInd`,
:class:`DirectionInd`, :class:`FoodInd` and :class:`FoodResp`; the
remaining classes are commands sent through the controller's ports.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, fields
from typing import ClassVar, Union


class MessageId(enum.IntEnum):
    """Wire identifiers of every message kind."""

    DIRECTION_IND = 0x10
    TIMEOUT_IND = 0x20
    DISPLAY_IND = 0x30
    FOOD_IND = 0x40
    FOOD_REQ = 0x41
    FOOD_RESP = 0x42
    SCORE_IND = 0x70
    LOOSE_IND = 0x71


class Direction(enum.IntEnum):
    """Movement direction packed into two bits.

    Bit 0 selects the axis (0 vertical, 1 horizontal) and bit 1 the sign
    along it (0 negative, 1 positive).
    """

    UP = 0b00
    DOWN = 0b10
    LEFT = 0b01
    RIGHT = 0b11

    @property
    def axis(self) -> int:
        """Return 0 for vertical movement, 1 for horizontal."""
        return self.value & 0b01

    @property
    def sign(self) -> int:
        """Return ``+1`` or ``-1``."""
        return 1 if self.value & 0b10 else -1

    @property
    def delta(self) -> tuple[int, int]:
        """Return the ``(dx, dy)`` step for one cell of movement."""
        if self.axis:
            return self.sign, 0
        return 0, self.sign

    def is_perpendicular_to(self, other: Direction) -> bool:
        return self.axis != other.axis

    @classmethod
    def from_char(cls, char: str) -> Direction:
        """Map ``U``/``D``/``L``/``R`` to a direction.

        Raises ``KeyError`` for any other character.
        """
        return _DIRECTION_CHARS[char]

    def to_char(self) -> str:
        return self.name[0]


_DIRECTION_CHARS: dict[str, Direction] = {
    "U": Direction.UP,
    "D": Direction.DOWN,
    "L": Direction.LEFT,
    "R": Direction.RIGHT,
}


class Cell(enum.IntEnum):
    """Display state of a single map cell."""

    FREE = 0
    FOOD = 1
    SNAKE = 2


@dataclass(frozen=True)
class Message:
    """Base class for all messages."""

    MESSAGE_ID: ClassVar[MessageId]

    @property
    def message_id(self) -> MessageId:
        return self.MESSAGE_ID

    def to_dict(self) -> dict:
        """Serialize the message, tagging it with its identifier."""
        data: dict = {"id": int(self.MESSAGE_ID)}
        for f in fields(self):
            value = getattr(self, f.name)
            data[f.name] = int(value) if isinstance(value, enum.IntEnum) else value
        return data


@dataclass(frozen=True)
class DirectionInd(Message):
    MESSAGE_ID: ClassVar[MessageId] = MessageId.DIRECTION_IND

    direction: Direction


@dataclass(frozen=True)
class TimeoutInd(Message):
    MESSAGE_ID: ClassVar[MessageId] = MessageId.TIMEOUT_IND


@dataclass(frozen=True)
class DisplayInd(Message):
    """Tell the display what a cell now shows."""

    MESSAGE_ID: ClassVar[MessageId] = MessageId.DISPLAY_IND

    x: int
    y: int
    value: Cell


@dataclass(frozen=True)
class FoodInd(Message):
    """A food cell placed by the food collaborator on its own initiative."""

    MESSAGE_ID: ClassVar[MessageId] = MessageId.FOOD_IND

    x: int
    y: int


@dataclass(frozen=True)
class FoodReq(Message):
    MESSAGE_ID: ClassVar[MessageId] = MessageId.FOOD_REQ


@dataclass(frozen=True)
class FoodResp(Message):
    """The food collaborator's answer to a :class:`FoodReq`."""

    MESSAGE_ID: ClassVar[MessageId] = MessageId.FOOD_RESP

    x: int
    y: int


@dataclass(frozen=True)
class ScoreInd(Message):
    MESSAGE_ID: ClassVar[MessageId] = MessageId.SCORE_IND


@dataclass(frozen=True)
class LooseInd(Message):
    MESSAGE_ID: ClassVar[MessageId] = MessageId.LOOSE_IND


# Events the controller accepts.
Event = Union[TimeoutInd, DirectionInd, FoodInd, FoodResp]

# Commands the controller emits.
Command = Union[DisplayInd, FoodReq, ScoreInd, LooseInd]
