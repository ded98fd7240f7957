"""Parsing of the textual game configuration.

The configuration is a whitespace-separated token stream::

    W <width> <height> F <food_x> <food_y> S <dir> <length> (<x> <y>){length}

where ``dir`` is one of ``U``, ``D``, ``L`` or ``R`` and the body
coordinates are listed from head to tail.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import asdict, dataclass

from snake_controller.errors import ConfigurationError
from snake_controller.messages import Direction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Initial game state described by a configuration string.

    Positions are not checked against the map: an out-of-range body or
    food cell is accepted as given.
    """

    width: int
    height: int
    food: tuple[int, int]
    direction: Direction
    body: tuple[tuple[int, int], ...]

    @property
    def length(self) -> int:
        return len(self.body)

    def to_config_string(self) -> str:
        """Render the configuration back into its canonical text form."""
        tokens = [
            "W", str(self.width), str(self.height),
            "F", str(self.food[0]), str(self.food[1]),
            "S", self.direction.to_char(), str(self.length),
        ]
        for x, y in self.body:
            tokens.extend((str(x), str(y)))
        return " ".join(tokens)

    def to_dict(self) -> dict:
        d = asdict(self)
        d["food"] = list(self.food)
        d["direction"] = self.direction.to_char()
        d["body"] = [list(seg) for seg in self.body]
        return d


class _Tokens:
    """Sequential reader over configuration tokens."""

    def __init__(self, text: str) -> None:
        self._it: Iterator[str] = iter(text.split())

    def word(self, what: str) -> str:
        try:
            return next(self._it)
        except StopIteration:
            raise ConfigurationError(f"Missing {what}.") from None

    def marker(self, expected: str) -> None:
        token = self.word(f"marker {expected!r}")
        if token != expected:
            raise ConfigurationError(
                f"Expected marker {expected!r}, got {token!r}."
            )

    def integer(self, what: str) -> int:
        token = self.word(what)
        try:
            return int(token)
        except ValueError:
            raise ConfigurationError(
                f"{what} must be an integer, got {token!r}."
            ) from None


def parse_config(text: str) -> GameConfig:
    """Parse a configuration string into a :class:`GameConfig`.

    Raises :class:`ConfigurationError` when a marker is wrong, the
    direction letter is unknown, or a token is missing or not an integer.
    A snake length below 1 is also rejected, although the grammar alone
    would allow an empty body.
    """
    tokens = _Tokens(text)

    tokens.marker("W")
    width = tokens.integer("map width")
    height = tokens.integer("map height")

    tokens.marker("F")
    food_x = tokens.integer("food x")
    food_y = tokens.integer("food y")

    tokens.marker("S")
    dir_char = tokens.word("direction")
    try:
        direction = Direction.from_char(dir_char)
    except KeyError:
        raise ConfigurationError(f"Unknown direction {dir_char!r}.") from None

    length = tokens.integer("snake length")
    if length < 1:
        raise ConfigurationError("Snake length must be at least 1.")

    body = tuple(
        (tokens.integer("segment x"), tokens.integer("segment y"))
        for _ in range(length)
    )

    config = GameConfig(
        width=width,
        height=height,
        food=(food_x, food_y),
        direction=direction,
        body=body,
    )
    logger.debug("Parsed configuration: %s", config)
    return config
