"""Exceptions raised by the snake controller."""

from __future__ import annotations


class SnakeControllerError(Exception):
    """Base class for all snake controller errors."""


class ConfigurationError(SnakeControllerError):
    """The configuration string could not be parsed."""

    def __init__(self, reason: str = "") -> None:
        message = "Bad configuration of snake controller."
        if reason:
            message = f"{message} {reason}"
        super().__init__(message)
        self.reason = reason


class UnexpectedEventError(SnakeControllerError):
    """An event of an unknown kind was delivered to the controller."""

    def __init__(self, event: object) -> None:
        super().__init__(f"Unexpected event received: {event!r}")
        self.event = event
