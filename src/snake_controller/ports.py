"""Outbound port contract and an in-memory port implementation."""

from __future__ import annotations

from collections import deque
from typing import Protocol, runtime_checkable

from snake_controller.messages import Message


@runtime_checkable
class Port(Protocol):
    """A one-way command sink."""

    def send(self, message: Message) -> None: ...


class QueuePort:
    """Port that queues every message it receives.

    ``sent`` keeps the full history; :meth:`drain` consumes the pending
    queue in FIFO order.
    """

    def __init__(self) -> None:
        self.sent: list[Message] = []
        self._pending: deque[Message] = deque()

    def send(self, message: Message) -> None:
        self.sent.append(message)
        self._pending.append(message)

    def drain(self) -> list[Message]:
        """Pop and return every message not yet drained."""
        drained = list(self._pending)
        self._pending.clear()
        return drained

    def clear(self) -> None:
        self.sent.clear()
        self._pending.clear()

    def __len__(self) -> int:
        return len(self._pending)
