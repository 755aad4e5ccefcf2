"""Notification channels (interfaces + channel kinds)."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Protocol, runtime_checkable

from ..sinks import Sink

logger = logging.getLogger(__name__)


class ChannelKind(str, Enum):
    """Closed set of channels the factory knows how to build."""

    EMAIL = "email"
    SMS = "sms"
    CONSOLE = "console"
    WEBHOOK = "webhook"

    def __str__(self) -> str:
        return self.value


@runtime_checkable
class Sender(Protocol):
    def send(self, message: str) -> None:  # pragma: no cover (interface)
        ...


@runtime_checkable
class Subscriber(Protocol):
    def notify(self, message: str) -> None:  # pragma: no cover (interface)
        ...


class SinkSender:
    """Terminal sender writing each message once to its own sink."""

    kind: ChannelKind

    def __init__(self, sink: Sink):
        self._sink = sink

    @property
    def name(self) -> str:
        return self.kind.value

    def send(self, message: str) -> None:
        logger.debug(f"Emitting message via {self.name}")
        self._sink(message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


__all__ = ["ChannelKind", "Sender", "Subscriber", "SinkSender"]
