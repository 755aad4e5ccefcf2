"""Errors raised by the notification core."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, List


class NotificationError(Exception):
    """Base class for every notification error."""


class UnsupportedChannelKind(NotificationError, ValueError):
    def __init__(self, kind: Any, reason: str | None = None):
        self.kind = kind
        # Enum members read as their value; anything else keeps its repr
        shown = str(kind) if isinstance(kind, Enum) else repr(kind)
        message = f"Unsupported channel kind: {shown}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class UnknownTransform(NotificationError, KeyError):
    def __init__(self, name: str, available: List[str]):
        self.name = name
        self.available = available
        super().__init__(f"Unknown transform '{name}'. Available transforms: {available}")

    def __str__(self) -> str:  # KeyError quotes its argument otherwise
        return self.args[0]


class TransformationFailure(NotificationError):
    """A transformation rejected a message; nothing was delivered."""

    def __init__(self, transform_name: str, message: str, reason: str):
        self.transform_name = transform_name
        self.message = message
        super().__init__(f"Transformation '{transform_name}' failed: {reason}")


class DeliveryFailure(NotificationError):
    """A terminal sender could not emit the message."""

    def __init__(self, channel: str, reason: str):
        self.channel = channel
        super().__init__(f"Delivery via '{channel}' failed: {reason}")


@dataclass(frozen=True)
class SubscriberNotifyFailure:
    """One subscriber that failed during a broadcast."""

    index: int
    subscriber: Any
    error: BaseException

    def describe(self) -> str:
        name = getattr(self.subscriber, "name", type(self.subscriber).__name__)
        return f"#{self.index} {name}: {self.error}"


class AggregateNotifyError(NotificationError):
    def __init__(self, failures: List[SubscriberNotifyFailure]):
        self.failures = list(failures)
        details = "; ".join(f.describe() for f in self.failures)
        super().__init__(f"{len(self.failures)} subscriber(s) failed: {details}")


__all__ = [
    "NotificationError",
    "UnsupportedChannelKind",
    "UnknownTransform",
    "TransformationFailure",
    "DeliveryFailure",
    "SubscriberNotifyFailure",
    "AggregateNotifyError",
]
