"""Registry that fans a broadcast out to every registered subscriber."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from .channels.base import Sender, Subscriber
from .errors import AggregateNotifyError, SubscriberNotifyFailure

logger = logging.getLogger(__name__)


class SenderSubscriber:
    """Lets a sender chain take part in broadcasts."""

    def __init__(self, sender: Sender):
        self.sender = sender

    @property
    def name(self) -> str:
        return getattr(self.sender, "name", type(self.sender).__name__)

    def notify(self, message: str) -> None:
        self.sender.send(message)

    def __repr__(self) -> str:
        return f"SenderSubscriber({self.sender!r})"


@dataclass
class BroadcastResult:
    message: str
    delivered: int = 0
    failures: List[SubscriberNotifyFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    @property
    def attempted(self) -> int:
        return self.delivered + len(self.failures)

    def raise_for_failures(self) -> None:
        if self.failures:
            raise AggregateNotifyError(self.failures)


class NotificationRegistry:
    """Ordered, thread-safe collection of subscribers.

    The sequence is an immutable tuple swapped under a lock on every change, so
    a broadcast keeps iterating the tuple it started with.
    """

    def __init__(self, subscribers: Iterable[Subscriber] = ()):
        self._lock = threading.Lock()
        self._subscribers: Tuple[Subscriber, ...] = tuple(subscribers)

    def add(self, subscriber: Subscriber) -> None:
        with self._lock:
            self._subscribers = self._subscribers + (subscriber,)
        logger.debug(f"Registered subscriber {subscriber!r}")

    def add_sender(self, sender: Sender) -> SenderSubscriber:
        subscriber = SenderSubscriber(sender)
        self.add(subscriber)
        return subscriber

    def remove(self, subscriber: Subscriber) -> None:
        with self._lock:
            current = self._subscribers
            for i, registered in enumerate(current):
                if registered is subscriber:
                    self._subscribers = current[:i] + current[i + 1 :]
                    logger.debug(f"Removed subscriber {subscriber!r}")
                    return
        logger.debug(f"Subscriber {subscriber!r} not registered, nothing removed")

    def subscribers(self) -> Tuple[Subscriber, ...]:
        return self._subscribers

    def __len__(self) -> int:
        return len(self._subscribers)

    def __contains__(self, subscriber: object) -> bool:
        return any(s is subscriber for s in self._subscribers)

    def broadcast(self, message: str) -> BroadcastResult:
        snapshot = self._subscribers
        result = BroadcastResult(message=message)
        for index, subscriber in enumerate(snapshot):
            try:
                subscriber.notify(message)
            except Exception as e:
                logger.warning(f"Subscriber #{index} {subscriber!r} failed: {e}")
                result.failures.append(SubscriberNotifyFailure(index, subscriber, e))
            else:
                result.delivered += 1
        return result


__all__ = ["NotificationRegistry", "SenderSubscriber", "BroadcastResult"]
