"""Notification service: assembles factory, decorator chains and registry.

The configuration decides which subscribers take part in broadcasts; one-off
sends build a fresh chain each time and never touch the registry.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from rich.console import Console

from src.notifications.channels.base import Sender
from src.notifications.dispatcher import (
    BroadcastResult,
    NotificationRegistry,
    SenderSubscriber,
)
from src.notifications.factory import ChannelFactory
from src.notifications.transforms import wrap
from src.services.config_schema import SubscriberConfig
from src.services.config_service import ConfigService


class NotificationService:
    """Public facade used by the CLI."""

    def __init__(
        self,
        config_service: ConfigService,
        console: Optional[Console] = None,
        factory: Optional[ChannelFactory] = None,
    ):
        self.config_service = config_service
        self.console = console or Console()
        self.config = self.config_service.load_config()
        self.factory = factory or ChannelFactory.from_config(
            self.config.channels.model_dump(mode="json"), self.console
        )
        self.registry = NotificationRegistry()
        self.subscribers: List[SenderSubscriber] = []

        for subscriber_config in self.config.subscribers:
            self.subscribers.append(self._register(subscriber_config))

    def _register(self, subscriber_config: SubscriberConfig) -> SenderSubscriber:
        chain = self.build_chain(subscriber_config.channel, subscriber_config.transforms)
        return self.registry.add_sender(chain)

    def build_chain(self, channel, transforms: Iterable[str] = ()) -> Sender:
        return wrap(self.factory.create(channel), *transforms)

    def send(self, channel, message: str, transforms: Iterable[str] = ()) -> None:
        self.build_chain(channel, transforms).send(message)

    def broadcast(self, message: str) -> BroadcastResult:
        return self.registry.broadcast(message)


__all__ = ["NotificationService"]
