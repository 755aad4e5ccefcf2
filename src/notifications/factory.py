"""Factory turning a channel kind into a ready-to-use sender."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

from rich.console import Console

from .channels.base import ChannelKind, Sender
from .channels.console import ConsoleSender
from .channels.email import EmailSender
from .channels.sms import SmsSender
from .channels.webhook import WebhookSender
from .errors import UnsupportedChannelKind
from .sinks import ConsoleSink, Sink

logger = logging.getLogger(__name__)

DEFAULT_LABELS = {
    ChannelKind.EMAIL: "Email",
    ChannelKind.SMS: "SMS",
    ChannelKind.CONSOLE: "Sending message",
}

SINK_SENDERS = {
    ChannelKind.EMAIL: EmailSender,
    ChannelKind.SMS: SmsSender,
    ChannelKind.CONSOLE: ConsoleSender,
}


def parse_kind(kind: Any) -> ChannelKind:
    """Accept a ChannelKind or its value (case-insensitive)."""
    if isinstance(kind, ChannelKind):
        return kind
    if isinstance(kind, str):
        try:
            return ChannelKind(kind.strip().lower())
        except ValueError:
            pass
    raise UnsupportedChannelKind(kind)


class ChannelFactory:
    """Build a new sender for each requested channel kind.

    Senders never share a sink unless ``sink_factory`` hands out the same one.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        labels: Optional[Dict[ChannelKind, str]] = None,
        webhook_url: Optional[str] = None,
        webhook_timeout: int = 10,
        sink_factory: Optional[Callable[[ChannelKind], Sink]] = None,
    ):
        self.console = console or Console()
        self.labels = {**DEFAULT_LABELS, **(labels or {})}
        self.webhook_url = webhook_url
        self.webhook_timeout = webhook_timeout
        self._sink_factory = sink_factory or self._console_sink

    @classmethod
    def from_config(
        cls, config: Dict[str, Any], console: Optional[Console] = None
    ) -> "ChannelFactory":
        """
        Build a factory from the 'channels' section of the configuration.

        Args:
            config: Channel settings, keyed by channel kind value
            console: Rich Console used by console-backed sinks

        Returns:
            Configured ChannelFactory
        """
        config = config or {}
        labels = {}
        for kind in SINK_SENDERS:
            label = (config.get(kind.value) or {}).get("label")
            if label:
                labels[kind] = label
        webhook = config.get(ChannelKind.WEBHOOK.value) or {}
        return cls(
            console=console,
            labels=labels,
            webhook_url=webhook.get("url"),
            webhook_timeout=webhook.get("timeout", 10),
        )

    def _console_sink(self, kind: ChannelKind) -> Sink:
        return ConsoleSink(self.labels[kind], self.console)

    def is_available(self, kind: ChannelKind) -> bool:
        if kind is ChannelKind.WEBHOOK:
            return bool(self.webhook_url)
        return True

    def kinds(self) -> List[ChannelKind]:
        return list(ChannelKind)

    def create(self, kind: Any) -> Sender:
        kind = parse_kind(kind)
        if kind in SINK_SENDERS:
            sender = SINK_SENDERS[kind](self._sink_factory(kind))
        elif kind is ChannelKind.WEBHOOK:
            if not self.webhook_url:
                raise UnsupportedChannelKind(kind, "no webhook url configured")
            sender = WebhookSender(str(self.webhook_url), self.webhook_timeout)
        else:  # pragma: no cover - every kind has a branch
            raise UnsupportedChannelKind(kind)
        logger.debug(f"Created {sender!r} for channel {kind}")
        return sender

    def send(self, kind: Any, message: str) -> None:
        """Create a sender for ``kind`` and send ``message`` through it once."""
        self.create(kind).send(message)


__all__ = ["ChannelFactory", "parse_kind", "DEFAULT_LABELS"]
