"""SMS channel."""

from __future__ import annotations

from .base import ChannelKind, SinkSender


class SmsSender(SinkSender):
    kind = ChannelKind.SMS


__all__ = ["SmsSender"]
