"""Email channel."""

from __future__ import annotations

from .base import ChannelKind, SinkSender


class EmailSender(SinkSender):
    kind = ChannelKind.EMAIL


__all__ = ["EmailSender"]
