"""Plain console channel: the basic message service every decorator can wrap."""

from __future__ import annotations

from .base import ChannelKind, SinkSender


class ConsoleSender(SinkSender):
    kind = ChannelKind.CONSOLE


__all__ = ["ConsoleSender"]
