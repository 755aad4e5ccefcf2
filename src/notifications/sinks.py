"""Sinks receiving the text emitted by terminal senders."""

from __future__ import annotations

from typing import Callable, List, Optional

from rich.console import Console
from rich.markup import escape

Sink = Callable[[str], None]


class ConsoleSink:
    """Prints every emitted message on a Rich console, prefixed by a label."""

    def __init__(self, label: str, console: Optional[Console] = None, style: str = "cyan"):
        self.label = label
        self.console = console or Console()
        self.style = style

    def __call__(self, message: str) -> None:
        # Messages are user text, never Rich markup
        self.console.print(f"[{self.style}]{escape(self.label)}:[/{self.style}] {escape(message)}")


class MemorySink:
    """Keeps emitted messages in memory, in emission order."""

    def __init__(self):
        self.messages: List[str] = []

    def __call__(self, message: str) -> None:
        self.messages.append(message)

    def clear(self) -> None:
        self.messages.clear()


__all__ = ["Sink", "ConsoleSink", "MemorySink"]
