"""Tests for the sinks terminal senders write to."""

from rich.console import Console

from src.notifications.sinks import ConsoleSink, MemorySink


def test_memory_sink_keeps_order():
    sink = MemorySink()
    sink("a")
    sink("b")
    assert sink.messages == ["a", "b"]
    sink.clear()
    assert sink.messages == []


def test_console_sink_prefixes_label():
    console = Console(record=True, width=80)
    ConsoleSink("SMS", console)("hello there")
    assert console.export_text().strip() == "SMS: hello there"


def test_console_sink_does_not_render_markup():
    console = Console(record=True, width=80)
    ConsoleSink("[x]", console)("[red]plain[/red]")
    assert console.export_text().strip() == "[x]: [red]plain[/red]"
