"""Tests for ChannelFactory: one sender per channel kind."""

import pytest
from rich.console import Console

from src.notifications.channels.base import ChannelKind, Sender
from src.notifications.channels.console import ConsoleSender
from src.notifications.channels.email import EmailSender
from src.notifications.channels.sms import SmsSender
from src.notifications.channels.webhook import WebhookSender
from src.notifications.errors import UnsupportedChannelKind
from src.notifications.factory import ChannelFactory, parse_kind


@pytest.mark.parametrize(
    "kind,expected_type",
    [
        (ChannelKind.EMAIL, EmailSender),
        (ChannelKind.SMS, SmsSender),
        (ChannelKind.CONSOLE, ConsoleSender),
        (ChannelKind.WEBHOOK, WebhookSender),
    ],
)
def test_create_every_kind(factory, kind, expected_type):
    sender = factory.create(kind)
    assert isinstance(sender, expected_type)
    assert isinstance(sender, Sender)
    assert sender.name == kind.value


def test_email_sends_message_literally(factory, sinks):
    factory.create(ChannelKind.EMAIL).send("hello")
    assert sinks.messages(ChannelKind.EMAIL) == ["hello"]
    assert sinks.messages(ChannelKind.SMS) == []


def test_send_emits_exactly_once_per_call(factory, sinks):
    sender = factory.create("sms")
    sender.send("a")
    sender.send("b")
    assert sinks.messages() == ["a", "b"]


def test_distinct_senders_do_not_share_sinks(factory, sinks):
    first = factory.create("email")
    second = factory.create("email")
    assert first is not second

    first.send("only first")

    (_, first_sink), (_, second_sink) = sinks.created
    assert first_sink.messages == ["only first"]
    assert second_sink.messages == []


@pytest.mark.parametrize("value", ["email", "EMAIL", " Email "])
def test_create_accepts_kind_values(factory, value):
    assert isinstance(factory.create(value), EmailSender)


@pytest.mark.parametrize("bogus", ["bogus", "", None, 42, object()])
def test_create_unknown_kind_raises(factory, sinks, bogus):
    with pytest.raises(UnsupportedChannelKind) as excinfo:
        factory.create(bogus)
    assert excinfo.value.kind is bogus
    assert sinks.created == []


def test_unsupported_kind_is_a_value_error():
    with pytest.raises(ValueError):
        parse_kind("pigeon")


def test_webhook_without_url_is_unavailable(sinks):
    factory = ChannelFactory(console=Console(record=True), sink_factory=sinks)
    assert factory.is_available(ChannelKind.WEBHOOK) is False
    with pytest.raises(UnsupportedChannelKind, match="no webhook url"):
        factory.create(ChannelKind.WEBHOOK)


def test_unsupported_kind_message_is_readable(sinks):
    factory = ChannelFactory(console=Console(record=True), sink_factory=sinks)
    with pytest.raises(UnsupportedChannelKind) as excinfo:
        factory.create(ChannelKind.WEBHOOK)
    assert str(excinfo.value) == (
        "Unsupported channel kind: webhook (no webhook url configured)"
    )

    with pytest.raises(UnsupportedChannelKind) as excinfo:
        factory.create("pigeon")
    assert str(excinfo.value) == "Unsupported channel kind: 'pigeon'"


def test_kinds_lists_closed_set(factory):
    assert factory.kinds() == [
        ChannelKind.EMAIL,
        ChannelKind.SMS,
        ChannelKind.CONSOLE,
        ChannelKind.WEBHOOK,
    ]


def test_factory_send_creates_and_sends(factory, sinks):
    factory.send("console", "ping")
    assert sinks.created[0][0] == ChannelKind.CONSOLE
    assert sinks.messages() == ["ping"]


def test_default_sinks_print_on_console():
    console = Console(record=True, width=120)
    factory = ChannelFactory(console=console)

    factory.create("email").send("hello")
    factory.create("console").send("[bold]not markup[/bold]")

    output = console.export_text()
    assert "Email: hello" in output
    assert "Sending message: [bold]not markup[/bold]" in output


def test_from_config_reads_labels_and_webhook():
    console = Console(record=True, width=120)
    factory = ChannelFactory.from_config(
        {
            "email": {"label": "Mail"},
            "sms": {"label": None},
            "webhook": {"url": "https://hooks.example.org/x", "timeout": 3},
        },
        console,
    )
    assert factory.labels[ChannelKind.EMAIL] == "Mail"
    assert factory.labels[ChannelKind.SMS] == "SMS"
    assert factory.webhook_url == "https://hooks.example.org/x"
    assert factory.webhook_timeout == 3

    factory.create("email").send("hi")
    assert "Mail: hi" in console.export_text()


def test_from_config_empty():
    factory = ChannelFactory.from_config({})
    assert factory.webhook_url is None
    assert factory.is_available(ChannelKind.EMAIL)
