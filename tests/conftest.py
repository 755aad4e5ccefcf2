"""Global fixtures and pytest configuration.

- Blocks any real HTTP request sent by the webhook channel
- Provides a ChannelFactory whose senders write to in-memory sinks
- Provides valid configurations, on disk and in memory
- Exposes a shared CliRunner for CLI tests
"""

from unittest.mock import create_autospec, patch

import pytest
import yaml
from rich.console import Console
from typer.testing import CliRunner

from src.notifications.factory import ChannelFactory
from src.notifications.sinks import MemorySink
from src.services import ConfigService
from src.services.config_schema import FullConfig


@pytest.fixture(autouse=True)
def block_real_webhook_requests():
    """Prevent any outgoing HTTP requests via requests.post during tests."""
    with patch("requests.post") as mock_post:
        mock_post.return_value.status_code = 200
        mock_post.return_value.text = "MOCKED"
        yield mock_post


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch):
    """No configuration path leaks in from the environment."""
    monkeypatch.delenv("NOTIFICATIONS_CONFIG", raising=False)


class RecordingSinks:
    """Hands out a fresh MemorySink per sender and remembers which kind got it."""

    def __init__(self):
        self.created = []

    def __call__(self, kind):
        sink = MemorySink()
        self.created.append((kind, sink))
        return sink

    def messages(self, kind=None):
        return [
            message
            for sink_kind, sink in self.created
            if kind is None or sink_kind == kind
            for message in sink.messages
        ]


@pytest.fixture
def sinks():
    return RecordingSinks()


@pytest.fixture
def factory(sinks):
    """ChannelFactory writing to memory instead of the console."""
    return ChannelFactory(
        console=Console(record=True),
        webhook_url="https://hooks.example.org/notify",
        sink_factory=sinks,
    )


@pytest.fixture
def valid_config():
    """Fixture for a valid notifications configuration."""
    return FullConfig.model_validate(
        {
            "channels": {
                "email": {"label": "Mail"},
                "webhook": {"url": "https://hooks.example.org/notify", "timeout": 5},
            },
            "subscribers": [
                {"channel": "email"},
                {"channel": "sms", "transforms": ["encrypt"]},
            ],
        }
    )


@pytest.fixture
def config_file(valid_config, tmp_path):
    """Fixture for a temporary configuration file."""
    config_path = tmp_path / "test_config.yaml"
    with open(config_path, "w") as f:
        yaml.dump(valid_config.model_dump(mode="json"), f)
    return str(config_path)


@pytest.fixture
def mock_config_service(valid_config):
    """Fixture for a mocked configuration service."""
    service = create_autospec(ConfigService, spec_set=True)
    service.load_config.return_value = valid_config
    return service


@pytest.fixture
def real_config_service(config_file):
    """Fixture for a real configuration service with a temporary file."""
    return ConfigService(config_file)


@pytest.fixture(scope="session")
def cli():
    """Shared CliRunner for all CLI tests."""
    return CliRunner()
