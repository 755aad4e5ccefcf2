"""Notification channel posting messages to an HTTP webhook."""

from __future__ import annotations

import logging
from typing import Any, Dict

import requests

from ..errors import DeliveryFailure
from .base import ChannelKind

logger = logging.getLogger(__name__)


class WebhookSender:
    kind = ChannelKind.WEBHOOK

    def __init__(self, url: str, timeout: int = 10):
        self.url = url
        self.timeout = timeout

    @property
    def name(self) -> str:
        return self.kind.value

    def _payload(self, message: str) -> Dict[str, Any]:
        return {"channel": self.name, "message": message}

    def send(self, message: str) -> None:
        headers = {"Content-Type": "application/json"}
        try:
            response = requests.post(
                self.url,
                json=self._payload(message),
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.warning(f"Webhook {self.url} unreachable: {e}")
            raise DeliveryFailure(self.name, str(e)) from e

        if not 200 <= response.status_code < 300:
            logger.warning(
                f"Webhook {self.url} answered {response.status_code}: {response.text}"
            )
            raise DeliveryFailure(self.name, f"status code {response.status_code}")

    def __repr__(self) -> str:
        return f"WebhookSender(url={self.url!r})"


__all__ = ["WebhookSender"]
