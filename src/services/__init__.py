"""Entrypoint for services package."""

from src.services.config_service import ConfigService
from src.services.notification_service import NotificationService

__all__ = ["ConfigService", "NotificationService"]
