from typing import List, Optional

from pydantic import BaseModel, Field, HttpUrl, field_validator, model_validator

from src.notifications.channels.base import ChannelKind
from src.notifications.transforms import TRANSFORMS


class SinkChannelConfig(BaseModel):
    """Settings shared by the console-backed channels."""

    label: Optional[str] = None


class WebhookChannelConfig(BaseModel):
    url: HttpUrl
    timeout: int = Field(default=10, gt=0)


class ChannelsConfig(BaseModel):
    email: SinkChannelConfig = SinkChannelConfig()
    sms: SinkChannelConfig = SinkChannelConfig()
    console: SinkChannelConfig = SinkChannelConfig()
    webhook: Optional[WebhookChannelConfig] = None


class SubscriberConfig(BaseModel):
    """One broadcast subscriber: a channel and the transforms wrapped around it."""

    channel: ChannelKind
    transforms: List[str] = []

    @field_validator("channel", mode="before")
    @classmethod
    def _lower_channel(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("transforms")
    @classmethod
    def _known_transforms(cls, value: List[str]) -> List[str]:
        unknown = [name for name in value if name not in TRANSFORMS]
        if unknown:
            raise ValueError(
                f"unknown transform(s) {unknown}, available: {sorted(TRANSFORMS)}"
            )
        return value


class FullConfig(BaseModel):
    channels: ChannelsConfig = ChannelsConfig()
    subscribers: List[SubscriberConfig] = []

    @model_validator(mode="after")
    def _webhook_subscribers_need_url(self) -> "FullConfig":
        if self.channels.webhook is None and any(
            s.channel is ChannelKind.WEBHOOK for s in self.subscribers
        ):
            raise ValueError(
                "webhook subscribers require a 'channels.webhook.url' setting"
            )
        return self
