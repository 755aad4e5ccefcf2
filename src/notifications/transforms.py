"""Senders that rewrite a message before handing it to the sender they wrap.

A chain is built from the inside out: ``TransformingSender(inner, f)`` applies
``f`` and then lets ``inner`` (possibly another TransformingSender) continue.
The outermost transformation therefore runs first.
"""

from __future__ import annotations

import base64
import logging
from typing import Callable, Dict, Optional

from .channels.base import Sender
from .errors import TransformationFailure, UnknownTransform

logger = logging.getLogger(__name__)

Transform = Callable[[str], str]


def encrypt(message: str) -> str:
    return f"Encrypted({message})"


def uppercase(message: str) -> str:
    return message.upper()


def lowercase(message: str) -> str:
    return message.lower()


def strip(message: str) -> str:
    return message.strip()


def to_base64(message: str) -> str:
    return base64.b64encode(message.encode("utf-8")).decode("ascii")


TRANSFORMS: Dict[str, Transform] = {
    "encrypt": encrypt,
    "uppercase": uppercase,
    "lowercase": lowercase,
    "strip": strip,
    "base64": to_base64,
}


def get_transform(name: str) -> Transform:
    try:
        return TRANSFORMS[name]
    except KeyError:
        raise UnknownTransform(name, sorted(TRANSFORMS)) from None


class TransformingSender:
    def __init__(self, wrapped: Sender, transform: Transform, name: Optional[str] = None):
        self.wrapped = wrapped
        self.transform = transform
        self.transform_name = name or getattr(transform, "__name__", repr(transform))

    @property
    def name(self) -> str:
        inner = getattr(self.wrapped, "name", type(self.wrapped).__name__)
        return f"{self.transform_name}({inner})"

    def _apply(self, message: str) -> str:
        try:
            result = self.transform(message)
        except TransformationFailure:
            raise
        except Exception as e:
            raise TransformationFailure(self.transform_name, message, str(e)) from e
        if not isinstance(result, str):
            raise TransformationFailure(
                self.transform_name,
                message,
                f"expected str, got {type(result).__name__}",
            )
        return result

    def send(self, message: str) -> None:
        transformed = self._apply(message)
        logger.debug(f"Applied {self.transform_name} before delegating to {self.wrapped!r}")
        self.wrapped.send(transformed)

    def __repr__(self) -> str:
        return f"TransformingSender({self.name})"


def wrap(sender: Sender, *transforms: Transform | str) -> Sender:
    """Wrap ``sender`` so that ``transforms`` run in the order given.

    Transforms may be callables or names from ``TRANSFORMS``.
    """
    for transform in reversed(transforms):
        if isinstance(transform, str):
            sender = TransformingSender(sender, get_transform(transform), transform)
        else:
            sender = TransformingSender(sender, transform)
    return sender


__all__ = [
    "Transform",
    "TRANSFORMS",
    "TransformingSender",
    "encrypt",
    "uppercase",
    "lowercase",
    "strip",
    "to_base64",
    "get_transform",
    "wrap",
]
