"""Exceptions raised by hashing, MAC and curve primitives."""

from __future__ import annotations


class _FixedMessageError(ValueError):
    """Error carrying a fixed default message."""

    default_message = ""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(self.default_message if message is None else message)


class InvalidOutputSize(_FixedMessageError):
    """The requested output size is not supported by the algorithm."""

    default_message = "invalid output size"


class InvalidBufferSize(_FixedMessageError):
    """A buffer length does not match the hash output size."""

    default_message = "invalid buffer length"


class InvalidLength(_FixedMessageError):
    """A key or other input has a length the algorithm does not accept."""

    default_message = "invalid length"


class MacError(_FixedMessageError):
    """A computed MAC tag does not match the expected one."""

    default_message = "MAC tag mismatch"


class CryptoError(_FixedMessageError):
    """Generic elliptic curve failure."""

    default_message = "crypto error"