"""Message authentication code interface with constant-time tag checks."""

from __future__ import annotations

import hmac
from typing import ClassVar, TypeVar

from digestkit.errors import InvalidLength, MacError
from digestkit.traits import FixedOutput, FixedOutputReset

_M = TypeVar("_M", bound="Mac")


class MacMarker:
    """Marker for message authentication algorithms."""


class CtOutput:
    """Fixed-size output whose equality check runs in constant time."""

    __slots__ = ("_bytes",)

    def __init__(self, data: bytes) -> None:
        self._bytes = bytes(data)

    def into_bytes(self) -> bytes:
        """Return the wrapped bytes."""
        return self._bytes

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CtOutput):
            return NotImplemented
        return hmac.compare_digest(self._bytes, other._bytes)

    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        return len(self._bytes)

    def __repr__(self) -> str:
        return f"CtOutput(<{len(self._bytes)} bytes>)"


class Mac(FixedOutput, MacMarker):
    """Message authentication algorithm with convenience methods.

    Subclasses are constructed from a key. ``key_size`` fixes the accepted
    key length; ``None`` accepts keys of any length.
    """

    key_size: ClassVar[int | None] = None

    @classmethod
    def new_from_slice(cls: type[_M], key: bytes) -> _M:
        """Create an instance from ``key``, raising InvalidLength if it is unsuitable."""
        key = bytes(key)
        if cls.key_size is not None and len(key) != cls.key_size:
            raise InvalidLength()
        return cls._from_key(key)

    @classmethod
    def _from_key(cls: type[_M], key: bytes) -> _M:
        return cls(key)  # type: ignore[call-arg]

    def chain_update(self: _M, data: bytes) -> _M:
        """Process ``data`` and return ``self`` for chaining."""
        self.update(data)
        return self

    def finalize(self) -> CtOutput:
        """Return the tag as a constant-time comparable value."""
        return CtOutput(self.finalize_fixed())

    def finalize_reset(self) -> CtOutput:
        """Return the tag and reset the instance."""
        if not isinstance(self, FixedOutputReset):
            raise TypeError(f"{type(self).__name__} cannot be reset")
        return CtOutput(self.finalize_fixed_reset())

    def verify(self, tag: bytes) -> None:
        """Raise MacError unless ``tag`` matches the computed tag."""
        if self.finalize() != CtOutput(tag):
            raise MacError()

    def verify_slice(self, tag: bytes) -> None:
        """Check ``tag`` against the whole computed tag; lengths must match."""
        tag = bytes(tag)
        if len(tag) != self.output_size:
            raise MacError()
        if not hmac.compare_digest(self.finalize_fixed(), tag):
            raise MacError()

    def verify_truncated_left(self, tag: bytes) -> None:
        """Check ``tag`` against the leftmost bytes of the computed tag."""
        tag = bytes(tag)
        n = len(tag)
        if n == 0 or n > self.output_size:
            raise MacError()
        if not hmac.compare_digest(self.finalize_fixed()[:n], tag):
            raise MacError()

    def verify_truncated_right(self, tag: bytes) -> None:
        """Check ``tag`` against the rightmost bytes of the computed tag."""
        tag = bytes(tag)
        n = len(tag)
        if n == 0 or n > self.output_size:
            raise MacError()
        start = self.output_size - n
        if not hmac.compare_digest(self.finalize_fixed()[start:], tag):
            raise MacError()