"""High-level convenience interface for fixed-output hash functions."""

from __future__ import annotations

from copy import deepcopy
from typing import TypeVar

from digestkit.traits import FixedOutput, FixedOutputReset

_D = TypeVar("_D", bound="Digest")


class HashMarker:
    """Marker for cryptographic hash functions."""


class Digest(FixedOutput, HashMarker):
    """Fixed-output cryptographic hash function with convenience methods.

    Subclasses must be constructible with no arguments.
    """

    @classmethod
    def new_with_prefix(cls: type[_D], data: bytes) -> _D:
        """Create an instance that has already processed ``data``."""
        hasher = cls()
        hasher.update(data)
        return hasher

    def chain_update(self: _D, data: bytes) -> _D:
        """Process ``data`` and return ``self`` for chaining."""
        self.update(data)
        return self

    def finalize(self) -> bytes:
        """Return the hash result."""
        return self.finalize_fixed()

    def finalize_reset(self) -> bytes:
        """Return the hash result and reset the instance."""
        if not isinstance(self, FixedOutputReset):
            raise TypeError(f"{type(self).__name__} cannot be reset")
        return self.finalize_fixed_reset()

    @classmethod
    def digest(cls, data: bytes) -> bytes:
        """Compute the hash of ``data``."""
        return cls.new_with_prefix(data).finalize()

    def copy(self: _D) -> _D:
        """Return an independent copy of the current state."""
        return deepcopy(self)