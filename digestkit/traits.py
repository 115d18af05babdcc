"""Mid-level interfaces describing what a hashing algorithm can do."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, TypeVar

_U = TypeVar("_U", bound="Update")


class Reset(ABC):
    """Types that can return to their initial state."""

    @abstractmethod
    def reset(self) -> None:
        """Return to the initial state."""


class Update(ABC):
    """Types which consume data with byte granularity."""

    @abstractmethod
    def update(self, data: bytes) -> None:
        """Feed ``data`` into the state."""

    def chain(self: _U, data: bytes) -> _U:
        """Feed ``data`` and return ``self`` for chaining."""
        self.update(data)
        return self


class FixedOutput(Update):
    """Hash functions with a fixed-size output."""

    output_size: ClassVar[int]

    @abstractmethod
    def finalize_fixed(self) -> bytes:
        """Return the result; the state may be left dirty afterwards."""


class FixedOutputReset(FixedOutput, Reset):
    """Fixed-output hash functions able to reset themselves."""

    def finalize_fixed_reset(self) -> bytes:
        """Return the result and reset the state."""
        result = self.finalize_fixed()
        self.reset()
        return result


class XofReader(ABC):
    """Reader of extendable output; may be read an unlimited number of times."""

    @abstractmethod
    def read(self, n: int) -> bytes:
        """Return the next ``n`` bytes of output."""


class ExtendableOutput(Update):
    """Hash functions with extendable output (XOF)."""

    @abstractmethod
    def finalize_xof(self) -> XofReader:
        """Return a reader over the output; the state may be left dirty."""

    def finalize_boxed(self, output_size: int) -> bytes:
        """Return the first ``output_size`` bytes of output."""
        return self.finalize_xof().read(output_size)

    @classmethod
    def digest_xof(cls, data: bytes, output_size: int) -> bytes:
        """Hash ``data`` with a fresh instance and return ``output_size`` bytes."""
        hasher = cls()
        hasher.update(data)
        return hasher.finalize_xof().read(output_size)


class ExtendableOutputReset(ExtendableOutput, Reset):
    """XOF hash functions able to reset themselves."""

    def finalize_xof_reset(self) -> XofReader:
        """Return a reader over the output and reset the state."""
        reader = self.finalize_xof()
        self.reset()
        return reader

    def finalize_boxed_reset(self, output_size: int) -> bytes:
        """Return ``output_size`` bytes of output and reset the state."""
        return self.finalize_xof_reset().read(output_size)


class VariableOutput(Update):
    """Hash functions whose output size is chosen at construction.

    Constructors take the output size and raise
    :class:`~digestkit.errors.InvalidOutputSize` when it is not supported.
    """

    MAX_OUTPUT_SIZE: ClassVar[int]
    output_size: int

    @abstractmethod
    def finalize_variable(self) -> bytes:
        """Return ``output_size`` bytes of result; the state may be left dirty."""

    @classmethod
    def digest_variable(cls, data: bytes, output_size: int) -> bytes:
        """Hash ``data`` into ``output_size`` bytes with a fresh instance."""
        hasher = cls(output_size)
        hasher.update(data)
        return hasher.finalize_variable()


class VariableOutputReset(VariableOutput, Reset):
    """Variable-output hash functions able to reset themselves."""

    def finalize_variable_reset(self) -> bytes:
        """Return the result and reset the state."""
        result = self.finalize_variable()
        self.reset()
        return result