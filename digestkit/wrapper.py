"""Buffering wrapper that turns a block-level core into a byte-level hasher."""

from __future__ import annotations

from copy import deepcopy
from typing import Any, ClassVar, TypeVar

from digestkit.core_api import (
    BlockBuffer,
    BufferKind,
    ExtendableOutputCore,
    FixedOutputCore,
    UpdateCore,
)
from digestkit.traits import ExtendableOutputReset, FixedOutputReset, Reset
from digestkit.xof_reader import XofReaderCoreWrapper

_W = TypeVar("_W", bound="CoreWrapper")


class CoreWrapper(FixedOutputReset, ExtendableOutputReset):
    """Buffers input for a block-level core and exposes byte-level methods.

    Subclasses set ``core_type`` so that they can be built with no arguments.
    Operations the core does not support raise ``TypeError``.
    """

    core_type: ClassVar[type | None] = None

    def __init__(self, core: UpdateCore | None = None) -> None:
        if core is None:
            core = self._require_core_type()()
        self.core = core
        self.buffer = BlockBuffer(
            core.block_size, getattr(core, "buffer_kind", BufferKind.EAGER)
        )

    @classmethod
    def _require_core_type(cls) -> type:
        if cls.core_type is None:
            raise TypeError(f"{cls.__name__} needs a core")
        return cls.core_type

    @classmethod
    def _from_key(cls: type[_W], key: bytes) -> _W:
        core_type = cls._require_core_type()
        factory: Any = getattr(core_type, "new_from_slice", core_type)
        return cls(factory(key))

    @classmethod
    def from_core(cls: type[_W], core: UpdateCore) -> _W:
        """Create a wrapper around ``core`` with an empty buffer."""
        return cls(core)

    def decompose(self) -> tuple[UpdateCore, BlockBuffer]:
        """Return the core and its buffer."""
        return self.core, self.buffer

    @property
    def block_size(self) -> int:
        return self.core.block_size

    @property
    def output_size(self) -> int:  # type: ignore[override]
        try:
            return self.core.output_size  # type: ignore[attr-defined]
        except AttributeError:
            raise TypeError(f"{type(self.core).__name__} has no fixed output size") from None

    def update(self, data: bytes) -> None:
        """Feed ``data`` into the hasher."""
        self.buffer.digest_blocks(data, self.core.update_blocks)

    def reset(self) -> None:
        """Return to the initial state."""
        if not isinstance(self.core, Reset):
            raise TypeError(f"{type(self.core).__name__} cannot be reset")
        self.core.reset()
        self.buffer.reset()

    def _fixed_core(self) -> FixedOutputCore:
        if not isinstance(self.core, FixedOutputCore):
            raise TypeError(f"{type(self.core).__name__} has no fixed output")
        return self.core

    def _xof_core(self) -> ExtendableOutputCore:
        if not isinstance(self.core, ExtendableOutputCore):
            raise TypeError(f"{type(self.core).__name__} has no extendable output")
        return self.core

    def finalize_fixed(self) -> bytes:
        """Return the result; the state is left dirty."""
        return self._fixed_core().finalize_fixed_core(self.buffer)

    def finalize_fixed_reset(self) -> bytes:
        """Return the result and reset the state."""
        core = self._fixed_core()
        if not isinstance(core, Reset):
            raise TypeError(f"{type(core).__name__} cannot be reset")
        result = core.finalize_fixed_core(self.buffer)
        self.reset()
        return result

    def finalize_xof(self) -> XofReaderCoreWrapper:
        """Return a reader over the output; the state is left dirty."""
        return XofReaderCoreWrapper(self._xof_core().finalize_xof_core(self.buffer))

    def finalize_xof_reset(self) -> XofReaderCoreWrapper:
        """Return a reader over the output and reset the state."""
        core = self._xof_core()
        if not isinstance(core, Reset):
            raise TypeError(f"{type(core).__name__} cannot be reset")
        reader = XofReaderCoreWrapper(core.finalize_xof_core(self.buffer))
        self.reset()
        return reader

    def write(self, data: bytes) -> int:
        """Feed ``data`` like a writable stream and return its length."""
        self.update(data)
        return len(data)

    def flush(self) -> int:
        """Keep partial input until a full block arrives; return how many bytes wait."""
        return self.buffer.get_pos()

    def copy(self: _W) -> _W:
        """Return an independent copy of the current state."""
        return deepcopy(self)

    def __repr__(self) -> str:
        name = getattr(type(self.core), "algorithm_name", type(self.core).__name__)
        return f"{name} {{ .. }}"