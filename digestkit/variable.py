"""Wrappers that fix the output size of a variable-output core."""

from __future__ import annotations

from copy import deepcopy
from typing import ClassVar, TypeVar

from digestkit.core_api import (
    BlockBuffer,
    BufferKind,
    FixedOutputCore,
    TruncSide,
    VariableOutputCore,
)
from digestkit.errors import InvalidBufferSize, InvalidOutputSize
from digestkit.traits import Reset, VariableOutputReset

_R = TypeVar("_R", bound="RtVariableCoreWrapper")


def _truncate(full: bytes, n: int, side: TruncSide) -> bytes:
    if side is TruncSide.LEFT:
        return bytes(full[:n])
    return bytes(full[len(full) - n:])


class CtVariableCoreWrapper(FixedOutputCore, Reset):
    """Fixed-output core built from a variable-output core.

    Subclasses set ``inner_type`` and ``output_size``; the output size is
    checked when the subclass is defined and must lie in
    ``1..inner_type.MAX_OUTPUT_SIZE``.
    """

    inner_type: ClassVar[type[VariableOutputCore] | None] = None

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        inner = getattr(cls, "inner_type", None)
        size = getattr(cls, "output_size", None)
        if inner is None or size is None:
            return
        if not 0 < size <= inner.MAX_OUTPUT_SIZE:
            raise InvalidOutputSize()
        cls.block_size = inner.block_size
        cls.buffer_kind = getattr(inner, "buffer_kind", BufferKind.EAGER)
        name = getattr(inner, "algorithm_name", None)
        if name is not None:
            cls.algorithm_name = f"{name}_{size}"

    def __init__(self) -> None:
        self.inner = self._new_inner()

    @classmethod
    def _new_inner(cls) -> VariableOutputCore:
        inner = cls.inner_type
        size = getattr(cls, "output_size", None)
        if inner is None or size is None:
            raise TypeError(f"{cls.__name__} needs inner_type and output_size")
        return inner(size)  # type: ignore[call-arg]

    def update_blocks(self, blocks: object) -> None:
        """Pass the blocks on to the inner core."""
        self.inner.update_blocks(blocks)  # type: ignore[arg-type]

    def finalize_fixed_core(self, buffer: BlockBuffer) -> bytes:
        """Finish the inner core and truncate its result to ``output_size``."""
        full = self.inner.finalize_variable_core(buffer)
        return _truncate(full, self.output_size, self.inner.TRUNC_SIDE)

    def reset(self) -> None:
        """Replace the inner core with a fresh one."""
        self.inner = self._new_inner()


class RtVariableCoreWrapper(VariableOutputReset):
    """Byte-level hasher over a variable-output core, sized at run time.

    Subclasses set ``core_type``. Construction raises
    :class:`~digestkit.errors.InvalidOutputSize` when the core rejects the size.
    """

    core_type: ClassVar[type[VariableOutputCore] | None] = None

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        core_type = getattr(cls, "core_type", None)
        if core_type is not None:
            cls.MAX_OUTPUT_SIZE = core_type.MAX_OUTPUT_SIZE

    def __init__(self, output_size: int) -> None:
        core_type = type(self).core_type
        if core_type is None:
            raise TypeError(f"{type(self).__name__} needs a core_type")
        self.core = core_type(output_size)  # type: ignore[call-arg]
        self.buffer = BlockBuffer(
            core_type.block_size, getattr(core_type, "buffer_kind", BufferKind.EAGER)
        )
        self.output_size = output_size

    @property
    def block_size(self) -> int:
        return self.core.block_size

    def update(self, data: bytes) -> None:
        """Feed ``data`` into the hasher."""
        self.buffer.digest_blocks(data, self.core.update_blocks)

    def _require_reset(self) -> Reset:
        if not isinstance(self.core, Reset):
            raise TypeError(f"{type(self.core).__name__} cannot be reset")
        return self.core

    def reset(self) -> None:
        """Return to the initial state."""
        core = self._require_reset()
        self.buffer.reset()
        core.reset()

    def _finalize_dirty(self) -> bytes:
        if self.output_size > self.MAX_OUTPUT_SIZE:
            raise InvalidBufferSize()
        full = self.core.finalize_variable_core(self.buffer)
        return _truncate(full, self.output_size, self.core.TRUNC_SIDE)

    def finalize_variable(self) -> bytes:
        """Return ``output_size`` bytes of result; the state is left dirty."""
        return self._finalize_dirty()

    def finalize_variable_reset(self) -> bytes:
        """Return the result and reset the state."""
        core = self._require_reset()
        result = self._finalize_dirty()
        core.reset()
        self.buffer.reset()
        return result

    def write(self, data: bytes) -> int:
        """Feed ``data`` like a writable stream and return its length."""
        self.update(data)
        return len(data)

    def flush(self) -> None:
        """Nothing to flush; present for stream compatibility."""

    def copy(self: _R) -> _R:
        """Return an independent copy of the current state."""
        return deepcopy(self)

    def __repr__(self) -> str:
        name = getattr(type(self.core), "algorithm_name", type(self.core).__name__)
        return f"{name} {{ .. }}"