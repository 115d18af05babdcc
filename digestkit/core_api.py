"""Block-level building blocks for hashing algorithms and their buffers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, ClassVar, Iterable


class TruncSide(Enum):
    """Side of a full result kept when truncating variable output."""

    LEFT = "left"
    RIGHT = "right"


class BufferKind(Enum):
    """How a block buffer treats data ending on a block boundary."""

    EAGER = "eager"
    LAZY = "lazy"


def _check_block_size(block_size: int) -> None:
    if not 0 < block_size < 256:
        raise ValueError(f"block size must be in 1..255, got {block_size}")


class BlockBuffer:
    """Collects bytes and hands them on in whole blocks.

    An eager buffer processes a block as soon as it is full; a lazy buffer
    keeps the last full block until more data arrives.
    """

    def __init__(self, block_size: int, kind: BufferKind = BufferKind.EAGER) -> None:
        _check_block_size(block_size)
        self.block_size = block_size
        self.kind = BufferKind(kind)
        self._buf = bytearray(block_size)
        self._pos = 0

    def digest_blocks(self, data: bytes, process: Callable[[list[bytes]], None]) -> None:
        """Buffer ``data`` and call ``process`` with each run of complete blocks."""
        data = bytes(data)
        pos = self._pos
        rem = self.block_size - pos
        n = len(data)
        fits = n <= rem if self.kind is BufferKind.LAZY else n < rem
        if fits:
            self._buf[pos:pos + n] = data
            self._pos = pos + n
            return
        if pos:
            self._buf[pos:] = data[:rem]
            data = data[rem:]
            process([bytes(self._buf)])
        blocks, leftover = self._split(data)
        if blocks:
            process(blocks)
        self._buf[:len(leftover)] = leftover
        self._pos = len(leftover)

    def _split(self, data: bytes) -> tuple[list[bytes], bytes]:
        bs = self.block_size
        count, tail = divmod(len(data), bs)
        if self.kind is BufferKind.LAZY and count and not tail:
            count -= 1
        end = count * bs
        return [data[i:i + bs] for i in range(0, end, bs)], data[end:]

    def get_data(self) -> bytes:
        """Return the bytes currently held in the buffer."""
        return bytes(self._buf[:self._pos])

    def get_pos(self) -> int:
        """Return the number of buffered bytes."""
        return self._pos

    def remaining(self) -> int:
        """Return how many more bytes fit into the current block."""
        return self.block_size - self._pos

    def reset(self) -> None:
        """Discard buffered data."""
        self._buf = bytearray(self.block_size)
        self._pos = 0


class EagerBuffer:
    """Hands out bytes from blocks produced on demand, keeping the unread rest."""

    def __init__(self, block_size: int) -> None:
        _check_block_size(block_size)
        self.block_size = block_size
        self._block = bytes(block_size)
        self._pos = 0

    def _next_block(self, produce: Callable[[], bytes]) -> bytes:
        block = bytes(produce())
        if len(block) != self.block_size:
            raise ValueError(
                f"produced block has {len(block)} bytes, expected {self.block_size}"
            )
        return block

    def set_data(self, n: int, produce: Callable[[], bytes]) -> bytes:
        """Return the next ``n`` bytes, calling ``produce`` for each new block."""
        if n < 0:
            raise ValueError("cannot read a negative number of bytes")
        out = bytearray()
        pos = self._pos
        if pos:
            rem = self.block_size - pos
            if n < rem:
                self._pos = pos + n
                return self._block[pos:pos + n]
            out += self._block[pos:]
            n -= rem
        full, tail = divmod(n, self.block_size)
        for _ in range(full):
            out += self._next_block(produce)
        if tail:
            self._block = self._next_block(produce)
            out += self._block[:tail]
            self._pos = tail
        else:
            self._pos = 0
        return bytes(out)

    def reset(self) -> None:
        """Discard unread bytes."""
        self._block = bytes(self.block_size)
        self._pos = 0


class UpdateCore(ABC):
    """Algorithm state that consumes data in whole blocks."""

    block_size: ClassVar[int]
    buffer_kind: ClassVar[BufferKind] = BufferKind.EAGER

    @abstractmethod
    def update_blocks(self, blocks: Iterable[bytes]) -> None:
        """Update the state with the given blocks."""


class FixedOutputCore(UpdateCore):
    """Block-level hash core with a fixed output size."""

    output_size: ClassVar[int]

    @abstractmethod
    def finalize_fixed_core(self, buffer: BlockBuffer) -> bytes:
        """Finish with the data left in ``buffer``; the state may be left dirty."""


class XofReaderCore(ABC):
    """Block-level reader of extendable output."""

    block_size: ClassVar[int]

    @abstractmethod
    def read_block(self) -> bytes:
        """Return the next block of output."""


class ExtendableOutputCore(UpdateCore):
    """Block-level hash core with extendable output."""

    @abstractmethod
    def finalize_xof_core(self, buffer: BlockBuffer) -> XofReaderCore:
        """Finish with the data left in ``buffer`` and return a reader core."""


class VariableOutputCore(UpdateCore):
    """Block-level hash core whose output size is chosen at construction.

    Constructors take the output size and raise
    :class:`~digestkit.errors.InvalidOutputSize` when it is not supported.
    The full result is truncated on the side given by ``TRUNC_SIDE``.
    """

    TRUNC_SIDE: ClassVar[TruncSide]
    MAX_OUTPUT_SIZE: ClassVar[int]

    @abstractmethod
    def finalize_variable_core(self, buffer: BlockBuffer) -> bytes:
        """Return the full ``MAX_OUTPUT_SIZE`` result; the state may be left dirty."""