"""Buffered reader over a block-level extendable-output core."""

from __future__ import annotations

from copy import deepcopy

from digestkit.core_api import EagerBuffer, XofReaderCore
from digestkit.traits import XofReader


class XofReaderCoreWrapper(XofReader):
    """Turns a block-producing reader core into a byte-granular reader."""

    def __init__(self, core: XofReaderCore) -> None:
        self.core = core
        self.buffer = EagerBuffer(core.block_size)

    def read(self, n: int) -> bytes:
        """Return the next ``n`` bytes of output."""
        return self.buffer.set_data(n, self.core.read_block)

    def copy(self) -> XofReaderCoreWrapper:
        """Return an independent copy of the reader state."""
        return deepcopy(self)

    def __repr__(self) -> str:
        name = getattr(type(self.core), "algorithm_name", type(self.core).__name__)
        return f"{name} {{ .. }}"