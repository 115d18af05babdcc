# digestkit

digestkit is a small framework for writing hash functions and message
authentication codes. An algorithm supplies only its block function, the
*core*. digestkit takes care of the rest: it buffers input into whole blocks,
finalizes, resets, truncates output and reads extendable output.

## Installation

```
pip install digestkit
```

The package has no runtime dependencies.

## Layers

- **Convenience classes**: `Digest` (in `digestkit.digest`) and `Mac` (in
  `digestkit.mac`). Most callers only need these two.
- **Capabilities**: `digestkit.traits` holds `Update`, `Reset`,
  `FixedOutput`, `FixedOutputReset`, `ExtendableOutput`,
  `ExtendableOutputReset`, `XofReader`, `VariableOutput` and
  `VariableOutputReset`.
- **Block level**: `digestkit.core_api` holds `UpdateCore`,
  `FixedOutputCore`, `ExtendableOutputCore`, `XofReaderCore` and
  `VariableOutputCore`. It also holds the buffers `BlockBuffer` and
  `EagerBuffer`, and the enums `BufferKind` and `TruncSide`.
- **Wrappers**: these turn a core into a byte-oriented hasher.
  - `CoreWrapper` in `digestkit.wrapper`
  - `XofReaderCoreWrapper` in `digestkit.xof_reader`
  - `CtVariableCoreWrapper` and `RtVariableCoreWrapper` in `digestkit.variable`

## Writing an algorithm

A core processes whole blocks and finishes with whatever the buffer still
holds. The toy core below XORs its blocks together. Wrapping it in
`CoreWrapper` and `Digest` gives you a complete hasher:

```python
from digestkit.core_api import FixedOutputCore
from digestkit.digest import Digest
from digestkit.traits import Reset
from digestkit.wrapper import CoreWrapper


class XorCore(FixedOutputCore, Reset):
    block_size = 4
    output_size = 4

    def __init__(self):
        self.state = bytearray(4)

    def update_blocks(self, blocks):
        for block in blocks:
            self.state = bytearray(a ^ b for a, b in zip(self.state, block))

    def finalize_fixed_core(self, buffer):
        tail = buffer.get_data().ljust(4, b"\x00")
        return bytes(a ^ b for a, b in zip(self.state, tail))

    def reset(self):
        self.state = bytearray(4)


class XorHash(CoreWrapper, Digest):
    core_type = XorCore


assert XorHash.digest(b"abcdefgh") == b"\x04\x04\x04\x04"
```

How input is buffered depends on `BufferKind`:

- **Eager** (the default): a block is handed to the core as soon as it is
  full.
- **Lazy**: the last full block is held back until more data arrives.

A core picks its kind by setting `buffer_kind`.

## Using a hasher

A hasher built on `Digest` works like this:

```python
h = XorHash()
h.update(b"hello ")
h.update(b"world")
result = h.finalize()

same = XorHash.digest(b"hello world")
chained = XorHash().chain_update(b"hello ").chain_update(b"world").finalize()
```

Other methods:

- `finalize_reset()` returns the result, and the hasher starts again from its
  initial state.
- `copy()` returns an independent clone of the current state.
- `CoreWrapper.write()` and `flush()` let you use a hasher where a writable
  stream is expected. `flush()` returns how many bytes are still waiting for
  a full block.

An extendable-output core (`ExtendableOutputCore`) wrapped in `CoreWrapper`
gives you a reader from `finalize_xof()`. You can read from it any number of
times:

```python
reader = hasher.finalize_xof()
first = reader.read(16)
more = reader.read(100)
```

For variable-output cores there are two wrappers:

- `RtVariableCoreWrapper` takes the output length when you create it. It
  raises `InvalidOutputSize` if the core rejects that length.
- `CtVariableCoreWrapper` fixes the length on the subclass, as
  `output_size`. The length is checked when the subclass is defined.

Both truncate the core's full result on the side given by its `TRUNC_SIDE`.

## MACs

Keys:

- A `Mac` subclass is built from a key with `new_from_slice(key)`.
- If `key_size` is set, a key of any other length raises `InvalidLength`.

Results:

- `finalize()` returns a `CtOutput`. Two `CtOutput` values are compared in
  constant time.
- `into_bytes()` gives you the raw tag.

Checking a tag: `verify`, `verify_slice`, `verify_truncated_left` and
`verify_truncated_right` each raise `MacError` when the tag does not match.

## Errors

`digestkit.errors` defines these errors, all subclasses of `ValueError`:

- `InvalidOutputSize`
- `InvalidBufferSize`
- `InvalidLength`
- `MacError`
- `CryptoError`

## Test data

`digestkit.rng` provides:

- `XorShiftRng`, a deterministic xorshift generator.
- `feed_rand_16mib`, which feeds a hasher about 16 MiB of pseudorandom data.
  After every 1024-byte chunk it adds one extra byte.

## What is not included

digestkit ships no actual hash or MAC algorithms. It provides only the
framework for writing them.

There are also no ready-made known-answer test runners. To check an algorithm
against test vectors, feed the vectors to it yourself.