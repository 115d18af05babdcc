import hashlib
import hmac

import pytest

from digestkit.core_api import (
    BufferKind,
    ExtendableOutputCore,
    FixedOutputCore,
    XofReaderCore,
)
from digestkit.digest import Digest
from digestkit.mac import CtOutput, Mac
from digestkit.traits import ExtendableOutput, ExtendableOutputReset, Reset
from digestkit.wrapper import CoreWrapper

DATA = bytes(range(256)) * 3


class Sha256Core(FixedOutputCore, Reset):
    block_size = 64
    output_size = 32
    algorithm_name = "ToySha"

    def __init__(self):
        self.blocks = []

    def update_blocks(self, blocks):
        assert all(len(block) == 64 for block in blocks)
        self.blocks.extend(blocks)

    def finalize_fixed_core(self, buffer):
        return hashlib.sha256(b"".join(self.blocks) + buffer.get_data()).digest()

    def reset(self):
        self.blocks = []


class LazySha256Core(Sha256Core):
    buffer_kind = BufferKind.LAZY


class NoResetCore(FixedOutputCore):
    block_size = 64
    output_size = 32

    def __init__(self):
        self.blocks = []

    def update_blocks(self, blocks):
        self.blocks.extend(blocks)

    def finalize_fixed_core(self, buffer):
        return hashlib.sha256(b"".join(self.blocks) + buffer.get_data()).digest()


class ShakeReaderCore(XofReaderCore):
    block_size = 168

    def __init__(self, data):
        self.data = data
        self.index = 0

    def read_block(self):
        start = self.index * 168
        self.index += 1
        return hashlib.shake_128(self.data).digest(start + 168)[start:]


class ShakeCore(ExtendableOutputCore, Reset):
    block_size = 168

    def __init__(self):
        self.blocks = []

    def update_blocks(self, blocks):
        self.blocks.extend(blocks)

    def finalize_xof_core(self, buffer):
        return ShakeReaderCore(b"".join(self.blocks) + buffer.get_data())

    def reset(self):
        self.blocks = []


class KeyedCore(FixedOutputCore, Reset):
    block_size = 64
    output_size = 32

    def __init__(self, key):
        self.key = key
        self.blocks = []

    @classmethod
    def new_from_slice(cls, key):
        return cls(bytes(key))

    def update_blocks(self, blocks):
        self.blocks.extend(blocks)

    def finalize_fixed_core(self, buffer):
        message = b"".join(self.blocks) + buffer.get_data()
        return hmac.new(self.key, message, hashlib.sha256).digest()

    def reset(self):
        self.blocks = []


class Sha256(CoreWrapper, Digest):
    core_type = Sha256Core


class LazySha256(CoreWrapper, Digest):
    core_type = LazySha256Core


class Shake(CoreWrapper):
    core_type = ShakeCore


class KeyedMac(CoreWrapper, Mac):
    core_type = KeyedCore


def test_digest_matches_reference():
    hasher = Sha256()
    CoreWrapper.update(hasher, DATA)
    assert CoreWrapper.finalize_fixed(hasher) == hashlib.sha256(DATA).digest()
    assert CoreWrapper.finalize_fixed(Sha256()) == hashlib.sha256(b"").digest()
    assert Sha256.digest(DATA) == hashlib.sha256(DATA).digest()


@pytest.mark.parametrize("cls", [Sha256, LazySha256])
@pytest.mark.parametrize("chunk", [1, 7, 63, 64, 65, 128, 200])
def test_chunked_updates(cls, chunk):
    hasher = cls()
    for start in range(0, len(DATA), chunk):
        CoreWrapper.update(hasher, DATA[start:start + chunk])
    assert CoreWrapper.finalize_fixed(hasher) == hashlib.sha256(DATA).digest()


def test_finalize_fixed_reset_allows_reuse():
    hasher = Sha256()
    CoreWrapper.update(hasher, b"first message")
    first = CoreWrapper.finalize_fixed_reset(hasher)
    CoreWrapper.update(hasher, DATA)
    assert first == hashlib.sha256(b"first message").digest()
    assert CoreWrapper.finalize_fixed(hasher) == hashlib.sha256(DATA).digest()


def test_reset_clears_buffer_and_core():
    hasher = Sha256()
    CoreWrapper.update(hasher, DATA[:100])
    CoreWrapper.reset(hasher)
    core, buffer = CoreWrapper.decompose(hasher)
    assert core.blocks == []
    assert buffer.get_data() == b""
    assert CoreWrapper.finalize_fixed(hasher) == hashlib.sha256(b"").digest()


def test_decompose_exposes_state():
    hasher = Sha256()
    CoreWrapper.update(hasher, DATA[:70])
    core, buffer = CoreWrapper.decompose(hasher)
    assert core.blocks == [DATA[:64]]
    assert buffer.get_data() == DATA[64:70]


def test_from_core_uses_given_core():
    core = Sha256Core()
    hasher = CoreWrapper.from_core(core)
    hasher.update(b"abc")
    assert hasher.core is core
    assert hasher.finalize_fixed() == hashlib.sha256(b"abc").digest()
    assert hasher.output_size == 32
    assert hasher.block_size == 64


def test_bare_wrapper_needs_core():
    with pytest.raises(TypeError):
        CoreWrapper()


def test_copy_is_independent():
    hasher = Sha256()
    CoreWrapper.update(hasher, DATA[:100])
    clone = CoreWrapper.copy(hasher)
    CoreWrapper.update(hasher, b"extra")
    assert CoreWrapper.finalize_fixed(clone) == hashlib.sha256(DATA[:100]).digest()
    assert CoreWrapper.finalize_fixed(hasher) == (
        hashlib.sha256(DATA[:100] + b"extra").digest()
    )


def test_repr_uses_algorithm_name():
    assert repr(CoreWrapper.copy(Sha256())) == "ToySha { .. }"


def test_fixed_core_has_no_xof():
    with pytest.raises(TypeError):
        CoreWrapper.finalize_xof(Sha256())


def test_xof_core_has_no_fixed_output():
    with pytest.raises(TypeError):
        CoreWrapper.finalize_fixed(Shake())


def test_reset_requires_resettable_core():
    hasher = CoreWrapper(NoResetCore())
    hasher.update(b"abc")
    with pytest.raises(TypeError):
        hasher.reset()
    with pytest.raises(TypeError):
        hasher.finalize_fixed_reset()


def test_xof_output_matches_reference():
    hasher = Shake()
    CoreWrapper.update(hasher, DATA)
    reader = CoreWrapper.finalize_xof(hasher)
    expected = hashlib.shake_128(DATA).digest(500)
    assert reader.read(100) + reader.read(400) == expected


def test_digest_xof_and_boxed():
    assert Shake.digest_xof(b"abc", 300) == hashlib.shake_128(b"abc").digest(300)
    hasher = Shake()
    CoreWrapper.update(hasher, b"abc")
    assert ExtendableOutput.finalize_boxed(hasher, 40) == hashlib.shake_128(b"abc").digest(40)


def test_xof_reset_allows_reuse():
    hasher = Shake()
    CoreWrapper.update(hasher, DATA)
    first = ExtendableOutputReset.finalize_boxed_reset(hasher, 64)
    CoreWrapper.update(hasher, b"abc")
    assert first == hashlib.shake_128(DATA).digest(64)
    assert CoreWrapper.finalize_xof_reset(hasher).read(32) == (
        hashlib.shake_128(b"abc").digest(32)
    )


def test_keyed_core_through_mac_interface():
    key = b"secret"
    expected = hmac.new(key, DATA, hashlib.sha256).digest()
    mac = Mac.chain_update(KeyedMac.new_from_slice(key), DATA)
    assert CtOutput.into_bytes(Mac.finalize(mac)) == expected
    Mac.verify_slice(Mac.chain_update(KeyedMac.new_from_slice(key), DATA), expected)
    with pytest.raises(Exception):
        Mac.verify_slice(Mac.chain_update(KeyedMac.new_from_slice(key), DATA), bytes(32))