"""SHA-256, and the hash interfaces built on it."""

from __future__ import annotations

import random
import struct
from typing import Any

from .schemes import CRHScheme, TwoToOneCRHScheme

_MASK = 0xFFFFFFFF
_BLOCK_SIZE = 64
_DIGEST_SIZE = 32

_K = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5, 0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3, 0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC, 0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7, 0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13, 0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3, 0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5, 0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208, 0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)

_H = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A, 0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)


def _rotr(value: int, amount: int) -> int:
    return ((value >> amount) | (value << (32 - amount))) & _MASK


def _compress(state: tuple[int, ...], block: bytes) -> tuple[int, ...]:
    """Run the compression function over one 64-byte block."""
    w = list(struct.unpack(">16I", block))
    for _ in range(48):
        x15, x2 = w[-15], w[-2]
        s0 = _rotr(x15, 7) ^ _rotr(x15, 18) ^ (x15 >> 3)
        s1 = _rotr(x2, 17) ^ _rotr(x2, 19) ^ (x2 >> 10)
        w.append((w[-16] + s0 + w[-7] + s1) & _MASK)

    a, b, c, d, e, f, g, h = state
    for k, wi in zip(_K, w):
        ch = (e & f) ^ (~e & g)
        ma = (a & b) ^ (a & c) ^ (b & c)
        s0 = _rotr(a, 2) ^ _rotr(a, 13) ^ _rotr(a, 22)
        s1 = _rotr(e, 6) ^ _rotr(e, 11) ^ _rotr(e, 25)
        t0 = (h + s1 + ch + k + wi) & _MASK
        t1 = (s0 + ma) & _MASK
        h, g, f, e, d, c, b, a = g, f, e, (d + t0) & _MASK, c, b, a, (t0 + t1) & _MASK

    return tuple((s + v) & _MASK for s, v in zip(state, (a, b, c, d, e, f, g, h)))


def _no_parameters() -> tuple[()]:
    """SHA-256 has no parameters; the empty tuple stands for them."""
    return tuple()


class Sha256:
    """Incremental SHA-256 hasher."""

    digest_size = _DIGEST_SIZE
    block_size = _BLOCK_SIZE

    def __init__(self, data: bytes = b"") -> None:
        self._state: tuple[int, ...] = _H
        self._completed_blocks = 0
        self._pending = bytearray()
        if data:
            self.update(data)

    def update(self, data: bytes) -> None:
        """Absorb ``data`` into the running hash."""
        self._pending += bytes(data)
        full = len(self._pending) - len(self._pending) % _BLOCK_SIZE
        for start in range(0, full, _BLOCK_SIZE):
            self._state = _compress(self._state, bytes(self._pending[start : start + _BLOCK_SIZE]))
            self._completed_blocks += 1
        del self._pending[:full]

    def finalize(self) -> bytes:
        """Return the digest of everything absorbed so far; the hasher stays usable."""
        pending = bytes(self._pending)
        bit_length = ((self._completed_blocks * _BLOCK_SIZE + len(pending)) * 8) % (1 << 64)
        zeros = (55 - len(pending)) % _BLOCK_SIZE
        tail = pending + b"\x80" + b"\x00" * zeros + bit_length.to_bytes(8, "big")
        state = self._state
        for start in range(0, len(tail), _BLOCK_SIZE):
            state = _compress(state, tail[start : start + _BLOCK_SIZE])
        return struct.pack(">8I", *state)

    def copy(self) -> Sha256:
        """Return an independent hasher with the same state."""
        clone = Sha256()
        clone._state = self._state
        clone._completed_blocks = self._completed_blocks
        clone._pending = bytearray(self._pending)
        return clone

    @classmethod
    def digest(cls, data: bytes) -> bytes:
        """Hash ``data`` in one call."""
        hasher = cls()
        hasher.update(data)
        return hasher.finalize()


class Sha256CRH(CRHScheme):
    """SHA-256 as a parameterless collision-resistant hash."""

    def setup(self, rng: random.Random) -> tuple[()]:
        """Return the (empty) parameters; no randomness is drawn."""
        return _no_parameters()

    def evaluate(self, parameters: Any, data: bytes) -> bytes:
        return Sha256.digest(data)


class Sha256TwoToOneCRH(TwoToOneCRHScheme):
    """SHA-256 of the concatenation of two inputs."""

    def setup(self, rng: random.Random) -> tuple[()]:
        """Return the (empty) parameters; no randomness is drawn."""
        return _no_parameters()

    def evaluate(self, parameters: Any, left: bytes, right: bytes) -> bytes:
        hasher = Sha256()
        hasher.update(left)
        hasher.update(right)
        return hasher.finalize()

    def compress(self, parameters: Any, left: bytes, right: bytes) -> bytes:
        return self.evaluate(parameters, left, right)