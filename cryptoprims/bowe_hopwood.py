"""Bowe-Hopwood variant of the Pedersen hash over twisted Edwards curves.

The input is split into 3-bit chunks; each chunk selects a signed multiple
(1..4, possibly negated) of a per-chunk generator. The hash output is the
x coordinate of the resulting point.
"""

from __future__ import annotations

import random
from collections.abc import Iterable
from dataclasses import dataclass, field

from .curve import JUBJUB, Point, TwistedEdwardsCurve, field_element_to_bytes
from .errors import IncorrectInputLength
from .pedersen_crh import Window, bytes_to_bits
from .schemes import CRHScheme, TwoToOneCRHScheme

CHUNK_SIZE = 3


@dataclass
class BoweHopwoodParameters:
    """Per-segment lists of chunk generators."""

    generators: list[list[Point]] = field(default_factory=list)

    def __str__(self) -> str:
        lines = ["Bowe-Hopwood-Pedersen Hash Parameters {"]
        lines.extend(
            f"\t  Generator {i}: {segment!r}" for i, segment in enumerate(self.generators)
        )
        lines.append("}")
        return "\n".join(lines) + "\n"


def max_chunks_in_segment(scalar_modulus: int) -> int:
    """Largest number of chunks per segment keeping scalars below ``(r-1)/2``."""
    upper_limit = (scalar_modulus - 1) // 2
    count = 0
    bound = 2
    while bound < upper_limit:
        bound <<= 4
        count += 1
    return count


def _chunks(items: list, size: int) -> Iterable[list]:
    for start in range(0, len(items), size):
        yield items[start : start + size]


class BoweHopwoodCRH(CRHScheme):
    """Bowe-Hopwood-Pedersen hash of a byte string to a base-field element."""

    def __init__(self, window: Window, curve: TwistedEdwardsCurve = JUBJUB) -> None:
        self.window = window
        self.curve = curve

    @property
    def max_input_bits(self) -> int:
        return self.window.window_size * self.window.num_windows * CHUNK_SIZE

    def create_generators(self, rng: random.Random) -> list[list[Point]]:
        """For each segment, a random base and its successive multiples by 16."""
        generators = []
        for _ in range(self.window.num_windows):
            segment = []
            base = self.curve.random_point(rng)
            for _ in range(self.window.window_size):
                segment.append(base)
                for _ in range(4):
                    base = base.double()
            generators.append(segment)
        return generators

    def setup(self, rng: random.Random) -> BoweHopwoodParameters:
        maximum = max_chunks_in_segment(self.curve.scalar_modulus)
        if self.window.window_size > maximum:
            raise ValueError(
                "Bowe-Hopwood-PedersenCRH hash must have a window size resulting in "
                f"scalars < (p-1)/2, maximum segment size is {maximum}"
            )
        return BoweHopwoodParameters(generators=self.create_generators(rng))

    def evaluate(self, parameters: BoweHopwoodParameters, data: bytes) -> int:
        """Hash ``data`` to the x coordinate of a curve point."""
        data = bytes(data)
        if len(data) * 8 > self.max_input_bits:
            raise IncorrectInputLength(len(data))

        bits = bytes_to_bits(data)
        remainder = len(bits) % CHUNK_SIZE
        if remainder:
            bits.extend([False] * (CHUNK_SIZE - remainder))

        if len(parameters.generators) != self.window.num_windows:
            raise ValueError(
                f"Incorrect pp of size {len(parameters.generators)} for window params "
                f"{self.window.window_size}x{self.window.num_windows}x{CHUNK_SIZE}"
            )
        for segment in parameters.generators:
            if len(segment) != self.window.window_size:
                raise ValueError(
                    f"segment of {len(segment)} generators does not match window size "
                    f"{self.window.window_size}"
                )

        result = self.curve.identity()
        segments = _chunks(bits, self.window.window_size * CHUNK_SIZE)
        for segment_bits, segment_generators in zip(segments, parameters.generators):
            for chunk, generator in zip(_chunks(segment_bits, CHUNK_SIZE), segment_generators):
                encoded = generator
                if chunk[0]:
                    encoded = encoded + generator
                if chunk[1]:
                    encoded = encoded + generator.double()
                if chunk[2]:
                    encoded = -encoded
                result = result + encoded
        return result.x


class BoweHopwoodTwoToOneCRH(TwoToOneCRHScheme):
    """Bowe-Hopwood hash of two equal-length inputs placed side by side."""

    def __init__(self, window: Window, curve: TwistedEdwardsCurve = JUBJUB) -> None:
        self.window = window
        self.curve = curve
        self._crh = BoweHopwoodCRH(window, curve)

    @property
    def input_size_bits(self) -> int:
        return self.window.input_size_bits

    def create_generators(self, rng: random.Random) -> list[list[Point]]:
        return self._crh.create_generators(rng)

    def setup(self, rng: random.Random) -> BoweHopwoodParameters:
        return self._crh.setup(rng)

    def evaluate(self, parameters: BoweHopwoodParameters, left: bytes, right: bytes) -> int:
        """Hash ``left || right`` zero-padded to the input size.

        Bytes beyond the input size are dropped.
        """
        left, right = bytes(left), bytes(right)
        if len(left) != len(right):
            raise ValueError("left and right input should be of equal length")
        buffer_len = self.input_size_bits // 8
        buffer = (left + right)[:buffer_len].ljust(buffer_len, b"\x00")
        return self._crh.evaluate(parameters, buffer)

    def compress(self, parameters: BoweHopwoodParameters, left: int, right: int) -> int:
        """Hash two previous outputs via their little-endian field encodings."""
        modulus = self.curve.base_modulus
        return self.evaluate(
            parameters,
            field_element_to_bytes(left, modulus),
            field_element_to_bytes(right, modulus),
        )