"""Pedersen collision-resistant hash over a twisted Edwards curve."""

from __future__ import annotations

import random
from collections.abc import Iterable
from dataclasses import dataclass, field

from .curve import JUBJUB, Point, TwistedEdwardsCurve
from .errors import IncorrectInputLength, to_uncompressed_bytes
from .schemes import CRHScheme, TwoToOneCRHScheme


@dataclass(frozen=True)
class Window:
    """Shape of the hash input: ``num_windows`` windows of ``window_size`` bits."""

    window_size: int
    num_windows: int

    @property
    def input_size_bits(self) -> int:
        return self.window_size * self.num_windows


@dataclass
class PedersenParameters:
    """Per-window lists of generator powers."""

    generators: list[list[Point]] = field(default_factory=list)

    def __str__(self) -> str:
        lines = ["Pedersen Hash Parameters {"]
        lines.extend(
            f"\t  Generator {i}: {powers!r}" for i, powers in enumerate(self.generators)
        )
        lines.append("}")
        return "\n".join(lines) + "\n"


def bytes_to_bits(data: Iterable[int]) -> list[bool]:
    """Expand bytes into bits, least significant bit of each byte first."""
    return [(byte >> i) & 1 == 1 for byte in bytes(data) for i in range(8)]


def _chunks(items: list, size: int) -> Iterable[list]:
    for start in range(0, len(items), size):
        yield items[start : start + size]


class PedersenCRH(CRHScheme):
    """Sum of generator powers selected by the bits of the input."""

    def __init__(self, window: Window, curve: TwistedEdwardsCurve = JUBJUB) -> None:
        self.window = window
        self.curve = curve

    @property
    def input_size_bits(self) -> int:
        return self.window.input_size_bits

    def generator_powers(self, num_powers: int, rng: random.Random) -> list[Point]:
        """Return ``base, 2*base, 4*base, ...`` for a random base point."""
        powers = []
        base = self.curve.random_point(rng)
        for _ in range(num_powers):
            powers.append(base)
            base = base.double()
        return powers

    def create_generators(self, rng: random.Random) -> list[list[Point]]:
        return [
            self.generator_powers(self.window.window_size, rng)
            for _ in range(self.window.num_windows)
        ]

    def setup(self, rng: random.Random) -> PedersenParameters:
        return PedersenParameters(generators=self.create_generators(rng))

    def evaluate(self, parameters: PedersenParameters, data: bytes) -> Point:
        """Hash up to ``input_size_bits`` bits of ``data`` to a curve point."""
        data = bytes(data)
        total_bits = self.window.input_size_bits
        if len(data) * 8 > total_bits:
            raise IncorrectInputLength(len(data))
        if len(data) * 8 < total_bits:
            data = data.ljust(total_bits // 8, b"\x00")

        if len(parameters.generators) != self.window.num_windows:
            first = len(parameters.generators[0]) if parameters.generators else 0
            raise ValueError(
                f"Incorrect pp of size {first}x{len(parameters.generators)} for window "
                f"params {self.window.window_size}x{self.window.num_windows}"
            )

        result = self.curve.identity()
        bits = bytes_to_bits(data)
        for window_bits, powers in zip(_chunks(bits, self.window.window_size), parameters.generators):
            for bit, base in zip(window_bits, powers):
                if bit:
                    result = result + base
        return result


class PedersenTwoToOneCRH(TwoToOneCRHScheme):
    """Pedersen hash of two equal-length inputs placed side by side."""

    def __init__(self, window: Window, curve: TwistedEdwardsCurve = JUBJUB) -> None:
        self.window = window
        self.curve = curve
        self._crh = PedersenCRH(window, curve)

    @property
    def input_size_bits(self) -> int:
        return self.window.input_size_bits

    def create_generators(self, rng: random.Random) -> list[list[Point]]:
        return self._crh.create_generators(rng)

    def generator_powers(self, num_powers: int, rng: random.Random) -> list[Point]:
        return self._crh.generator_powers(num_powers, rng)

    def setup(self, rng: random.Random) -> PedersenParameters:
        return self._crh.setup(rng)

    def evaluate(self, parameters: PedersenParameters, left: bytes, right: bytes) -> Point:
        """Hash ``left || right`` zero-padded to the input size.

        Bytes beyond the input size are dropped.
        """
        left, right = bytes(left), bytes(right)
        if len(left) != len(right):
            raise ValueError("left and right input should be of equal length")
        half_bits = self.window.input_size_bits // 2
        buffer_len = (half_bits + half_bits) // 8
        buffer = (left + right)[:buffer_len].ljust(buffer_len, b"\x00")
        return self._crh.evaluate(parameters, buffer)

    def compress(self, parameters: PedersenParameters, left: Point, right: Point) -> Point:
        """Hash two previous outputs via their uncompressed encodings."""
        return self.evaluate(parameters, to_uncompressed_bytes(left), to_uncompressed_bytes(right))