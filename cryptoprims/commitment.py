"""Pedersen, BLAKE2s and compressed Pedersen commitments."""

from __future__ import annotations

import hashlib
import random
from dataclasses import dataclass, field
from typing import Any

from .curve import JUBJUB, Point, TwistedEdwardsCurve
from .errors import IncorrectInputLength
from .injective_map import InjectiveMap, TECompressor
from .pedersen_crh import PedersenCRH, PedersenParameters, Window
from .schemes import CommitmentScheme


@dataclass
class PedersenCommitmentParameters:
    """Powers of the blinding generator and per-window message generators."""

    randomness_generator: list[Point] = field(default_factory=list)
    generators: list[list[Point]] = field(default_factory=list)


class PedersenCommitment(CommitmentScheme):
    """Pedersen hash of the message plus a blinding term ``r * h``."""

    def __init__(self, window: Window, curve: TwistedEdwardsCurve = JUBJUB) -> None:
        self.window = window
        self.curve = curve
        self._crh = PedersenCRH(window, curve)

    def setup(self, rng: random.Random) -> PedersenCommitmentParameters:
        num_powers = self.curve.scalar_modulus.bit_length()
        randomness_generator = self._crh.generator_powers(num_powers, rng)
        generators = self._crh.create_generators(rng)
        return PedersenCommitmentParameters(
            randomness_generator=randomness_generator, generators=generators
        )

    def commit(
        self, parameters: PedersenCommitmentParameters, data: bytes, randomness: int
    ) -> Point:
        """Commit to ``data`` with the scalar ``randomness``."""
        data = bytes(data)
        total_bits = self.window.input_size_bits
        if len(data) > total_bits:
            raise IncorrectInputLength(len(data))
        if len(data) * 8 < total_bits:
            data = data.ljust(total_bits // 8, b"\x00")
        if len(parameters.generators) != self.window.num_windows:
            raise ValueError(
                f"expected {self.window.num_windows} generator windows, "
                f"got {len(parameters.generators)}"
            )

        result = self._crh.evaluate(PedersenParameters(generators=parameters.generators), data)
        scalar = randomness % self.curve.scalar_modulus
        for i, power in enumerate(parameters.randomness_generator):
            if (scalar >> i) & 1:
                result = result + power
        return result


class Blake2sCommitment(CommitmentScheme):
    """BLAKE2s-256 of the message followed by 32 bytes of randomness."""

    RANDOMNESS_SIZE = 32

    def setup(self, rng: random.Random) -> None:
        return None

    def commit(self, parameters: None, data: bytes, randomness: bytes) -> bytes:
        randomness = bytes(randomness)
        if len(randomness) != self.RANDOMNESS_SIZE:
            raise IncorrectInputLength(len(randomness))
        h = hashlib.blake2s(digest_size=32)
        h.update(bytes(data))
        h.update(randomness)
        return h.digest()


class PedersenCommCompressor(CommitmentScheme):
    """Pedersen commitment followed by an injective map."""

    def __init__(
        self,
        window: Window,
        curve: TwistedEdwardsCurve = JUBJUB,
        compressor: InjectiveMap | None = None,
    ) -> None:
        self.window = window
        self.curve = curve
        self.compressor = compressor if compressor is not None else TECompressor()
        self._commitment = PedersenCommitment(window, curve)

    def setup(self, rng: random.Random) -> PedersenCommitmentParameters:
        return self._commitment.setup(rng)

    def commit(
        self, parameters: PedersenCommitmentParameters, data: bytes, randomness: int
    ) -> Any:
        return self.compressor.injective_map(
            self._commitment.commit(parameters, data, randomness)
        )