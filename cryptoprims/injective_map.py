"""Injective maps from curve points and the Pedersen hashes composed with them."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Any

from .curve import JUBJUB, Point, TwistedEdwardsCurve, field_element_to_bytes
from .errors import to_uncompressed_bytes
from .pedersen_crh import PedersenCRH, PedersenParameters, PedersenTwoToOneCRH, Window
from .schemes import CRHScheme, TwoToOneCRHScheme


class InjectiveMap(ABC):
    """A map from group elements that is injective on the prime-order subgroup."""

    @abstractmethod
    def injective_map(self, point: Point) -> Any:
        """Map ``point`` to its compressed representation."""


class TECompressor(InjectiveMap):
    """Keep only the x coordinate of a twisted Edwards point."""

    def injective_map(self, point: Point) -> int:
        return point.x


def _output_bytes(value: Any, curve: TwistedEdwardsCurve) -> bytes:
    if isinstance(value, int) and not isinstance(value, bool):
        return field_element_to_bytes(value, curve.base_modulus)
    return to_uncompressed_bytes(value)


class PedersenCRHCompressor(CRHScheme):
    """Pedersen hash followed by an injective map."""

    def __init__(
        self,
        window: Window,
        curve: TwistedEdwardsCurve = JUBJUB,
        compressor: InjectiveMap | None = None,
    ) -> None:
        self.window = window
        self.curve = curve
        self.compressor = compressor if compressor is not None else TECompressor()
        self._crh = PedersenCRH(window, curve)

    def setup(self, rng: random.Random) -> PedersenParameters:
        return self._crh.setup(rng)

    def evaluate(self, parameters: PedersenParameters, data: bytes) -> Any:
        return self.compressor.injective_map(self._crh.evaluate(parameters, data))


class PedersenTwoToOneCRHCompressor(TwoToOneCRHScheme):
    """Two-to-one Pedersen hash followed by an injective map."""

    def __init__(
        self,
        window: Window,
        curve: TwistedEdwardsCurve = JUBJUB,
        compressor: InjectiveMap | None = None,
    ) -> None:
        self.window = window
        self.curve = curve
        self.compressor = compressor if compressor is not None else TECompressor()
        self._crh = PedersenTwoToOneCRH(window, curve)

    def setup(self, rng: random.Random) -> PedersenParameters:
        return self._crh.setup(rng)

    def evaluate(self, parameters: PedersenParameters, left: bytes, right: bytes) -> Any:
        return self.compressor.injective_map(self._crh.evaluate(parameters, left, right))

    def compress(self, parameters: PedersenParameters, left: Any, right: Any) -> Any:
        """Hash two previous outputs via their canonical byte encodings."""
        return self.evaluate(
            parameters,
            _output_bytes(left, self.curve),
            _output_bytes(right, self.curve),
        )