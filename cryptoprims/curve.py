"""Twisted Edwards curve arithmetic over prime fields."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from functools import lru_cache


def field_element_to_bytes(value: int, modulus: int) -> bytes:
    """Encode a field element as fixed-width little-endian bytes."""
    size = (modulus.bit_length() + 7) // 8
    return (value % modulus).to_bytes(size, "little")


@lru_cache(maxsize=None)
def _non_residue(p: int) -> int:
    z = 2
    while pow(z, (p - 1) // 2, p) != p - 1:
        z += 1
    return z


def _sqrt_mod(n: int, p: int) -> int | None:
    """Return a square root of ``n`` modulo the odd prime ``p``, or None."""
    n %= p
    if n == 0:
        return 0
    if pow(n, (p - 1) // 2, p) != 1:
        return None
    if p % 4 == 3:
        return pow(n, (p + 1) // 4, p)
    q, s = p - 1, 0
    while q % 2 == 0:
        q //= 2
        s += 1
    m = s
    c = pow(_non_residue(p), q, p)
    t = pow(n, q, p)
    root = pow(n, (q + 1) // 2, p)
    while t != 1:
        i, t2 = 0, t
        while t2 != 1:
            t2 = t2 * t2 % p
            i += 1
        b = pow(c, 1 << (m - i - 1), p)
        m = i
        c = b * b % p
        t = t * c % p
        root = root * b % p
    return root


@dataclass(frozen=True)
class TwistedEdwardsCurve:
    """The curve ``a*x^2 + y^2 = 1 + d*x^2*y^2`` over ``GF(base_modulus)``."""

    name: str
    base_modulus: int
    a: int
    d: int
    scalar_modulus: int
    cofactor: int

    def identity(self) -> Point:
        """The neutral element ``(0, 1)``."""
        return Point(self, 0, 1)

    def is_on_curve(self, x: int, y: int) -> bool:
        p = self.base_modulus
        x2 = x * x % p
        y2 = y * y % p
        return (self.a * x2 + y2) % p == (1 + self.d * x2 * y2) % p

    def point(self, x: int, y: int) -> Point:
        """Build a point, checking that it lies on the curve."""
        p = self.base_modulus
        x, y = x % p, y % p
        if not self.is_on_curve(x, y):
            raise ValueError(f"({x}, {y}) is not on curve {self.name}")
        return Point(self, x, y)

    def random_point(self, rng: random.Random) -> Point:
        """Sample a uniformly random non-identity point of the prime-order subgroup."""
        p = self.base_modulus
        while True:
            y = rng.randrange(p)
            y2 = y * y % p
            denominator = (self.a - self.d * y2) % p
            if denominator == 0:
                continue
            x = _sqrt_mod((1 - y2) * pow(denominator, -1, p), p)
            if x is None:
                continue
            if rng.getrandbits(1):
                x = (-x) % p
            candidate = Point(self, x, y) * self.cofactor
            if not candidate.is_identity():
                return candidate

    def random_scalar(self, rng: random.Random) -> int:
        """Sample a uniform element of the scalar field."""
        return rng.randrange(self.scalar_modulus)


@dataclass(frozen=True)
class Point:
    """An affine point on a twisted Edwards curve."""

    curve: TwistedEdwardsCurve = field(repr=False)
    x: int
    y: int

    def _check_same_curve(self, other: Point) -> None:
        if other.curve != self.curve:
            raise ValueError("points lie on different curves")

    def __add__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        self._check_same_curve(other)
        curve = self.curve
        p = curve.base_modulus
        x1, y1, x2, y2 = self.x, self.y, other.x, other.y
        t = curve.d * x1 * x2 % p * y1 * y2 % p
        x3 = (x1 * y2 + y1 * x2) * pow((1 + t) % p, -1, p) % p
        y3 = (y1 * y2 - curve.a * x1 * x2) * pow((1 - t) % p, -1, p) % p
        return Point(curve, x3, y3)

    def __neg__(self) -> Point:
        return Point(self.curve, (-self.x) % self.curve.base_modulus, self.y)

    def __sub__(self, other: object) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return self + (-other)

    def __mul__(self, scalar: object) -> Point:
        if not isinstance(scalar, int) or isinstance(scalar, bool):
            return NotImplemented
        if scalar < 0:
            return (-self) * (-scalar)
        result = self.curve.identity()
        for bit in bin(scalar)[2:]:
            result = result.double()
            if bit == "1":
                result = result + self
        return result

    def __rmul__(self, scalar: object) -> Point:
        return self.__mul__(scalar)

    def double(self) -> Point:
        return self + self

    def is_identity(self) -> bool:
        return self.x == 0 and self.y == 1

    def is_in_prime_subgroup(self) -> bool:
        return (self * self.curve.scalar_modulus).is_identity()

    def to_uncompressed_bytes(self) -> bytes:
        """Encode as the x then y coordinate, each little-endian."""
        p = self.curve.base_modulus
        return field_element_to_bytes(self.x, p) + field_element_to_bytes(self.y, p)


_JUBJUB_BASE = 0x73EDA753299D7D483339D80809A1D80553BDA402FFFE5BFEFFFFFFFF00000001

JUBJUB = TwistedEdwardsCurve(
    name="jubjub",
    base_modulus=_JUBJUB_BASE,
    a=_JUBJUB_BASE - 1,
    d=(-10240 * pow(10241, -1, _JUBJUB_BASE)) % _JUBJUB_BASE,
    scalar_modulus=6554484396890773809930967563523245729705921265872317281365359162392183254199,
    cofactor=8,
)