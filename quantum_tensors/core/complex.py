"""Complex — immutable complex-number value type.

https://en.wikipedia.org/wiki/Complex_number

Every operation returns a new value; derived polar quantities (r, phi,
phi_tau) are computed on demand from the two cartesian components.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Context, Decimal, ROUND_HALF_UP
from typing import Iterable, Self

import numpy as np

from quantum_tensors import config
from quantum_tensors.core.colors import hsl_to_hex
from quantum_tensors.core.errors import (
    DivisionByZeroError,
    UnsupportedFormatError,
    ZeroMagnitudeError,
)

TAU = 2 * math.pi

COMPLEX_FORMATS = ("cartesian", "polar", "polarTau")
_FORMAT_ALIASES = {"polar_tau": "polarTau"}


# Large enough for every finite float plus the requested digits.
_DECIMAL_CONTEXT = Context(prec=400)


def _fixed(x: float, precision: int) -> str:
    """Fixed-point rendering with ties rounded away from zero.

    Decimal(x) holds the exact binary value, so 0.125 -> "0.13" and
    2.5 -> "3" at precision 0.
    """
    # + 0.0 turns -0.0 into 0.0
    x = x + 0.0
    if not math.isfinite(x):
        return f"{x:.{precision}f}"
    rounded = Decimal(x).quantize(
        Decimal(1).scaleb(-precision), rounding=ROUND_HALF_UP, context=_DECIMAL_CONTEXT
    )
    return f"{rounded:f}"


@dataclass(frozen=True)
class Complex:
    """Complex number ``z = re + i im``."""

    re: float
    im: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "re", float(self.re))
        object.__setattr__(self, "im", float(self.im))

    # --- Polar accessors ---

    @property
    def r(self) -> float:
        """Radius in polar coordinates."""
        return self.abs()

    @property
    def phi(self) -> float:
        """Angle in polar coordinates, in [0, 2π)."""
        return self.arg()

    @property
    def phi_tau(self) -> float:
        """Angle as a fraction of a full turn, in [0, 1)."""
        return self.arg() / TAU

    def abs2(self) -> float:
        """Squared length: the intensity / probability of an amplitude."""
        return self.re * self.re + self.im * self.im

    def abs(self) -> float:
        return math.sqrt(self.re * self.re + self.im * self.im)

    def arg(self) -> float:
        """Argument in [0, 2π)."""
        angle = math.atan2(self.im, self.re)
        if angle < 0:
            angle += TAU
            # tiny negative angles round up to a full turn
            if angle >= TAU:
                angle = 0.0
        return angle

    # --- Arithmetic ---

    def conj(self) -> Complex:
        return Complex(self.re, -self.im)

    def add(self, z2: Complex) -> Complex:
        return Complex(self.re + z2.re, self.im + z2.im)

    def sub(self, z2: Complex) -> Complex:
        return Complex(self.re - z2.re, self.im - z2.im)

    def mul(self, z2: Complex) -> Complex:
        return Complex(
            self.re * z2.re - self.im * z2.im,
            self.re * z2.im + self.im * z2.re,
        )

    def mul_gauss(self, z2: Complex) -> Complex:
        """Gauss's three-multiplication product, equal to mul up to rounding.

        https://en.wikipedia.org/wiki/Multiplication_algorithm#Complex_multiplication_algorithm
        """
        k1 = z2.re * (self.re + self.im)
        k2 = self.re * (z2.im - z2.re)
        k3 = self.im * (z2.re + z2.im)
        return Complex(k1 - k3, k1 + k2)

    def div(self, z2: Complex) -> Complex:
        denom = z2.re * z2.re + z2.im * z2.im
        if denom == 0:
            raise DivisionByZeroError(
                f"Cannot divide by 0. z1: {self.to_string()} / z2: {z2.to_string()}"
            )
        re = (self.re * z2.re + self.im * z2.im) / denom
        im = (z2.re * self.im - self.re * z2.im) / denom
        return Complex(re, im)

    def normalize(self) -> Complex:
        """Unit-length value with the same angle."""
        norm = self.r
        if norm == 0:
            raise ZeroMagnitudeError("Cannot normalize a 0 length vector")
        return Complex(self.re / norm, self.im / norm)

    # --- Predicates ---

    def is_close_to(self, z2: Complex, eps: float | None = None) -> bool:
        """Euclidean distance to z2 strictly below eps (default 1e-6)."""
        if eps is None:
            eps = config.get_tolerances().close_eps
        return self.sub(z2).r < eps

    def equal(self, z2: Complex) -> bool:
        """Exact component-wise equality, no tolerance."""
        return self.re == z2.re and self.im == z2.im

    def is_zero(self) -> bool:
        return self.re == 0 and self.im == 0

    def is_one(self) -> bool:
        return self.re == 1 and self.im == 0

    def is_almost_zero(self, eps2: float | None = None) -> bool:
        """Squared magnitude below eps2 (default 1e-12, i.e. norm under 1e-6)."""
        if eps2 is None:
            eps2 = config.get_tolerances().almost_zero
        return self.abs2() < eps2

    def is_normal(self) -> bool:
        return self.abs2() == 1

    # --- Rendering ---

    def to_string(self, fmt: str = "cartesian", precision: int = 2) -> str:
        """Render as ``cartesian``, ``polar`` or ``polarTau``.

        >>> Complex(1, -2).to_string()
        '(1.00 -2.00i)'
        >>> Complex(0, 1).to_string("polarTau")
        '1.00 exp(0.25τi)'
        """
        fmt = _FORMAT_ALIASES.get(fmt, fmt)
        if fmt == "cartesian":
            sign = "+" if self.im >= 0 else ""
            return f"({_fixed(self.re, precision)} {sign}{_fixed(self.im, precision)}i)"
        if fmt == "polar":
            return f"{_fixed(self.r, precision)} exp({_fixed(self.phi, precision)}i)"
        if fmt == "polarTau":
            return f"{_fixed(self.r, precision)} exp({_fixed(self.phi_tau, precision)}τi)"
        raise UnsupportedFormatError(
            f"Complex format {fmt!r} is not in {list(COMPLEX_FORMATS)}."
        )

    def to_color(self) -> str:
        """Domain coloring: hue from angle, lightness falling with magnitude."""
        angle = ((self.phi * 360) / TAU + 360) % 360
        return hsl_to_hex(angle, 100, 100 - 50 * self.r)

    # --- Constructors ---

    @classmethod
    def from_polar(cls, r: float, phi: float) -> Self:
        return cls(r * math.cos(phi), r * math.sin(phi))

    @classmethod
    def from_complex(cls, z: complex) -> Self:
        z = complex(z)
        return cls(z.real, z.imag)

    @classmethod
    def random_gaussian(cls, rng: np.random.Generator | None = None) -> Self:
        """Standard-normal complex value via the Box–Muller transform.

        https://en.wikipedia.org/wiki/Box%E2%80%93Muller_transform
        Pass a seeded ``np.random.default_rng(seed)`` for reproducible draws.
        """
        if rng is None:
            rng = np.random.default_rng()
        # Generator.random() is in [0, 1); flip it into (0, 1] for the log.
        u = 1.0 - rng.random()
        v = rng.random()
        return cls.from_polar(math.sqrt(-2 * math.log(u)), TAU * v)

    # --- Python protocols ---

    def __add__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.add(other)

    def __radd__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else other.add(self)

    def __sub__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.sub(other)

    def __rsub__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else other.sub(self)

    def __mul__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.mul(other)

    def __rmul__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else other.mul(self)

    def __truediv__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else self.div(other)

    def __rtruediv__(self, other):
        other = _coerce(other)
        return NotImplemented if other is None else other.div(self)

    def __neg__(self) -> Complex:
        return Complex(-self.re, -self.im)

    def __abs__(self) -> float:
        return self.abs()

    def __complex__(self) -> complex:
        return complex(self.re, self.im)

    def __str__(self) -> str:
        return self.to_string()


def _coerce(value) -> Complex | None:
    if isinstance(value, Complex):
        return value
    if isinstance(value, (int, float, complex, np.number)) and not isinstance(value, bool):
        return Complex.from_complex(value)
    return None


def cx(re: float, im: float = 0.0) -> Complex:
    """Shorthand for ``Complex(re, im)``."""
    return Complex(re, im)


# ---------------------------------------------------------------------------
# numpy interop
# ---------------------------------------------------------------------------

def to_array(values: Iterable[Complex]) -> np.ndarray:
    """Pack Complex values into a 1-D complex128 array."""
    return np.array([complex(z) for z in values], dtype=np.complex128)


def from_array(arr) -> list[Complex]:
    """Unpack any backend array (flattened, C order) into Complex values."""
    data = np.asarray(config.to_numpy(arr), dtype=np.complex128).ravel()
    return [Complex(z.real, z.imag) for z in data]
