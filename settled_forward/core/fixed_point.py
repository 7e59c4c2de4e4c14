"""FixedDecimal — deterministic scaled-integer decimal for prices and payoffs.

A FixedDecimal is a Decimal restricted to the domain of a 96-bit unsigned
mantissa with a scale of 0..28 and a sign bit. That domain gives 28-29
significant digits and a fixed 16-byte wire form, so the same inputs
produce bit-identical results across independent implementations.

Add, sub and mul run in FIXED_POINT_CONTEXT (prec=64, ROUND_HALF_EVEN, traps
for InvalidOperation/DivisionByZero/Overflow), wide enough that they are
exact for two in-domain operands. The result is then fitted back into the
domain: scale is reduced with ROUND_HALF_EVEN until the mantissa fits 96
bits. An integer part beyond 96 bits raises FixedPointOverflow.

Division is done on the integer mantissas, straight to the largest scale
whose mantissa fits, with a single ROUND_HALF_EVEN step. An exact quotient
drops trailing zeros down to the scale of the dividend less that of the
divisor (never below 0).

No float enters the arithmetic. from_float() exists only for configuration
input. A float goes through its shortest round-trip repr; an int converts
exactly.

Wire form (16 bytes, little-endian u32 words)::

    flags | lo | mid | hi        flags: bits 16..23 scale, bit 31 sign
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from decimal import (
    ROUND_FLOOR,
    ROUND_HALF_EVEN,
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
    localcontext,
)
from typing import final

from settled_forward.core.result import Err, Ok

MAX_SCALE = 28
MAX_MANTISSA = 2**96 - 1
U64_MAX = 2**64 - 1
SERIALIZED_LEN = 16

_SIGN_MASK = 0x8000_0000
_SCALE_MASK = 0x00FF_0000
_SCALE_SHIFT = 16
_WORD = 0xFFFF_FFFF
_LAYOUT = struct.Struct("<IIII")

FIXED_POINT_CONTEXT = Context(
    prec=64,
    rounding=ROUND_HALF_EVEN,
    Emin=-999999,
    Emax=999999,
    capitals=1,
    clamp=0,
    flags=[],
    traps=[InvalidOperation, DivisionByZero, Overflow],
)

_QUANTUM: tuple[Decimal, ...] = tuple(Decimal(1).scaleb(-s) for s in range(MAX_SCALE + 1))


class FixedPointOverflow(ArithmeticError):
    """A result does not fit the 96-bit mantissa."""


def _coefficient(value: Decimal) -> int:
    return int("".join(str(d) for d in value.as_tuple().digits))


def _exponent(value: Decimal) -> int:
    exponent = value.as_tuple().exponent
    assert isinstance(exponent, int)
    return exponent


def _is_representable(value: Decimal) -> bool:
    if not value.is_finite():
        return False
    exponent = _exponent(value)
    return -MAX_SCALE <= exponent <= 0 and _coefficient(value) <= MAX_MANTISSA


def _fit(value: Decimal) -> Decimal:
    """Round value into the fixed-point domain, or raise FixedPointOverflow."""
    if not value.is_finite():
        raise FixedPointOverflow(f"non-finite value {value}")
    if value.copy_abs() > MAX_MANTISSA:
        raise FixedPointOverflow(f"{value} exceeds the 96-bit mantissa")
    exponent = value.as_tuple().exponent
    assert isinstance(exponent, int)
    scale = min(max(-exponent, 0), MAX_SCALE)
    with localcontext(FIXED_POINT_CONTEXT):
        # abs(value) <= MAX_MANTISSA, so scale 0 always fits
        while True:
            fitted = value.quantize(_QUANTUM[scale])
            if _coefficient(fitted) <= MAX_MANTISSA:
                return fitted
            scale -= 1


def _divide(dividend: Decimal, divisor: Decimal) -> Decimal:
    """dividend / divisor, rounded once into the fixed-point domain."""
    a, b = _coefficient(dividend), _coefficient(divisor)
    a_scale, b_scale = -_exponent(dividend), -_exponent(divisor)
    den = b * 10**a_scale
    for scale in range(MAX_SCALE, -1, -1):
        q, r = divmod(a * 10 ** (b_scale + scale), den)
        if 2 * r > den or (2 * r == den and q % 2):
            q += 1
        if q <= MAX_MANTISSA:
            break
    else:
        raise FixedPointOverflow(f"{dividend} / {divisor} exceeds the 96-bit mantissa")
    if r == 0:
        while scale > max(a_scale - b_scale, 0) and q % 10 == 0:
            q //= 10
            scale -= 1
    sign = 1 if q and dividend.is_signed() != divisor.is_signed() else 0
    return Decimal((sign, tuple(int(d) for d in str(q)), -scale))


@final
@dataclass(frozen=True, slots=True, order=True)
class FixedDecimal:
    """Signed fixed-point decimal. Immutable; every operation returns a new value."""

    value: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.value, Decimal) or not _is_representable(self.value):
            raise TypeError(
                f"FixedDecimal requires a Decimal with scale 0..{MAX_SCALE} "
                f"and a 96-bit mantissa, got {self.value!r}"
            )

    # --- Construction ---

    @staticmethod
    def parse(raw: Decimal | int | str) -> Ok[FixedDecimal] | Err[str]:
        """Parse and fit raw into the fixed-point domain."""
        if isinstance(raw, bool) or not isinstance(raw, (Decimal, int, str)):
            return Err(f"FixedDecimal requires Decimal, int or str, got {type(raw).__name__}")
        try:
            value = raw if isinstance(raw, Decimal) else Decimal(raw)
        except InvalidOperation:
            return Err(f"FixedDecimal: cannot parse {raw!r}")
        try:
            return Ok(FixedDecimal(value=_fit(value)))
        except FixedPointOverflow as exc:
            return Err(f"FixedDecimal: {exc}")

    @staticmethod
    def from_int(n: int) -> FixedDecimal:
        """Exact conversion of an integer. Raises FixedPointOverflow beyond 96 bits."""
        return FixedDecimal(value=_fit(Decimal(n)))

    @staticmethod
    def from_float(x: float) -> Ok[FixedDecimal] | Err[str]:
        """Convert a float via its shortest repr, an int exactly. NaN, inf and huge values are Err."""
        if isinstance(x, bool) or not isinstance(x, (float, int)):
            return Err(f"FixedDecimal.from_float requires float, got {type(x).__name__}")
        value = Decimal(x) if isinstance(x, int) else Decimal(repr(x))
        if not value.is_finite():
            return Err(f"FixedDecimal.from_float: non-finite value {x!r}")
        try:
            return Ok(FixedDecimal(value=_fit(value)))
        except FixedPointOverflow as exc:
            return Err(f"FixedDecimal.from_float: {exc}")

    # --- Inspection ---

    @property
    def scale(self) -> int:
        return -_exponent(self.value)

    @property
    def mantissa(self) -> int:
        """Unsigned 96-bit mantissa."""
        return _coefficient(self.value)

    def is_zero(self) -> bool:
        return self.value == 0

    # --- Arithmetic (results fitted; overflow raises FixedPointOverflow) ---

    def __add__(self, other: FixedDecimal) -> FixedDecimal:
        with localcontext(FIXED_POINT_CONTEXT):
            return FixedDecimal(value=_fit(self.value + other.value))

    def __sub__(self, other: FixedDecimal) -> FixedDecimal:
        with localcontext(FIXED_POINT_CONTEXT):
            return FixedDecimal(value=_fit(self.value - other.value))

    def __mul__(self, other: FixedDecimal) -> FixedDecimal:
        with localcontext(FIXED_POINT_CONTEXT):
            return FixedDecimal(value=_fit(self.value * other.value))

    def __truediv__(self, other: FixedDecimal) -> FixedDecimal:
        """Divide. Raises ZeroDivisionError for a zero divisor; callers guard."""
        if other.is_zero():
            raise ZeroDivisionError("FixedDecimal division by zero")
        return FixedDecimal(value=_divide(self.value, other.value))

    def __neg__(self) -> FixedDecimal:
        return FixedDecimal(value=self.value.copy_negate())

    def reciprocal(self) -> FixedDecimal:
        """x^-1. Raises ZeroDivisionError for zero."""
        return ONE / self

    def floor(self) -> FixedDecimal:
        """Largest integer <= self."""
        with localcontext(FIXED_POINT_CONTEXT):
            return FixedDecimal(value=_fit(self.value.to_integral_value(rounding=ROUND_FLOOR)))

    def min(self, other: FixedDecimal) -> FixedDecimal:
        return self if self <= other else other

    def max(self, other: FixedDecimal) -> FixedDecimal:
        return self if self >= other else other

    def to_u64(self) -> Ok[int] | Err[str]:
        """Truncate toward zero into [0, 2^64). Err when out of range."""
        n = int(self.value)
        if not 0 <= n <= U64_MAX:
            return Err(f"FixedDecimal {self.value} does not fit u64")
        return Ok(n)

    # --- Wire form ---

    def serialize(self) -> bytes:
        """Fixed 16-byte representation: flags, lo, mid, hi."""
        mantissa = self.mantissa
        flags = (self.scale << _SCALE_SHIFT) | (_SIGN_MASK if self.value.is_signed() else 0)
        return _LAYOUT.pack(flags, mantissa & _WORD, (mantissa >> 32) & _WORD, mantissa >> 64)

    @staticmethod
    def deserialize(raw: bytes) -> Ok[FixedDecimal] | Err[str]:
        """Inverse of serialize. Unknown flag bits and scale > 28 are Err."""
        if len(raw) != SERIALIZED_LEN:
            return Err(f"FixedDecimal wire form is {SERIALIZED_LEN} bytes, got {len(raw)}")
        flags, lo, mid, hi = _LAYOUT.unpack(raw)
        if flags & ~(_SIGN_MASK | _SCALE_MASK):
            return Err(f"FixedDecimal: unknown flag bits 0x{flags:08x}")
        scale = (flags & _SCALE_MASK) >> _SCALE_SHIFT
        if scale > MAX_SCALE:
            return Err(f"FixedDecimal: scale {scale} exceeds {MAX_SCALE}")
        mantissa = lo | (mid << 32) | (hi << 64)
        sign = 1 if flags & _SIGN_MASK else 0
        digits = tuple(int(d) for d in str(mantissa))
        return Ok(FixedDecimal(value=Decimal((sign, digits, -scale))))

    def __str__(self) -> str:
        return str(self.value)


ZERO = FixedDecimal(value=Decimal(0))
ONE = FixedDecimal(value=Decimal(1))
