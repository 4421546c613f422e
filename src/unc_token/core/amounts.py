"""
Amount primitive: UncToken (integer yocto-UNC in an unsigned 128-bit domain).

- UncToken stores a single integer count of yocto-UNC; 1 UNC = 10^24 yocto-UNC.
- Non-negative, bounded domain: 0 <= count <= 2^128 - 1; violations are rejected at input.
- Immutable: every constructor, conversion and arithmetic operation returns a new value.
- Arithmetic comes in two explicit flavours: checked_* returns None when the result
  leaves the domain, saturating_* clamps to [0, U128_MAX]. There is no operator sugar.
- Sub-unit precision is only ever discarded by the parser; arithmetic is exact or absent.

Scaled constructors exist in two forms: from_milliunc/from_unc raise AmountOverflowError
when the product does not fit, checked_from_milliunc/checked_from_unc return None.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .constants import ONE_MILLIUNC, ONE_UNC, U128_MAX
from .exc import AmountDomainError, AmountOverflowError
from .parsing import parse_token_yocto

# Debug printing control
DEBUG_AMOUNTS = False

def _dbg(msg: str) -> None:
    if DEBUG_AMOUNTS:
        print(msg)


# ----------------------------
# Domain guards (centralised)
# ----------------------------

def _is_plain_int(x: object) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)


def _check_scalar(k: int, op: str) -> int:
    if not _is_plain_int(k):
        raise AmountDomainError(f"{op}: scalar must be int, got {type(k).__name__}")
    if k < 0 or k > U128_MAX:
        raise AmountDomainError(f"{op}: scalar out of u128 range: k={k}")
    return k


def _check_operand(other: object, op: str) -> "UncToken":
    if not isinstance(other, UncToken):
        raise AmountDomainError(f"{op}: UncToken arithmetic requires UncToken operands")
    return other


def _scaled(n: int, scale: int, op: str) -> Optional[int]:
    """Multiply a denomination count by its scale; None when the product overflows."""
    _check_scalar(n, op)
    product = n * scale
    if product > U128_MAX:
        _dbg(f"{op}: overflow n={n} scale={scale}")
        return None
    return product


# ----------------------------
# UncToken (integer yocto-UNC)
# ----------------------------

@dataclass(frozen=True, order=True)
class UncToken:
    """UNC amount in integer yocto-UNC (unsigned 128-bit domain)."""
    yocto: int = 0

    def __post_init__(self):
        if not _is_plain_int(self.yocto):
            raise AmountDomainError(
                f"UncToken requires an int count, got {type(self.yocto).__name__}"
            )
        if self.yocto < 0:
            raise AmountDomainError("UncToken must be >= 0 yocto-UNC")
        if self.yocto > U128_MAX:
            raise AmountOverflowError(f"UncToken exceeds u128 range: {self.yocto}")

    # ------------- constructors -------------

    @staticmethod
    def zero() -> "UncToken":
        return UncToken(0)

    @classmethod
    def from_yoctounc(cls, yocto: int) -> "UncToken":
        """Wrap a raw yocto-UNC count (identity)."""
        return cls(yocto)

    @classmethod
    def from_milliunc(cls, milli: int) -> "UncToken":
        """Convert a milli-UNC count; raises AmountOverflowError if it does not fit.

        >>> UncToken.from_milliunc(1) == UncToken.from_yoctounc(10 ** 21)
        True
        """
        value = _scaled(milli, ONE_MILLIUNC, "from_milliunc")
        if value is None:
            raise AmountOverflowError(f"from_milliunc: {milli} milli-UNC exceeds u128 range")
        return cls(value)

    @classmethod
    def from_unc(cls, unc: int) -> "UncToken":
        """Convert a whole-UNC count; raises AmountOverflowError if it does not fit.

        >>> UncToken.from_unc(1) == UncToken.from_yoctounc(10 ** 24)
        True
        """
        value = _scaled(unc, ONE_UNC, "from_unc")
        if value is None:
            raise AmountOverflowError(f"from_unc: {unc} UNC exceeds u128 range")
        return cls(value)

    @classmethod
    def checked_from_milliunc(cls, milli: int) -> Optional["UncToken"]:
        value = _scaled(milli, ONE_MILLIUNC, "checked_from_milliunc")
        return None if value is None else cls(value)

    @classmethod
    def checked_from_unc(cls, unc: int) -> Optional["UncToken"]:
        value = _scaled(unc, ONE_UNC, "checked_from_unc")
        return None if value is None else cls(value)

    @classmethod
    def from_str(cls, text: str) -> "UncToken":
        """Parse human input such as ``"1.5 UNC"`` or ``"123456 yn"``.

        Raises InvalidTokenUnit for a missing or unknown suffix and
        InvalidTokensAmount (wrapping the decimal parser error) otherwise.
        """
        return cls(parse_token_yocto(text))

    # ------------- conversions -------------

    def as_yoctounc(self) -> int:
        return self.yocto

    def as_milliunc(self) -> int:
        """Whole milli-UNC, truncated."""
        return self.yocto // ONE_MILLIUNC

    def as_unc(self) -> int:
        """Whole UNC, truncated."""
        return self.yocto // ONE_UNC

    # ------------- predicates -------------

    def is_zero(self) -> bool:
        return self.yocto == 0

    # ------------- checked arithmetic -------------

    def checked_add(self, other: "UncToken") -> Optional["UncToken"]:
        """self + other, or None on overflow."""
        total = self.yocto + _check_operand(other, "checked_add").yocto
        if total > U128_MAX:
            return None
        return UncToken(total)

    def checked_sub(self, other: "UncToken") -> Optional["UncToken"]:
        """self - other, or None on underflow."""
        rhs = _check_operand(other, "checked_sub").yocto
        if rhs > self.yocto:
            return None
        return UncToken(self.yocto - rhs)

    def checked_mul(self, k: int) -> Optional["UncToken"]:
        """self * k for a plain scalar, or None on overflow."""
        product = self.yocto * _check_scalar(k, "checked_mul")
        if product > U128_MAX:
            return None
        return UncToken(product)

    def checked_div(self, k: int) -> Optional["UncToken"]:
        """self // k, or None when k == 0."""
        if _check_scalar(k, "checked_div") == 0:
            return None
        return UncToken(self.yocto // k)

    # ------------- saturating arithmetic -------------

    def saturating_add(self, other: "UncToken") -> "UncToken":
        total = self.yocto + _check_operand(other, "saturating_add").yocto
        return UncToken(min(total, U128_MAX))

    def saturating_sub(self, other: "UncToken") -> "UncToken":
        rhs = _check_operand(other, "saturating_sub").yocto
        return UncToken(max(self.yocto - rhs, 0))

    def saturating_mul(self, k: int) -> "UncToken":
        product = self.yocto * _check_scalar(k, "saturating_mul")
        return UncToken(min(product, U128_MAX))

    def saturating_div(self, k: int) -> "UncToken":
        """self // k; dividing by zero yields zero (unlike checked_div, which yields None)."""
        if _check_scalar(k, "saturating_div") == 0:
            return UncToken(0)
        return UncToken(self.yocto // k)

    # ------------- display -------------

    def __str__(self) -> str:
        from .fmt import format_amount
        return format_amount(self)


def parse_token_amount(text: str) -> UncToken:
    """Text -> UncToken; see UncToken.from_str."""
    return UncToken.from_str(text)


__all__ = [
    "UncToken",
    "parse_token_amount",
]
