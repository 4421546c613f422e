"""
Text -> integer yocto-UNC: unit resolver and decimal-number parser.

The parser works purely in the integer domain. A fragment such as "11.123456"
is split on the dot into a whole run and a fractional run; each run is read as
an integer and scaled separately, so no rounding ever happens:

    result = int(whole) * scale + int(fraction) * (scale // 10^len(fraction))

The scale must be a power of ten; its exponent is the number of fractional
digits the denomination can carry (UNC: 24, yocto-UNC: 0).

Unit validation happens strictly before numeric validation: input with an
unknown suffix is reported as InvalidTokenUnit whatever its digits look like.
"""

from __future__ import annotations

from typing import Tuple

from .constants import U128_MAX, U128_MAX_DIGITS, UNIT_SCALES
from .exc import (
    AmountDomainError,
    DecimalNumberParsingError,
    InvalidNumber,
    InvalidTokensAmount,
    InvalidTokenUnit,
    LongFractional,
    LongWhole,
)

# Debug printing control (parsing layer)
DEBUG_PARSING = False

def _dbg(msg: str) -> None:
    if DEBUG_PARSING:
        print(msg)


_NUMERIC_CHARS = frozenset("0123456789.")


def scale_exponent(scale: int) -> int:
    """Return k for scale == 10^k; raise AmountDomainError for any other scale."""
    if not isinstance(scale, int) or isinstance(scale, bool) or scale <= 0:
        raise AmountDomainError(f"scale must be a positive int, got {scale!r}")
    digits = str(scale)
    if digits[0] != "1" or digits.count("0") != len(digits) - 1:
        raise AmountDomainError(f"scale must be a power of ten, got {scale}")
    return len(digits) - 1


# ----------------------------
# Decimal number parser
# ----------------------------

def parse_decimal_number(fragment: str, scale: int) -> int:
    """Parse an unsigned decimal fragment into a count of ``1/scale`` units.

    The fragment must already be trimmed. Raises InvalidNumber for malformed
    text, LongFractional when the fraction has more digits than the scale
    allows and LongWhole when the scaled value would not fit in 128 bits.
    """
    decimals = scale_exponent(scale)

    if not fragment or not set(fragment) <= _NUMERIC_CHARS or fragment.count(".") > 1:
        raise InvalidNumber(fragment)

    whole, dot, fraction = fragment.partition(".")
    if not whole or (dot and not fraction):
        raise InvalidNumber(fragment)

    if len(fraction) > decimals:
        _dbg(f"parse_decimal_number: fraction={fraction!r} exceeds {decimals} digits")
        raise LongFractional(fraction)

    # Bound the whole run before multiplying so absurd inputs stay cheap;
    # leading zeros never reach int().
    significant = whole.lstrip("0") or "0"
    if len(significant) > U128_MAX_DIGITS:
        raise LongWhole(whole)

    result = int(significant) * scale
    if fraction:
        result += int(fraction) * (scale // 10 ** len(fraction))
    _dbg(f"parse_decimal_number: whole={whole!r} fraction={fraction!r} scale={scale} -> {result}")

    if result > U128_MAX:
        raise LongWhole(whole)
    return result


# ----------------------------
# Unit resolver
# ----------------------------

def split_amount_and_unit(text: str) -> Tuple[str, str]:
    """Split trimmed input at its first ASCII letter into (numeric fragment, UPPERCASE suffix).

    Raises InvalidTokenUnit(text) when the input holds no ASCII letter.
    """
    trimmed = text.strip()
    for i, ch in enumerate(trimmed):
        if ch.isascii() and ch.isalpha():
            suffix = trimmed[i:]
            if suffix.isascii():
                suffix = suffix.upper()
            return trimmed[:i].strip(), suffix
    raise InvalidTokenUnit(text)


def resolve_unit(suffix: str, text: str) -> int:
    """Map an upper-cased unit suffix to its scale; ``text`` is echoed in the error."""
    try:
        return UNIT_SCALES[suffix]
    except KeyError:
        raise InvalidTokenUnit(text) from None


def parse_token_yocto(text: str) -> int:
    """Parse ``"<decimal> <unit>"`` into an integer yocto-UNC count."""
    numeric, suffix = split_amount_and_unit(text)
    scale = resolve_unit(suffix, text)
    _dbg(f"parse_token_yocto: numeric={numeric!r} unit={suffix!r} scale={scale}")
    try:
        return parse_decimal_number(numeric, scale)
    except DecimalNumberParsingError as err:
        raise InvalidTokensAmount(err) from err


__all__ = [
    "scale_exponent",
    "parse_decimal_number",
    "split_amount_and_unit",
    "resolve_unit",
    "parse_token_yocto",
]
