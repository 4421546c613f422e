"""
UNC Token Core
==============

Unified exports for the integer-domain primitives: the UncToken value type,
its parser and its display formatter. Everything is exact integer arithmetic
on an unsigned 128-bit count of yocto-UNC; no Decimal or float is used.
"""

# NOTE:
#   Import order matters: parsing has no intra-package dependencies besides
#   constants/exc, amounts builds on parsing, fmt builds on amounts.

# Integer-domain constants
from .constants import (
    U128_BITS,
    U128_BYTES,
    U128_MAX,
    ONE_UNC,
    ONE_MILLIUNC,
    ONE_YOCTOUNC,
    YOCTO_UNIT_ALIASES,
    UNC_UNIT_ALIASES,
    DISPLAY_UNIT,
)

# Parser and unit resolver
from .parsing import (
    parse_decimal_number,
    split_amount_and_unit,
    resolve_unit,
    parse_token_yocto,
)

# Amount primitive
from .amounts import (
    UncToken,
    parse_token_amount,
)

# Display formatting
from .fmt import (
    format_amount,
    format_tier,
)

# Core exceptions
from .exc import (
    AmountDomainError,
    AmountOverflowError,
    DecimalNumberParsingError,
    InvalidNumber,
    LongWhole,
    LongFractional,
    UncTokenError,
    InvalidTokensAmount,
    InvalidTokenUnit,
)

__all__ = [
    # constants
    "U128_BITS",
    "U128_BYTES",
    "U128_MAX",
    "ONE_UNC",
    "ONE_MILLIUNC",
    "ONE_YOCTOUNC",
    "YOCTO_UNIT_ALIASES",
    "UNC_UNIT_ALIASES",
    "DISPLAY_UNIT",
    # parsing
    "parse_decimal_number",
    "split_amount_and_unit",
    "resolve_unit",
    "parse_token_yocto",
    # amounts
    "UncToken",
    "parse_token_amount",
    # fmt
    "format_amount",
    "format_tier",
    # exceptions
    "AmountDomainError",
    "AmountOverflowError",
    "DecimalNumberParsingError",
    "InvalidNumber",
    "LongWhole",
    "LongFractional",
    "UncTokenError",
    "InvalidTokensAmount",
    "InvalidTokenUnit",
]
