"""
Top-level API for unc_token (integer-domain).

An UncToken is an exact count of yocto-UNC (1 UNC = 10^24 yocto-UNC) held in
an unsigned 128-bit range:

  - UncToken: the value type with checked and saturating arithmetic
  - parse_token_amount: "1.5 UNC" / "123456 yn" -> UncToken
  - format_amount: UncToken -> "1.50 UNC" (tiered, rounded up)

Serialization adapters (text, binary, pydantic schema) live under
`unc_token.adapters` and are not imported here.
"""

from __future__ import annotations

from .core import (
    ONE_UNC,
    ONE_MILLIUNC,
    U128_MAX,
    UncToken,
    parse_token_amount,
    format_amount,
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

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # constants
    "ONE_UNC",
    "ONE_MILLIUNC",
    "U128_MAX",
    # value type and entry points
    "UncToken",
    "parse_token_amount",
    "format_amount",
    # errors
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
