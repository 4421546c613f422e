"""
Display formatting for UncToken (integer domain, rounds up).

Amounts are rendered with the fixed label "UNC" in one of four tiers:

  1. exactly zero              -> "0 UNC"
  2. below 0.001 UNC           -> "<0.001 UNC"
  3. 0.001 UNC .. 0.999 UNC    -> three fractional digits, e.g. "0.200 UNC"
  4. above 0.999 UNC           -> two fractional digits, e.g. "1.24 UNC"

Tiers 3 and 4 use ceiling division so a displayed amount is never smaller than
the amount actually held. No Decimal or float is involved.
"""

from __future__ import annotations

from .amounts import UncToken
from .constants import DISPLAY_UNIT, ONE_MILLIUNC, U128_MAX
from .exc import AmountDomainError

# Debug printing control (formatting layer)
DEBUG_FMT = False

def _dbg(msg: str) -> None:
    if DEBUG_FMT:
        print(msg)


#: Tier 3 upper bound (inclusive), in yocto-UNC.
TIER3_MAX: int = 999 * ONE_MILLIUNC
#: Tier 4 resolution: one hundredth of a UNC, in yocto-UNC.
HUNDREDTH_UNC: int = 10 * ONE_MILLIUNC


def _ceil_div_saturating(a: int, b: int) -> int:
    """ceil(a / b) as (a + b - 1) // b, with the addend clamped at U128_MAX."""
    if a < 0 or b <= 0:
        raise AmountDomainError("_ceil_div_saturating expects a>=0 and b>0")
    return min(a + (b - 1), U128_MAX) // b


def format_tier(token: UncToken) -> int:
    """Return the display tier (1-4) selected for ``token``."""
    if not isinstance(token, UncToken):
        raise AmountDomainError("format_tier(): expected UncToken")
    yocto = token.as_yoctounc()
    if yocto == 0:
        return 1
    if yocto < ONE_MILLIUNC:
        return 2
    if yocto <= TIER3_MAX:
        return 3
    return 4


def format_amount(token: UncToken) -> str:
    """Render ``token`` as a rounded-up decimal string with the UNC label."""
    tier = format_tier(token)
    yocto = token.as_yoctounc()
    _dbg(f"format_amount: yocto={yocto} tier={tier}")
    if tier == 1:
        return f"0 {DISPLAY_UNIT}"
    if tier == 2:
        return f"<0.001 {DISPLAY_UNIT}"
    if tier == 3:
        milli = _ceil_div_saturating(yocto, ONE_MILLIUNC)
        return f"0.{milli:03d} {DISPLAY_UNIT}"
    hundredths = _ceil_div_saturating(yocto, HUNDREDTH_UNC)
    return f"{hundredths // 100}.{hundredths % 100:02d} {DISPLAY_UNIT}"


__all__ = [
    "TIER3_MAX",
    "HUNDREDTH_UNC",
    "format_tier",
    "format_amount",
]
