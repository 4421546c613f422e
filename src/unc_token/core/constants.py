"""
UNC Token Core Constants (integer domain)
=========================================

Scale factors relating the named denominations to the smallest unit
(yocto-UNC) and the bounds of the 128-bit unsigned count. None of these
are configurable at runtime.
"""

# NOTE: Every scale here is a power of ten; the parser derives the number of
# permitted fractional digits from the exponent.

# ---------------------------------------------------------------------------
# 128-bit unsigned domain
# ---------------------------------------------------------------------------

#: Width of the stored count in bits.
U128_BITS: int = 128
#: Width of the stored count in bytes (binary adapter layout).
U128_BYTES: int = U128_BITS // 8
#: Largest representable count (2^128 - 1).
U128_MAX: int = (1 << U128_BITS) - 1
#: Number of decimal digits in U128_MAX (39).
U128_MAX_DIGITS: int = len(str(U128_MAX))


# ---------------------------------------------------------------------------
# Denomination scales (in yocto-UNC)
# ---------------------------------------------------------------------------

#: One UNC is 10^24 yocto-UNC.
ONE_UNC: int = 10 ** 24
#: One milli-UNC is 10^21 yocto-UNC.
ONE_MILLIUNC: int = 10 ** 21
#: The smallest unit.
ONE_YOCTOUNC: int = 1


# ---------------------------------------------------------------------------
# Unit suffixes (matched after ASCII upper-casing)
# ---------------------------------------------------------------------------

YOCTO_UNIT_ALIASES: frozenset = frozenset({"YN", "YUNC", "YOCTOUNC"})
UNC_UNIT_ALIASES: frozenset = frozenset({"UNC", "N"})

#: Suffix -> scale table used by the unit resolver.
UNIT_SCALES = {
    **{alias: ONE_YOCTOUNC for alias in YOCTO_UNIT_ALIASES},
    **{alias: ONE_UNC for alias in UNC_UNIT_ALIASES},
}

#: Label printed by the formatter.
DISPLAY_UNIT: str = "UNC"


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

__all__ = [
    "U128_BITS",
    "U128_BYTES",
    "U128_MAX",
    "U128_MAX_DIGITS",
    "ONE_UNC",
    "ONE_MILLIUNC",
    "ONE_YOCTOUNC",
    "YOCTO_UNIT_ALIASES",
    "UNC_UNIT_ALIASES",
    "UNIT_SCALES",
    "DISPLAY_UNIT",
]
