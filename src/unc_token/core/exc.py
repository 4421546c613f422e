"""
Core exception types for unc_token.core.

These are dependency-free and may be imported by all core modules.

Parse failures are value-like: two errors compare equal when they are the
same variant carrying the same payload, so callers and tests can match on
them directly.
"""

__all__ = [
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


class AmountDomainError(Exception):
    """Raised when inputs violate the unsigned 128-bit domain or basic preconditions."""
    pass


class AmountOverflowError(AmountDomainError, OverflowError):
    """Raised when a scaled constructor would leave the 128-bit range."""
    pass


# ----------------------------
# Decimal number parsing
# ----------------------------

class DecimalNumberParsingError(ValueError):
    """Base class for failures of the decimal-number parser.

    Attributes
    ----------
    raw : str
        The offending substring (whole fragment, whole run or fractional run).
    """

    description = "decimal number parsing error"

    def __init__(self, raw: str) -> None:
        super().__init__(raw)
        self.raw = raw

    def __str__(self) -> str:
        return f"{self.description}: {self.raw}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.raw!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DecimalNumberParsingError):
            return NotImplemented
        return type(self) is type(other) and self.raw == other.raw

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.raw))


class InvalidNumber(DecimalNumberParsingError):
    """Malformed numeric text: sign, stray characters, empty runs or several dots."""
    description = "invalid number"


class LongWhole(DecimalNumberParsingError):
    """Whole part would overflow the 128-bit count once scaled."""
    description = "too long whole part"


class LongFractional(DecimalNumberParsingError):
    """Fractional part has more digits than the scale supports."""
    description = "too long fractional part"


# ----------------------------
# Token amount parsing
# ----------------------------

class UncTokenError(ValueError):
    """Base class for failures of the token-amount parser."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UncTokenError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.args))


class InvalidTokensAmount(UncTokenError):
    """The numeric fragment was rejected by the decimal parser.

    Attributes
    ----------
    cause : DecimalNumberParsingError
        The wrapped parser failure.
    """

    def __init__(self, cause: DecimalNumberParsingError) -> None:
        super().__init__(cause)
        self.cause = cause

    def __str__(self) -> str:
        return f"invalid tokens amount: {self.cause}"

    def __repr__(self) -> str:
        return f"InvalidTokensAmount({self.cause!r})"


class InvalidTokenUnit(UncTokenError):
    """The unit suffix is missing or not recognised.

    Attributes
    ----------
    raw : str
        The original, untrimmed input text.
    """

    def __init__(self, raw: str) -> None:
        super().__init__(raw)
        self.raw = raw

    def __str__(self) -> str:
        return f"invalid token unit: {self.raw}"

    def __repr__(self) -> str:
        return f"InvalidTokenUnit({self.raw!r})"
