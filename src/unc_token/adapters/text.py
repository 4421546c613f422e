"""Base-10 text adapter: UncToken <-> "<yocto digits>" (and its JSON string form)."""

from __future__ import annotations

import json

from ..core.amounts import UncToken
from ..core.constants import U128_MAX, U128_MAX_DIGITS
from ..core.exc import AmountDomainError, AmountOverflowError


_DIGITS = frozenset("0123456789")


def to_text(token: UncToken) -> str:
    if not isinstance(token, UncToken):
        raise AmountDomainError("to_text(): expected UncToken")
    return str(token.as_yoctounc())


def from_text(s: str) -> UncToken:
    """Decode a plain digit string; signs, spaces and separators are rejected."""
    if not isinstance(s, str):
        raise AmountDomainError(f"from_text(): expected str, got {type(s).__name__}")
    if not s or not set(s) <= _DIGITS:
        raise AmountDomainError(f"from_text(): not a base-10 u128: {s!r}")
    significant = s.lstrip("0") or "0"
    if len(significant) > U128_MAX_DIGITS:
        raise AmountOverflowError(f"from_text(): value exceeds u128 range: {s}")
    value = int(significant)
    if value > U128_MAX:
        raise AmountOverflowError(f"from_text(): value exceeds u128 range: {s}")
    return UncToken.from_yoctounc(value)


def to_json(token: UncToken) -> str:
    """JSON encoding as a string literal, e.g. ``"\\"8\\""``; keeps full precision in JS clients."""
    return json.dumps(to_text(token))


def from_json(s: str) -> UncToken:
    try:
        decoded = json.loads(s)
    except json.JSONDecodeError as err:
        raise AmountDomainError(f"from_json(): invalid JSON: {err}") from err
    if not isinstance(decoded, str):
        raise AmountDomainError("from_json(): expected a JSON string")
    return from_text(decoded)


__all__ = [
    "to_text",
    "from_text",
    "to_json",
    "from_json",
]
