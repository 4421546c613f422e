"""Binary adapter: UncToken <-> 16-byte little-endian unsigned integer (borsh u128 layout)."""

from __future__ import annotations

from ..core.amounts import UncToken
from ..core.constants import U128_BYTES
from ..core.exc import AmountDomainError


def to_bytes(token: UncToken) -> bytes:
    if not isinstance(token, UncToken):
        raise AmountDomainError("to_bytes(): expected UncToken")
    return token.as_yoctounc().to_bytes(U128_BYTES, "little")


def from_bytes(data: bytes) -> UncToken:
    """Decode exactly 16 bytes; shorter or longer input is rejected."""
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise AmountDomainError(f"from_bytes(): expected bytes, got {type(data).__name__}")
    raw = bytes(data)
    if len(raw) != U128_BYTES:
        raise AmountDomainError(f"from_bytes(): expected {U128_BYTES} bytes, got {len(raw)}")
    return UncToken.from_yoctounc(int.from_bytes(raw, "little"))


__all__ = [
    "to_bytes",
    "from_bytes",
]
