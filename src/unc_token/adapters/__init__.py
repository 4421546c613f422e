"""
Serialization adapters for UncToken.

Each adapter is built only on the raw accessors UncToken.as_yoctounc() and
UncToken.from_yoctounc(); none of them reaches into the value type.

  - text:   base-10 digit string (and its JSON string literal)
  - binary: fixed 16-byte little-endian integer (borsh u128 layout)
  - schema: pydantic v2 annotation describing the type as an opaque string

`schema` needs pydantic and is therefore not imported here.
"""

from .text import to_text, from_text, to_json, from_json
from .binary import to_bytes, from_bytes

__all__ = [
    "to_text",
    "from_text",
    "to_json",
    "from_json",
    "to_bytes",
    "from_bytes",
]
