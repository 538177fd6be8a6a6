from __future__ import annotations

from .errors import OutOfRangeError
from .fields import FieldSpec


def extract_raw(payload: bytes, byte_offset: int, bit_width: int, bit_offset: int = 0) -> int:
    """
    Read an unsigned little-endian bitfield starting at ``byte_offset``.

    Sub-byte fields read a single byte and keep only the targeted bits, so
    sibling bits sharing that byte never leak into the result.
    """
    if bit_width < 1:
        raise ValueError(f"bit_width must be >= 1, got {bit_width}")
    if not 0 <= bit_offset <= 7:
        raise ValueError(f"bit_offset must be in 0..7, got {bit_offset}")
    if byte_offset < 0:
        raise OutOfRangeError(byte_offset, bit_width, len(payload))

    byte_count = (bit_offset + bit_width + 7) // 8
    if byte_offset + byte_count > len(payload):
        raise OutOfRangeError(byte_offset, bit_width, len(payload))

    raw = int.from_bytes(payload[byte_offset:byte_offset + byte_count], "little")
    return (raw >> bit_offset) & ((1 << bit_width) - 1)


def to_signed(raw: int, bit_width: int) -> int:
    if raw & (1 << (bit_width - 1)):
        return raw - (1 << bit_width)
    return raw


def extract_field(
    payload: bytes,
    byte_offset: int,
    bit_width: int,
    resolution: float,
    *,
    bit_offset: int = 0,
    signed: bool = False,
) -> float:
    """Extract a field and scale it to its physical value."""
    raw = extract_raw(payload, byte_offset, bit_width, bit_offset)
    if signed:
        raw = to_signed(raw, bit_width)
    return float(raw) * resolution


def is_unavailable(raw: int, bit_width: int, signed: bool = False) -> bool:
    """True when ``raw`` (unsigned, as read off the wire) is the "not available" pattern."""
    if signed:
        return raw == (1 << (bit_width - 1)) - 1
    return raw == (1 << bit_width) - 1


def decode_field(payload: bytes, spec: FieldSpec) -> int | float | None:
    """
    Decode one field described by ``spec``.

    Returns None for the "not available" sentinel, the raw integer for
    unscaled fields (identifiers, enumerated codes) and the scaled float
    otherwise.
    """
    raw = extract_raw(payload, spec.byte_offset, spec.bit_width, spec.bit_offset)
    if spec.has_sentinel and is_unavailable(raw, spec.bit_width, spec.signed):
        return None

    value = to_signed(raw, spec.bit_width) if spec.signed else raw
    if spec.resolution == 1:
        return value
    return float(value) * spec.resolution
