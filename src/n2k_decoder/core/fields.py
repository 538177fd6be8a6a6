from __future__ import annotations

import math
from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field

PGN_VESSEL_HEADING = 127250
PGN_WIND_DATA = 130306


class FieldSpec(BaseModel):
    """Static layout of one field inside a PGN payload.

    ``bit_offset`` is the position of the field's least significant bit
    within the byte at ``byte_offset``. Multi-byte fields are little-endian.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    byte_offset: int = Field(ge=0)
    bit_width: int = Field(ge=1, le=64)
    bit_offset: int = Field(default=0, ge=0, le=7)
    resolution: float = 1.0
    min_value: float = 0.0
    max_value: float
    signed: bool = False
    unit: str = ""
    has_sentinel: bool = True

    @property
    def byte_length(self) -> int:
        return (self.bit_offset + self.bit_width + 7) // 8

    @property
    def end(self) -> int:
        return self.byte_offset + self.byte_length

    @property
    def sentinel(self) -> int | None:
        """Raw pattern meaning "not available", or None if the field has none."""
        if not self.has_sentinel:
            return None
        if self.signed:
            return (1 << (self.bit_width - 1)) - 1
        return (1 << self.bit_width) - 1

    def contains(self, value: float) -> bool:
        return self.min_value <= value <= self.max_value


def _table(*specs: FieldSpec) -> Mapping[str, FieldSpec]:
    return MappingProxyType({spec.name: spec for spec in specs})


# Entries are in wire order.
WIND_DATA_FIELDS = _table(
    FieldSpec(name="sequence_id", byte_offset=0, bit_width=8, max_value=252),
    FieldSpec(
        name="wind_speed",
        byte_offset=1,
        bit_width=16,
        resolution=0.01,
        max_value=655.32,
        unit="m/s",
    ),
    FieldSpec(
        name="wind_direction",
        byte_offset=3,
        bit_width=16,
        resolution=0.0001,
        max_value=2 * math.pi,
        unit="rad",
    ),
    FieldSpec(name="wind_reference", byte_offset=5, bit_width=3, max_value=4),
    FieldSpec(
        name="reserved",
        byte_offset=5,
        bit_offset=3,
        bit_width=5,
        max_value=31,
        has_sentinel=False,
    ),
)

VESSEL_HEADING_FIELDS = _table(
    FieldSpec(name="sequence_id", byte_offset=0, bit_width=8, max_value=252),
    FieldSpec(
        name="heading",
        byte_offset=1,
        bit_width=16,
        resolution=0.0001,
        max_value=2 * math.pi,
        unit="rad",
    ),
    FieldSpec(
        name="deviation",
        byte_offset=3,
        bit_width=16,
        resolution=0.0001,
        min_value=-math.pi,
        max_value=math.pi,
        signed=True,
        unit="rad",
    ),
    FieldSpec(
        name="variation",
        byte_offset=5,
        bit_width=16,
        resolution=0.0001,
        min_value=-math.pi,
        max_value=math.pi,
        signed=True,
        unit="rad",
    ),
    FieldSpec(name="heading_reference", byte_offset=7, bit_width=2, max_value=1),
    FieldSpec(
        name="reserved",
        byte_offset=7,
        bit_offset=2,
        bit_width=6,
        max_value=63,
        has_sentinel=False,
    ),
)

FIELD_TABLES: Mapping[int, Mapping[str, FieldSpec]] = MappingProxyType(
    {
        PGN_WIND_DATA: WIND_DATA_FIELDS,
        PGN_VESSEL_HEADING: VESSEL_HEADING_FIELDS,
    }
)
