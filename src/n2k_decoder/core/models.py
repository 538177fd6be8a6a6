# src/n2k_decoder/core/models.py
from __future__ import annotations

from enum import IntEnum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, SerializeAsAny

from .fields import PGN_VESSEL_HEADING, PGN_WIND_DATA


class WindReference(IntEnum):
    TRUE_NORTH = 0
    MAGNETIC_NORTH = 1
    APPARENT = 2
    TRUE_BOAT = 3
    TRUE_WATER = 4


class HeadingReference(IntEnum):
    TRUE = 0
    MAGNETIC = 1


class FrameEnvelope(BaseModel):
    model_config = ConfigDict(frozen=True)

    packet_length: int = Field(ge=0, le=255)
    priority: int = Field(ge=0, le=255)
    pgn: int = Field(ge=0, le=0xFFFFFF)     # 24 bits
    destination: int = Field(ge=0, le=255)
    source: int = Field(ge=0, le=255)
    timestamp_ms: int = Field(ge=0, le=0xFFFFFFFF)
    data_length: int = Field(ge=0, le=255)
    payload: bytes

    @property
    def is_broadcast(self) -> bool:
        return self.destination == 0xFF


class PGNRecord(BaseModel):
    """Base for decoded PGN payloads. ``None`` members were sent as "not available"."""

    model_config = ConfigDict(frozen=True)

    pgn: ClassVar[int]


class WindData(PGNRecord):
    pgn: ClassVar[int] = PGN_WIND_DATA

    sequence_id: int | None
    wind_speed: float | None
    wind_direction: float | None
    wind_reference: int | None = Field(ge=0, le=7)
    reserved: int

    @property
    def reference(self) -> WindReference | None:
        if self.wind_reference is None:
            return None
        try:
            return WindReference(self.wind_reference)
        except ValueError:
            return None


class VesselHeading(PGNRecord):
    pgn: ClassVar[int] = PGN_VESSEL_HEADING

    sequence_id: int | None
    heading: float | None
    deviation: float | None
    variation: float | None
    heading_reference: int | None = Field(ge=0, le=3)
    reserved: int

    @property
    def reference(self) -> HeadingReference | None:
        if self.heading_reference is None:
            return None
        try:
            return HeadingReference(self.heading_reference)
        except ValueError:
            return None


class DecodedFrame(BaseModel):
    model_config = ConfigDict(frozen=True)

    envelope: FrameEnvelope
    record: SerializeAsAny[PGNRecord]

    @property
    def pgn(self) -> int:
        return self.envelope.pgn
