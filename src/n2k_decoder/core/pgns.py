from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Mapping

import structlog

from .errors import MalformedPayloadError
from .field_decoder import decode_field
from .fields import (
    PGN_VESSEL_HEADING,
    PGN_WIND_DATA,
    VESSEL_HEADING_FIELDS,
    WIND_DATA_FIELDS,
    FieldSpec,
)
from .models import PGNRecord, VesselHeading, WindData

logger = structlog.get_logger(__name__)


class PGNDecoder(ABC):
    """
    Decodes the payload of one PGN into its record type.

    Subclasses declare the PGN number, the record model and the field table;
    every field of the table becomes a keyword of the record.
    """

    pgn: ClassVar[int]
    name: ClassVar[str]
    record_type: ClassVar[type[PGNRecord]]

    @property
    @abstractmethod
    def fields(self) -> Mapping[str, FieldSpec]:
        """Field table in wire order; subclasses set it as a class attribute."""

    @property
    def min_length(self) -> int:
        return max(spec.end for spec in self.fields.values())

    def decode(self, payload: bytes) -> PGNRecord:
        if len(payload) < self.min_length:
            raise MalformedPayloadError(self.pgn, len(payload), self.min_length)

        values: dict[str, int | float | None] = {}
        for name, spec in self.fields.items():
            value = decode_field(payload, spec)
            if value is not None and not spec.contains(value):
                logger.warning(
                    "field_out_of_range",
                    pgn=self.pgn,
                    field=name,
                    value=value,
                    min=spec.min_value,
                    max=spec.max_value,
                )
            values[name] = value

        return self.record_type(**values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(pgn={self.pgn})"


class WindDataDecoder(PGNDecoder):
    pgn = PGN_WIND_DATA
    name = "Wind Data"
    record_type = WindData
    fields = WIND_DATA_FIELDS


class VesselHeadingDecoder(PGNDecoder):
    pgn = PGN_VESSEL_HEADING
    name = "Vessel Heading"
    record_type = VesselHeading
    fields = VESSEL_HEADING_FIELDS


BUILTIN_DECODERS: tuple[type[PGNDecoder], ...] = (WindDataDecoder, VesselHeadingDecoder)
