from __future__ import annotations

import structlog

from ..utils.checksum import ActisenseChecksum
from .errors import ChecksumError, LengthMismatchError, TruncatedFrameError
from .models import DecodedFrame, FrameEnvelope
from .registry import PGNRegistry, default_registry

logger = structlog.get_logger(__name__)

HEADER_SIZE = 15
# checksum byte + DLE ETX
TRAILER_SIZE = 3
MIN_FRAME_LENGTH = HEADER_SIZE + 1 + TRAILER_SIZE

_PACKET_LENGTH = 3
_PRIORITY = 4
_PGN = slice(5, 8)
_DESTINATION = 8
_SOURCE = 9
_TIMESTAMP = slice(10, 14)
_DATA_LENGTH = 14
# command byte through checksum byte
_CHECKSUM_SPAN_START = 2


class FrameParser:
    def __init__(self, registry: PGNRegistry | None = None, verify_checksum: bool = False) -> None:
        self.registry = registry if registry is not None else default_registry()
        self.verify_checksum = verify_checksum

    def parse_envelope(self, frame: bytes) -> FrameEnvelope:
        logger.debug("parsing_frame", frame_length=len(frame))

        if len(frame) < MIN_FRAME_LENGTH:
            raise TruncatedFrameError(len(frame), MIN_FRAME_LENGTH)

        if self.verify_checksum:
            remainder = ActisenseChecksum.remainder(frame[_CHECKSUM_SPAN_START:len(frame) - TRAILER_SIZE + 1])
            if remainder != 0:
                raise ChecksumError(remainder)

        payload = bytes(frame[HEADER_SIZE:len(frame) - TRAILER_SIZE])
        data_length = frame[_DATA_LENGTH]
        if data_length != len(payload):
            raise LengthMismatchError(data_length, len(payload))

        envelope = FrameEnvelope(
            packet_length=frame[_PACKET_LENGTH],
            priority=frame[_PRIORITY],
            pgn=int.from_bytes(frame[_PGN], "little"),
            destination=frame[_DESTINATION],
            source=frame[_SOURCE],
            timestamp_ms=int.from_bytes(frame[_TIMESTAMP], "little"),
            data_length=data_length,
            payload=payload,
        )
        logger.debug(
            "envelope_decoded",
            pgn=envelope.pgn,
            source=envelope.source,
            destination=envelope.destination,
            data_length=envelope.data_length,
        )
        return envelope

    def parse(self, frame: bytes) -> DecodedFrame:
        envelope = self.parse_envelope(frame)
        record = self.registry.dispatch(envelope.pgn, envelope.payload)
        return DecodedFrame(envelope=envelope, record=record)
