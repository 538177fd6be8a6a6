"""
n2k_decoder
===========

Decoding of NMEA 2000 PGN messages carried in Actisense serial frames into
typed, physically scaled records.
"""

from .core import (
    DecodedFrame,
    DecodeError,
    FrameEnvelope,
    FrameParser,
    PGNDecoder,
    PGNRegistry,
    default_registry,
)
from .service import DecoderService

__all__ = [
    "DecodedFrame",
    "DecodeError",
    "FrameEnvelope",
    "FrameParser",
    "PGNDecoder",
    "PGNRegistry",
    "default_registry",
    "DecoderService",
]
