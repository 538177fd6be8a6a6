from .errors import (
    ChecksumError,
    DecodeError,
    LengthMismatchError,
    MalformedPayloadError,
    OutOfRangeError,
    TruncatedFrameError,
    UnknownPGNError,
)
from .field_decoder import decode_field, extract_field, extract_raw, is_unavailable
from .fields import FIELD_TABLES, FieldSpec
from .models import (
    DecodedFrame,
    FrameEnvelope,
    HeadingReference,
    PGNRecord,
    VesselHeading,
    WindData,
    WindReference,
)
from .parser import MIN_FRAME_LENGTH, TRAILER_SIZE, FrameParser
from .pgns import PGNDecoder, VesselHeadingDecoder, WindDataDecoder
from .registry import PGNRegistry, default_registry

__all__ = [
    "ChecksumError",
    "DecodeError",
    "LengthMismatchError",
    "MalformedPayloadError",
    "OutOfRangeError",
    "TruncatedFrameError",
    "UnknownPGNError",
    "decode_field",
    "extract_field",
    "extract_raw",
    "is_unavailable",
    "FIELD_TABLES",
    "FieldSpec",
    "DecodedFrame",
    "FrameEnvelope",
    "HeadingReference",
    "PGNRecord",
    "VesselHeading",
    "WindData",
    "WindReference",
    "MIN_FRAME_LENGTH",
    "TRAILER_SIZE",
    "FrameParser",
    "PGNDecoder",
    "VesselHeadingDecoder",
    "WindDataDecoder",
    "PGNRegistry",
    "default_registry",
]
