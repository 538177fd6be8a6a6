from __future__ import annotations


class DecodeError(Exception):
    """Base class for every failure raised while decoding a frame."""


class TruncatedFrameError(DecodeError):
    def __init__(self, length: int, required: int) -> None:
        self.length = length
        self.required = required
        super().__init__(f"Frame too short: {length} bytes, need at least {required}")


class LengthMismatchError(DecodeError):
    def __init__(self, declared: int, actual: int) -> None:
        self.declared = declared
        self.actual = actual
        super().__init__(f"Declared data length {declared} != payload length {actual}")


class ChecksumError(DecodeError):
    def __init__(self, remainder: int) -> None:
        self.remainder = remainder
        super().__init__(f"Frame checksum mismatch (sum mod 256 = {remainder})")


class UnknownPGNError(DecodeError):
    def __init__(self, pgn: int) -> None:
        self.pgn = pgn
        super().__init__(f"Unknown PGN: {pgn}")


class MalformedPayloadError(DecodeError):
    def __init__(self, pgn: int, length: int, required: int) -> None:
        self.pgn = pgn
        self.length = length
        self.required = required
        super().__init__(
            f"Payload for PGN {pgn} too short: {length} bytes, need {required}"
        )


class OutOfRangeError(DecodeError):
    """Raised when a field read would go past either end of the payload."""

    def __init__(self, byte_offset: int, bit_width: int, length: int) -> None:
        self.byte_offset = byte_offset
        self.bit_width = bit_width
        self.length = length
        super().__init__(
            f"Cannot read {bit_width} bits at byte {byte_offset} from a {length}-byte payload"
        )
