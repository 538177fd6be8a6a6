import pytest
import structlog

from n2k_decoder.config import DecoderConfig, LoggingConfig, MetricsConfig, Settings
from n2k_decoder.utils.checksum import ActisenseChecksum

# Wind data (PGN 130306) as captured from an Actisense NGT-1
SAMPLE_FRAME = bytes([
    16, 2, 147, 19, 2, 2, 253, 1, 255, 36, 108, 176, 2, 0, 8,
    64, 15, 0, 102, 108, 248, 255, 255,
    248, 16, 3,
])


def build_frame(pgn, payload, priority=2, destination=255, source=36,
                timestamp_ms=0, data_length=None, checksum=None):
    """Assemble an Actisense N2K frame around ``payload``."""
    if data_length is None:
        data_length = len(payload)
    body = (
        bytes([0x93, 11 + len(payload), priority])
        + pgn.to_bytes(3, "little")
        + bytes([destination, source])
        + timestamp_ms.to_bytes(4, "little")
        + bytes([data_length])
        + bytes(payload)
    )
    if checksum is None:
        checksum = ActisenseChecksum.calculate(body)
    return bytes([0x10, 0x02]) + body + bytes([checksum, 0x10, 0x03])


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


@pytest.fixture
def sample_frame():
    return SAMPLE_FRAME


@pytest.fixture
def frame_builder():
    return build_frame


@pytest.fixture
def test_settings():
    return Settings(
        decoder=DecoderConfig(verify_checksum=True, stats_interval=10),
        logging=LoggingConfig(level="DEBUG", format="console"),
        metrics=MetricsConfig(enabled=False),
    )
