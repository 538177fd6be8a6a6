from __future__ import annotations

import structlog

from .config import Settings
from .core.errors import DecodeError, UnknownPGNError
from .core.models import DecodedFrame
from .core.parser import FrameParser
from .core.registry import PGNRegistry
from .utils.logging import setup_logging
from .utils.metrics import DECODE_TIME, DECODED_FRAMES, MetricsServer

logger = structlog.get_logger(__name__)


class DecoderService:
    """
    Caller-side wrapper around FrameParser.

    Decode failures are logged, counted and turned into ``None``; the parser
    itself only raises.
    """

    def __init__(self, settings: Settings, registry: PGNRegistry | None = None) -> None:
        self.settings = settings
        setup_logging(settings.logging.level, settings.logging.format)
        self.frame_parser = FrameParser(registry, verify_checksum=settings.decoder.verify_checksum)
        self.metrics_server: MetricsServer | None = None
        self.running = False
        self.stats: dict[str, int] = {"total": 0, "decoded": 0, "errors": 0, "unknown_pgn": 0}

    def start(self) -> None:
        logger.info("service_starting", pgns=sorted(self.frame_parser.registry.pgns))

        if self.settings.metrics.enabled:
            self.metrics_server = MetricsServer(self.settings.metrics)
            self.metrics_server.start()

        self.running = True
        logger.info("service_started")

    def handle_frame(self, frame: bytes) -> DecodedFrame | None:
        self.stats["total"] += 1

        try:
            with DECODE_TIME.time():
                decoded = self.frame_parser.parse(frame)
        except UnknownPGNError as e:
            self.stats["unknown_pgn"] += 1
            DECODED_FRAMES.labels(status="unknown_pgn").inc()
            logger.info("unknown_pgn", pgn=e.pgn)
            decoded = None
        except DecodeError as e:
            self.stats["errors"] += 1
            DECODED_FRAMES.labels(status="error").inc()
            logger.warning("frame_decode_failed", error=str(e), error_type=type(e).__name__)
            decoded = None
        else:
            self.stats["decoded"] += 1
            DECODED_FRAMES.labels(status="decoded").inc()

        if self.stats["total"] % self.settings.decoder.stats_interval == 0:
            logger.info("stats", **self.stats)

        return decoded

    def shutdown(self) -> None:
        logger.info("service_shutting_down")
        self.running = False

        if self.metrics_server:
            self.metrics_server.stop()

        logger.info("service_stopped", final_stats=self.stats)
