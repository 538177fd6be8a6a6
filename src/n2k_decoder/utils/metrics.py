from __future__ import annotations

import structlog
from prometheus_client import Counter, Histogram, start_http_server

from ..config import MetricsConfig

logger = structlog.get_logger(__name__)

DECODED_FRAMES = Counter("n2k_frames_decoded_total", "Total decoded frames", ["status"])
DECODE_TIME = Histogram("n2k_decode_duration_seconds", "Frame decode time")


class MetricsServer:
    def __init__(self, config: MetricsConfig) -> None:
        self.config = config
        self._server = None
        self._thread = None

    @property
    def started(self) -> bool:
        return self._server is not None

    def start(self) -> None:
        if self.config.enabled and not self.started:
            self._server, self._thread = start_http_server(self.config.port)
            logger.info("metrics_server_started", port=self.config.port)

    def stop(self) -> None:
        if self._server is None:
            return
        self._server.shutdown()
        self._server.server_close()
        self._thread.join()
        self._server = None
        self._thread = None
        logger.info("metrics_server_stopped")
