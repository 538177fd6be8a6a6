from __future__ import annotations

import threading
from typing import Iterable

import structlog

from .errors import UnknownPGNError
from .models import PGNRecord
from .pgns import BUILTIN_DECODERS, PGNDecoder

logger = structlog.get_logger(__name__)


class PGNRegistry:
    """PGN number -> decoder. One decoder per PGN."""

    def __init__(self, decoders: Iterable[PGNDecoder] = ()) -> None:
        self._decoders: dict[int, PGNDecoder] = {}
        self._lock = threading.Lock()
        for decoder in decoders:
            self.register(decoder)

    def register(self, decoder: PGNDecoder) -> None:
        with self._lock:
            if decoder.pgn in self._decoders:
                raise ValueError(f"PGN {decoder.pgn} already has a decoder: {self._decoders[decoder.pgn]!r}")
            # Copy-on-write so lookups never observe a dict being resized.
            decoders = dict(self._decoders)
            decoders[decoder.pgn] = decoder
            self._decoders = decoders
        logger.debug("decoder_registered", pgn=decoder.pgn, decoder=type(decoder).__name__)

    def lookup(self, pgn: int) -> PGNDecoder:
        try:
            return self._decoders[pgn]
        except KeyError:
            raise UnknownPGNError(pgn) from None

    def dispatch(self, pgn: int, payload: bytes) -> PGNRecord:
        return self.lookup(pgn).decode(payload)

    @property
    def pgns(self) -> frozenset[int]:
        return frozenset(self._decoders)

    def __contains__(self, pgn: object) -> bool:
        return pgn in self._decoders

    def __len__(self) -> int:
        return len(self._decoders)


def default_registry() -> PGNRegistry:
    return PGNRegistry(decoder_cls() for decoder_cls in BUILTIN_DECODERS)
