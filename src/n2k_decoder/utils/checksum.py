from __future__ import annotations


class ActisenseChecksum:
    """Checksum byte of an Actisense frame: all covered bytes sum to 0 mod 256."""

    @staticmethod
    def calculate(data: bytes) -> int:
        return (-sum(data)) & 0xFF

    @staticmethod
    def remainder(data: bytes) -> int:
        return sum(data) & 0xFF

    @staticmethod
    def verify(data: bytes, expected: int) -> bool:
        return ActisenseChecksum.calculate(data) == expected
