"""Checksums: XOR parity word and CRC-16/KERMIT."""

from __future__ import annotations

from functools import reduce
from operator import xor

_KERMIT_POLY = 0x8408


def _build_kermit_table() -> tuple[int, ...]:
    table = []
    for index in range(256):
        crc = index
        for _ in range(8):
            crc = (crc >> 1) ^ _KERMIT_POLY if crc & 1 else crc >> 1
        table.append(crc)
    return tuple(table)


_KERMIT_TABLE = _build_kermit_table()


def parity_word(data, pos: int = 0, count: int | None = None) -> int:
    """XOR checksum over ``count`` bytes of ``data`` starting at ``pos``.

    The parity word of no data is 0. ``count`` defaults to the rest of the
    data. Raises ValueError if the range lies outside the data.
    """
    if data is None:
        return 0
    data = bytes(data)
    size = len(data)
    if count is None:
        count = size - pos
    if pos < 0 or count < 0 or pos > size or size - pos < count:
        raise ValueError("parity_word: range outside of data")
    return reduce(xor, data[pos : pos + count], 0)


def crc16_kermit(data) -> int:
    """CRC-16/KERMIT of ``data``; the checksum of no data is 0."""
    crc = 0
    if data is None:
        return crc
    for byte in bytes(data):
        crc = (crc >> 8) ^ _KERMIT_TABLE[(crc ^ byte) & 0xFF]
    return crc