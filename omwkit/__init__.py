"""Small utilities: 128-bit integers, BCD conversion, big-endian encoding, checksums, a monotonic clock, ANSI escape sequences and colours."""

__version__ = "0.1.0"

__all__ = ["algorithm", "ansiesc", "checksum", "clock", "color", "colors", "encoding", "int128"]