# omwkit

A collection of small utilities that need nothing outside the standard library:

- `omwkit.int128`: 128-bit integers stored as two's complement bits. `SignedInt128` and `UnsignedInt128` share the base class `Int128Base`. Arithmetic and bitwise operators wrap at 128 bits. Constructors take plain integers from -2**127 to 2**128 - 1, and also `from_halves(high, low)`, `from_words(hh, lh, hl, ll)` and `from_bytes(data, signed)` (big endian, at most 16 bytes). `hi()`, `lo()` and `his()` return the 64-bit halves. `SignedInt128` shifts right arithmetically and has `is_negative()` and `sign()`. `sign()` returns -1 or 1, and zero gives 1.
- `omwkit.algorithm`: converts binary to packed BCD with the double dabble algorithm. `double_dabble(value)`, `double_dabble128(high, low)` and `double_dabble128_words(hh, lh, hl, ll)` each return 20 bytes, with the most significant digits first.
- `omwkit.encoding`: big-endian integers. `decode_i16`, `decode_ui16`, `decode_i32`, `decode_ui32`, `decode_i64`, `decode_ui64`, `decode_i128` and `decode_ui128` read up to the width of the type. The signed decoders extend the sign bit. They raise `ValueError` for empty data and `OverflowError` for data that is too long. `encode_16`, `encode_32`, `encode_64` and `encode_128` return fixed-size `bytes`.
- `omwkit.checksum`: `parity_word(data, pos, count)` is an XOR checksum and raises `ValueError` when the range falls outside the data. `crc16_kermit(data)` computes CRC-16/KERMIT.
- `omwkit.clock`: `now()` returns a monotonic counter in microseconds, read from the boot-time clock on Linux. The module also has `elapsed_us`, `elapsed_ms` and `from_timespec`, plus constants for seconds, minutes, hours and days in s, ms and µs.
- `omwkit.ansiesc`: builds ANSI escape, CSI and SGR sequences with `seq`, `csi_seq`, `sgr_seq`, `sgr_compose` and `font`. The constants `Sgr` and `Erase` are included. A process-wide `Mode` is controlled by `set_mode`, `get_mode`, `enable`, `disable` and `is_enabled`. While sequences are disabled, every builder returns `""`. In `DEFAULT` mode they are enabled everywhere except on Windows.
- `omwkit.color`: `Color`, an RGBA colour that tracks whether it is valid. It is created from RGB, ARGB or CSS hex (`"#RRGGBB"` / `"#RGB"`). It converts to and from Windows and wxWidgets colour integers. `a + b` composites `b` over `a`. The module also has `alpha_composit` for packed `0xAACCCCCC` integers.
- `omwkit.colors`: predefined named colours (`ARGB`, `by_name`) and the Windows system colours (`WINDOWS_ARGB`, `windows_by_name`). Name lookup ignores case, underscores, spaces and dashes.

## Installation

```
pip install omwkit
```

Python 3.10 or later is required.

## Examples

```python
from omwkit.int128 import SignedInt128, UnsignedInt128
from omwkit.encoding import encode_32, decode_i16
from omwkit.checksum import crc16_kermit, parity_word
from omwkit.algorithm import double_dabble
from omwkit import ansiesc
from omwkit.color import Color
from omwkit.colors import by_name

x = SignedInt128(-6)
print(x.hi(), x.lo(), x.is_negative())

print(encode_32(0x12345678))          # b'\x124Vx'
print(decode_i16(b"\xff\xfe"))         # -2

print(hex(crc16_kermit(b"123456789")))  # 0x2189
print(hex(parity_word(bytes([0x40, 0x05, 0xC0]), 0, 3)))  # 0x85

print(double_dabble(UnsignedInt128(1234)).hex())  # ...001234

ansiesc.enable()
print(ansiesc.sgr_seq(ansiesc.Sgr.BOLD) + "bold" + ansiesc.sgr_seq(ansiesc.Sgr.RESET))
print(ansiesc.csi_seq(ansiesc.CURSOR_POS, 2, 3))  # ESC [2;3H

c = Color.from_css("#FF8000")
print(c.to_css_str(), hex(c.to_argb()))
print((by_name("white") + Color(0, 0, 0, 0x80)).to_string())
```

## What it does not do

This package is a library and has no command-line program. Windows-specific features such as console code pages, virtual terminal processing, resources, environment-variable helpers and performance-counter sleeps are not included. `ansiesc` only builds the strings, and it does not configure the terminal.

## Running the tests

```
pip install -e ".[test]"
pytest
```