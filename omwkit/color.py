"""RGBA colours with validity tracking and alpha compositing."""

from __future__ import annotations

import math
import string

_BYTE = 0xFF
_WORD_MASK = 0xFFFFFFFF
_OPAQUE = 0xFF000000
_HEX_DIGITS = frozenset(string.hexdigits)


def _byte(value: int, name: str) -> int:
    value = int(value)
    if not 0 <= value <= _BYTE:
        raise ValueError(f"{name} out of range 0..255: {value}")
    return value


def _lround(value: float) -> int:
    return int(math.floor(value + 0.5))


class Color:
    """An RGBA colour.

    A colour is valid once any value was set. ``Color()`` gives an invalid
    black; ``Color(r, g, b, a)`` a valid colour.
    """

    __slots__ = ("_r", "_g", "_b", "_a", "_valid")

    def __init__(self, r=None, g=None, b=None, a: int = _BYTE, valid: bool | None = None) -> None:
        given = [c is not None for c in (r, g, b)]
        if any(given) and not all(given):
            raise TypeError("r, g and b have to be given together")
        if all(given):
            self._r = _byte(r, "r")
            self._g = _byte(g, "g")
            self._b = _byte(b, "b")
            default_valid = True
        else:
            self._r = self._g = self._b = 0
            default_valid = False
        self._a = _byte(a, "a")
        self._valid = default_valid if valid is None else bool(valid)

    @classmethod
    def from_rgb(cls, rgb: int) -> "Color":
        """An opaque colour from ``0x00RRGGBB``."""
        color = cls()
        color.set_rgb(rgb)
        return color

    @classmethod
    def from_argb(cls, argb: int) -> "Color":
        """A colour from ``0xAARRGGBB``."""
        color = cls()
        color.set_argb(argb)
        return color

    @classmethod
    def from_css(cls, css: str) -> "Color":
        """A colour from ``"#RRGGBB"`` or ``"#RGB"``, the '#' optional."""
        color = cls()
        color.set_css(css)
        return color

    def is_valid(self) -> bool:
        return self._valid

    def validate(self, state: bool = True) -> None:
        """Mark as valid or invalid; the colour values are kept."""
        self._valid = bool(state)

    def invalidate(self) -> None:
        """Mark as invalid; the colour values are kept."""
        self.validate(False)

    def clear(self) -> None:
        """Set to opaque black and invalidate."""
        self.set(0, 0, 0, _BYTE)
        self.invalidate()

    def opaque(self) -> None:
        """Set alpha to 0xFF without touching the validity."""
        self._a = _BYTE

    def transparent(self) -> None:
        """Set alpha to 0 without touching the validity."""
        self._a = 0

    def set(self, r: int, g: int, b: int, a: int = _BYTE) -> None:
        values = (_byte(r, "r"), _byte(g, "g"), _byte(b, "b"), _byte(a, "a"))
        self._r, self._g, self._b, self._a = values
        self._valid = True

    def set_rgb(self, rgb: int) -> None:
        """Set from ``0x00RRGGBB``, opaque."""
        self.set_argb(_OPAQUE | (int(rgb) & _WORD_MASK))

    def set_argb(self, argb: int) -> None:
        """Set from ``0xAARRGGBB``."""
        argb = int(argb) & _WORD_MASK
        self.set((argb >> 16) & _BYTE, (argb >> 8) & _BYTE, argb & _BYTE, (argb >> 24) & _BYTE)

    def set_css(self, css: str) -> None:
        """Set from ``"#RRGGBB"`` or ``"#RGB"``, the '#' optional.

        Raises ValueError if the string does not match the format.
        """
        digits = css[1:] if css.startswith("#") else css
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        elif len(digits) != 6:
            raise ValueError("hex string has to be 3 or 6 digits long")
        if not set(digits) <= _HEX_DIGITS:
            raise ValueError(f"invalid hex string: {css!r}")
        self.set_rgb(int(digits, 16))

    @property
    def r(self) -> int:
        return self._r

    @r.setter
    def r(self, value: int) -> None:
        self._r = _byte(value, "r")
        self._valid = True

    @property
    def g(self) -> int:
        return self._g

    @g.setter
    def g(self, value: int) -> None:
        self._g = _byte(value, "g")
        self._valid = True

    @property
    def b(self) -> int:
        return self._b

    @b.setter
    def b(self, value: int) -> None:
        self._b = _byte(value, "b")
        self._valid = True

    @property
    def a(self) -> int:
        return self._a

    @a.setter
    def a(self, value: int) -> None:
        self._a = _byte(value, "a")
        self._valid = True

    def to_rgb(self) -> int:
        """``0x00RRGGBB``."""
        return self.to_argb() & 0x00FFFFFF

    def to_argb(self) -> int:
        """``0xAARRGGBB``."""
        return (self._a << 24) | (self._r << 16) | (self._g << 8) | self._b

    def to_string(self) -> str:
        """``"RRGGBB"``."""
        return f"{self._r:02X}{self._g:02X}{self._b:02X}"

    def to_string_argb(self) -> str:
        """``"AARRGGBB"``."""
        return f"{self.to_argb():08X}"

    def to_css_str(self) -> str:
        """``"#RRGGBB"``."""
        return "#" + self.to_string()

    def _copy(self) -> "Color":
        return Color(self._r, self._g, self._b, self._a, valid=self._valid)

    def __iadd__(self, other: "Color") -> "Color":
        """Composite ``other`` over this colour.

        The result is invalid if either colour is invalid.
        """
        if not isinstance(other, Color):
            return NotImplemented
        was_invalid = not self._valid
        self.set_argb(alpha_composit(other.to_argb(), self.to_argb()))
        if was_invalid or not other.is_valid():
            self.invalidate()
        return self

    def __add__(self, other: "Color") -> "Color":
        """``other`` composited over this colour."""
        if not isinstance(other, Color):
            return NotImplemented
        result = self._copy()
        result += other
        return result

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._valid == other._valid and self.to_argb() == other.to_argb()

    __hash__ = None

    def __repr__(self) -> str:
        return f"Color(r={self._r}, g={self._g}, b={self._b}, a={self._a}, valid={self._valid})"

    def from_win(self, win_col: int) -> None:
        """Set from a Windows colour ``0x00BBGGRR``, opaque."""
        win_col = int(win_col)
        self.set(win_col & _BYTE, (win_col >> 8) & _BYTE, (win_col >> 16) & _BYTE, _BYTE)

    def to_win(self) -> int:
        """Windows colour ``0x00BBGGRR``."""
        return (self._b << 16) | (self._g << 8) | self._r

    def from_wx_rgb(self, wx_col: int) -> None:
        """Set from a wxWidgets colour ``0x00BBGGRR``, opaque."""
        self.from_wx_rgba(_OPAQUE | (int(wx_col) & _WORD_MASK))

    def from_wx_rgba(self, wx_col: int) -> None:
        """Set from a wxWidgets colour ``0xAABBGGRR``."""
        wx_col = int(wx_col)
        self.set(
            wx_col & _BYTE,
            (wx_col >> 8) & _BYTE,
            (wx_col >> 16) & _BYTE,
            (wx_col >> 24) & _BYTE,
        )

    def to_wx(self) -> int:
        """Same as to_wx_rgb."""
        return self.to_wx_rgb()

    def to_wx_rgb(self) -> int:
        """wxWidgets colour ``0x00BBGGRR``."""
        return self.to_wx_rgba() & 0x00FFFFFF

    def to_wx_rgba(self) -> int:
        """wxWidgets colour ``0xAABBGGRR``."""
        return (self._a << 24) | (self._b << 16) | (self._g << 8) | self._r


def alpha_composit(a_accc: int, b_accc: int) -> int:
    """Alpha composite of A over B, both given as ``0xAACCCCCC``."""
    a_accc = int(a_accc) & _WORD_MASK
    b_accc = int(b_accc) & _WORD_MASK
    alpha_a = a_accc >> 24
    if alpha_a == _BYTE:
        return a_accc
    if alpha_a == 0:
        return b_accc

    aa = alpha_a / 255.0
    ab = (b_accc >> 24) / 255.0
    ar = aa + ab * (1.0 - aa)

    result = _lround(ar * 255)
    for shift in (16, 8, 0):
        ca = ((a_accc >> shift) & _BYTE) / 255.0
        cb = ((b_accc >> shift) & _BYTE) / 255.0
        cr = (ca * aa + cb * ab * (1.0 - aa)) / ar
        result = (result << 8) | _lround(cr * 255)
    return result


def alpha_composit_colors(a: Color, b: Color) -> Color:
    """Alpha composite of A over B; invalid if either is invalid."""
    return b + a


def from_win_color(win_col: int) -> Color:
    """A colour from a Windows colour ``0x00BBGGRR``."""
    color = Color()
    color.from_win(win_col)
    return color


def from_wx_color(wx_rgba: int) -> Color:
    """A colour from a wxWidgets colour ``0xAABBGGRR``."""
    color = Color()
    color.from_wx_rgba(wx_rgba)
    return color