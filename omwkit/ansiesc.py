"""ANSI escape sequence builders with a process wide enable switch."""

from __future__ import annotations

import operator
import sys
from enum import IntEnum
from typing import Iterable, Union

ARG_DELIMITER = ";"
ESC_CHAR = "\033"

SINGLE_SHIFT_TWO = "N"
SINGLE_SHIFT_THREE = "O"
DEVICE_CONTROL_STRING = "P"
CONTROL_SEQUENCE_INTRODUCER = "["
STRING_TERMINATOR = "\\"
OS_COMMAND = "]"
START_OF_STRING = "X"
PRIVACY_MESSAGE = "^"
APP_PROGRAM_COMMAND = "_"

CSI = CONTROL_SEQUENCE_INTRODUCER

# Control sequence types
CURSOR_UP = "A"
CURSOR_DOWN = "B"
CURSOR_FWD = "C"
CURSOR_BACK = "D"
CURSOR_POS = "H"
ERASE_DISPLAY = "J"
ERASE_LINE = "K"
SCROLL_UP = "S"
SCROLL_DOWN = "T"
SGR = "m"

# Arguments of the colour setting SGR parameters
SET_COLOR_8BIT = 5
SET_COLOR_RGB = 2


class Mode(IntEnum):
    """How sequence building is switched."""

    DEFAULT = 0
    ENABLED = 1
    DISABLED = 2


class Erase(IntEnum):
    """Arguments of the erase display and erase line sequences."""

    FROM_CUR_TO_END = 0
    FROM_CUR_TO_BEGIN = 1
    ENTIRE = 2
    ENTIRE_AND_SCRL_BK = 3


class Sgr(IntEnum):
    """Select graphic rendition parameters."""

    RESET = 0
    BOLD = 1
    FAINT = 2
    ITALIC = 3
    UNDERLINE = 4
    BLINK_SLOW = 5
    BLINK_FAST = 6
    REVERSE_VIDEO = 7
    CONCEAL = 8
    STRIKE = 9
    DEFAULT_FONT = 10
    FONT_BASE = 10
    FONT0 = 10
    FONT1 = 11
    FONT2 = 12
    FONT3 = 13
    FONT4 = 14
    FONT5 = 15
    FONT6 = 16
    FONT7 = 17
    FONT8 = 18
    FONT9 = 19
    FRAKTUR = 20
    BOLD_FAINT_OFF = 22
    BOLD_OFF = 22
    FAINT_OFF = 22
    ITALIC_FRAKTUR_OFF = 23
    ITALIC_OFF = 23
    FRAKTUR_OFF = 23
    UNDERLINE_OFF = 24
    BLINK_OFF = 25
    REVERSE_VIDEO_OFF = 27
    CONCEAL_OFF = 28
    REVEAL = 28
    STRIKE_OFF = 29
    FG_COLOR_BLACK = 30
    FG_COLOR_RED = 31
    FG_COLOR_GREEN = 32
    FG_COLOR_YELLOW = 33
    FG_COLOR_BLUE = 34
    FG_COLOR_MAGENTA = 35
    FG_COLOR_CYAN = 36
    FG_COLOR_WHITE = 37
    SET_FORE_COLOR = 38
    DEFAULT_FORE_COLOR = 39
    FG_COLOR_DEFAULT = 39
    BG_COLOR_BLACK = 40
    BG_COLOR_RED = 41
    BG_COLOR_GREEN = 42
    BG_COLOR_YELLOW = 43
    BG_COLOR_BLUE = 44
    BG_COLOR_MAGENTA = 45
    BG_COLOR_CYAN = 46
    BG_COLOR_WHITE = 47
    SET_BACK_COLOR = 48
    DEFAULT_BACK_COLOR = 49
    BG_COLOR_DEFAULT = 49
    FRAMED = 51
    ENCIRCLED = 52
    OVERLINED = 53
    FRAMED_ENCIRCLED_OFF = 54
    FRAMED_OFF = 54
    ENCIRCLED_OFF = 54
    OVERLINED_OFF = 55
    SET_UNDERLINE_COLOR = 58
    DEFAULT_UNDERLINE_COLOR = 59
    SUPER = 73
    SUB = 74
    SUPER_SUB_OFF = 75
    SUPER_OFF = 75
    SUB_OFF = 75
    FG_COLOR_BRIGHT_BLACK = 90
    FG_COLOR_BRIGHT_RED = 91
    FG_COLOR_BRIGHT_GREEN = 92
    FG_COLOR_BRIGHT_YELLOW = 93
    FG_COLOR_BRIGHT_BLUE = 94
    FG_COLOR_BRIGHT_MAGENTA = 95
    FG_COLOR_BRIGHT_CYAN = 96
    FG_COLOR_BRIGHT_WHITE = 97
    BG_COLOR_BRIGHT_BLACK = 100
    BG_COLOR_BRIGHT_RED = 101
    BG_COLOR_BRIGHT_GREEN = 102
    BG_COLOR_BRIGHT_YELLOW = 103
    BG_COLOR_BRIGHT_BLUE = 104
    BG_COLOR_BRIGHT_MAGENTA = 105
    BG_COLOR_BRIGHT_CYAN = 106
    BG_COLOR_BRIGHT_WHITE = 107


_FONT_COUNT = 10
_DEFAULT_ENABLED = sys.platform != "win32"

Arg = Union[int, str]


class _State:
    mode: Mode = Mode.DEFAULT
    enabled: bool = _DEFAULT_ENABLED


_state = _State()


def set_mode(mode) -> None:
    """Set the mode; anything other than ENABLED or DISABLED means DEFAULT."""
    if mode in (Mode.ENABLED, Mode.DISABLED):
        _state.mode = Mode(mode)
    else:
        _state.mode = Mode.DEFAULT

    if _state.mode is Mode.ENABLED:
        _state.enabled = True
    elif _state.mode is Mode.DISABLED:
        _state.enabled = False
    else:
        _state.enabled = _DEFAULT_ENABLED


def get_mode() -> Mode:
    """The current mode."""
    return _state.mode


def enable(state: bool = True) -> None:
    """Set the mode to ENABLED, or to DISABLED if ``state`` is false."""
    set_mode(Mode.ENABLED if state else Mode.DISABLED)


def disable() -> None:
    """Set the mode to DISABLED."""
    enable(False)


def is_enabled() -> bool:
    """True if the builders produce sequences, False if they yield ''."""
    return _state.enabled


def _arg(value: Arg) -> str:
    if isinstance(value, str):
        return value
    return str(operator.index(value))


def seq(seq_type: str, argstr: str = "") -> str:
    """Build ``ESC <type> <argstr>``, or '' if sequences are disabled."""
    if is_enabled():
        return ESC_CHAR + seq_type + argstr
    return ""


def csi_seq(ctrl_seq_type: str, *args: Arg) -> str:
    """Build ``ESC [ <args joined by ;> <type>``.

    A single string argument is used as the whole argument string.
    """
    return seq(CSI, ARG_DELIMITER.join(_arg(a) for a in args) + ctrl_seq_type)


def sgr_seq(*args: Arg) -> str:
    """Build ``ESC [ <args joined by ;> m``; no arguments means reset."""
    return csi_seq(SGR, *args)


def sgr_compose(args: Iterable[int] | None) -> str:
    """Build a composed SGR sequence from a sequence of parameters."""
    return sgr_seq(*(args or ()))


def font(index: int) -> str:
    """SGR sequence selecting font 0 to 9."""
    index = operator.index(index)
    if not 0 <= index < _FONT_COUNT:
        raise ValueError(f"font index out of range: {index}")
    return sgr_seq(Sgr.FONT_BASE + index)