"""Predefined named colours, including the native Windows system colours."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .color import Color


def _key(name: str) -> str:
    return name.replace("_", "").replace(" ", "").replace("-", "").lower()


_NAMED = {
    "transparent": 0x00FFFFFF,
    "aliceBlue": 0xFFF0F8FF,
    "antiqueWhite": 0xFFFAEBD7,
    "aqua": 0xFF00FFFF,
    "aquamarine": 0xFF7FFFD4,
    "azure": 0xFFF0FFFF,
    "beige": 0xFFF5F5DC,
    "bisque": 0xFFFFE4C4,
    "black": 0xFF000000,
    "blanchedAlmond": 0xFFFFEBCD,
    "blue": 0xFF0000FF,
    "blueViolet": 0xFF8A2BE2,
    "brown": 0xFFA52A2A,
    "burlyWood": 0xFFDEB887,
    "cadetBlue": 0xFF5F9EA0,
    "chartreuse": 0xFF7FFF00,
    "chocolate": 0xFFD2691E,
    "coral": 0xFFFF7F50,
    "cornflowerBlue": 0xFF6495ED,
    "cornsilk": 0xFFFFF8DC,
    "crimson": 0xFFDC143C,
    "cyan": 0xFF00FFFF,
    "darkBlue": 0xFF00008B,
    "darkCyan": 0xFF008B8B,
    "darkGoldenrod": 0xFFB8860B,
    "darkGray": 0xFFA9A9A9,
    "darkGreen": 0xFF006400,
    "darkKhaki": 0xFFBDB76B,
    "darkMagenta": 0xFF8B008B,
    "darkOliveGreen": 0xFF556B2F,
    "darkOrange": 0xFFFF8C00,
    "darkOrchid": 0xFF9932CC,
    "darkRed": 0xFF8B0000,
    "darkSalmon": 0xFFE9967A,
    "darkSeaGreen": 0xFF8FBC8F,
    "darkSlateBlue": 0xFF483D8B,
    "darkSlateGray": 0xFF2F4F4F,
    "darkTurquoise": 0xFF00CED1,
    "darkViolet": 0xFF9400D3,
    "deepPink": 0xFFFF1493,
    "deepSkyBlue": 0xFF00BFFF,
    "dimGray": 0xFF696969,
    "dodgerBlue": 0xFF1E90FF,
    "firebrick": 0xFFB22222,
    "floralWhite": 0xFFFFFAF0,
    "forestGreen": 0xFF228B22,
    "fuchsia": 0xFFFF00FF,
    "gainsboro": 0xFFDCDCDC,
    "ghostWhite": 0xFFF8F8FF,
    "gold": 0xFFFFD700,
    "goldenrod": 0xFFDAA520,
    "gray": 0xFF808080,
    "green": 0xFF008000,
    "greenYellow": 0xFFADFF2F,
    "honeydew": 0xFFF0FFF0,
    "hotPink": 0xFFFF69B4,
    "indianRed": 0xFFCD5C5C,
    "indigo": 0xFF4B0082,
    "ivory": 0xFFFFFFF0,
    "khaki": 0xFFF0E68C,
    "lavender": 0xFFE6E6FA,
    "lavenderBlush": 0xFFFFF0F5,
    "lawnGreen": 0xFF7CFC00,
    "lemonChiffon": 0xFFFFFACD,
    "lightBlue": 0xFFADD8E6,
    "lightCoral": 0xFFF08080,
    "lightCyan": 0xFFE0FFFF,
    "lightGoldenrodYellow": 0xFFFAFAD2,
    "lightGray": 0xFFD3D3D3,
    "lightGreen": 0xFF90EE90,
    "lightPink": 0xFFFFB6C1,
    "lightSalmon": 0xFFFFA07A,
    "lightSeaGreen": 0xFF20B2AA,
    "lightSkyBlue": 0xFF87CEFA,
    "lightSlateGray": 0xFF778899,
    "lightSteelBlue": 0xFFB0C4DE,
    "lightYellow": 0xFFFFFFE0,
    "lime": 0xFF00FF00,
    "limeGreen": 0xFF32CD32,
    "linen": 0xFFFAF0E6,
    "magenta": 0xFFFF00FF,
    "maroon": 0xFF800000,
    "mediumAquamarine": 0xFF66CDAA,
    "mediumBlue": 0xFF0000CD,
    "mediumOrchid": 0xFFBA55D3,
    "mediumPurple": 0xFF9370DB,
    "mediumSeaGreen": 0xFF3CB371,
    "mediumSlateBlue": 0xFF7B68EE,
    "mediumSpringGreen": 0xFF00FA9A,
    "mediumTurquoise": 0xFF48D1CC,
    "mediumVioletRed": 0xFFC71585,
    "midnightBlue": 0xFF191970,
    "mintCream": 0xFFF5FFFA,
    "mistyRose": 0xFFFFE4E1,
    "moccasin": 0xFFFFE4B5,
    "navajoWhite": 0xFFFFDEAD,
    "navy": 0xFF000080,
    "oldLace": 0xFFFDF5E6,
    "olive": 0xFF808000,
    "oliveDrab": 0xFF6B8E23,
    "orange": 0xFFFFA500,
    "orangeRed": 0xFFFF4500,
    "orchid": 0xFFDA70D6,
    "paleGoldenrod": 0xFFEEE8AA,
    "paleGreen": 0xFF98FB98,
    "paleTurquoise": 0xFFAFEEEE,
    "paleVioletRed": 0xFFDB7093,
    "papayaWhip": 0xFFFFEFD5,
    "peachPuff": 0xFFFFDAB9,
    "peru": 0xFFCD853F,
    "pink": 0xFFFFC0CB,
    "plum": 0xFFDDA0DD,
    "powderBlue": 0xFFB0E0E6,
    "purple": 0xFF800080,
    "red": 0xFFFF0000,
    "rosyBrown": 0xFFBC8F8F,
    "royalBlue": 0xFF4169E1,
    "saddleBrown": 0xFF8B4513,
    "salmon": 0xFFFA8072,
    "sandyBrown": 0xFFF4A460,
    "seaGreen": 0xFF2E8B57,
    "seaShell": 0xFFFFF5EE,
    "sienna": 0xFFA0522D,
    "silver": 0xFFC0C0C0,
    "skyBlue": 0xFF87CEEB,
    "slateBlue": 0xFF6A5ACD,
    "slateGray": 0xFF708090,
    "snow": 0xFFFFFAFA,
    "springGreen": 0xFF00FF7F,
    "steelBlue": 0xFF4682B4,
    "tan": 0xFFD2B48C,
    "teal": 0xFF008080,
    "thistle": 0xFFD8BFD8,
    "tomato": 0xFFFF6347,
    "turquoise": 0xFF40E0D0,
    "violet": 0xFFEE82EE,
    "wheat": 0xFFF5DEB3,
    "white": 0xFFFFFFFF,
    "whiteSmoke": 0xFFF5F5F5,
    "yellow": 0xFFFFFF00,
    "yellowGreen": 0xFF9ACD32,
}

_WINDOWS = {
    "activeBorder": 0xFFB4B4B4,
    "activeCaption": 0xFF99B4D1,
    "activeCaptionText": 0xFF000000,
    "appWorkspace": 0xFFABABAB,
    "buttonFace": 0xFFF0F0F0,
    "buttonHighlight": 0xFFFFFFFF,
    "buttonShadow": 0xFFA0A0A0,
    "control": 0xFFF0F0F0,
    "controlDark": 0xFFA0A0A0,
    "controlDarkDark": 0xFF696969,
    "controlLight": 0xFFE3E3E3,
    "controlLightLight": 0xFFFFFFFF,
    "controlText": 0xFF000000,
    "desktop": 0xFF000000,
    "gradientActiveCaption": 0xFFB9D1EA,
    "gradientInactiveCaption": 0xFFD7E4F2,
    "grayText": 0xFF6D6D6D,
    "highlight": 0xFF0078D7,
    "highlightText": 0xFFFFFFFF,
    "hotTrack": 0xFF0066CC,
    "inactiveBorder": 0xFFF4F7FC,
    "inactiveCaption": 0xFFBFCDDB,
    "inactiveCaptionText": 0xFF000000,
    "info": 0xFFFFFFE1,
    "infoText": 0xFF000000,
    "menu": 0xFFF0F0F0,
    "menuBar": 0xFFF0F0F0,
    "menuHighlight": 0xFF0078D7,
    "menuText": 0xFF000000,
    "scrollBar": 0xFFC8C8C8,
    "window": 0xFFFFFFFF,
    "windowFrame": 0xFF646464,
    "windowText": 0xFF000000,
}

ARGB: Mapping[str, int] = MappingProxyType(_NAMED)
WINDOWS_ARGB: Mapping[str, int] = MappingProxyType(_WINDOWS)

_NAMED_LOOKUP = {_key(name): argb for name, argb in _NAMED.items()}
_WINDOWS_LOOKUP = {_key(name): argb for name, argb in _WINDOWS.items()}


def _lookup(table: Mapping[str, int], name: str, what: str) -> Color:
    try:
        argb = table[_key(name)]
    except KeyError:
        raise KeyError(f"unknown {what} colour: {name!r}") from None
    return Color.from_argb(argb)


def by_name(name: str) -> Color:
    """A new valid Color for a predefined colour name.

    Names match ignoring case, underscores, spaces and dashes, so
    ``"aliceBlue"`` and ``"alice_blue"`` are the same. Raises KeyError for
    unknown names.
    """
    return _lookup(_NAMED_LOOKUP, name, "named")


def windows_by_name(name: str) -> Color:
    """A new valid Color for a native Windows system colour name."""
    return _lookup(_WINDOWS_LOOKUP, name, "Windows")