# pivot_levels/colors.py
"""
Module: Named Colors
Purpose: Resolve host color names (e.g. "DodgerBlue") to RGB values
Note: Lookup is an explicit table, unknown names fall back to a per-group default
"""

import logging
from typing import Dict, NamedTuple, Optional

logger = logging.getLogger(__name__)


class Color(NamedTuple):
    """RGB color resolved from a name"""
    name: str
    red: int
    green: int
    blue: int

    @property
    def hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    @property
    def rgb(self):
        return (self.red, self.green, self.blue)


# Standard web/.NET named colors accepted by the chart host
NAMED_COLORS: Dict[str, tuple] = {
    'AliceBlue': (240, 248, 255),
    'Aqua': (0, 255, 255),
    'Aquamarine': (127, 255, 212),
    'Black': (0, 0, 0),
    'Blue': (0, 0, 255),
    'BlueViolet': (138, 43, 226),
    'Brown': (165, 42, 42),
    'CadetBlue': (95, 158, 160),
    'Chartreuse': (127, 255, 0),
    'Chocolate': (210, 105, 30),
    'Coral': (255, 127, 80),
    'CornflowerBlue': (100, 149, 237),
    'Crimson': (220, 20, 60),
    'Cyan': (0, 255, 255),
    'DarkBlue': (0, 0, 139),
    'DarkCyan': (0, 139, 139),
    'DarkGoldenrod': (184, 134, 11),
    'DarkGray': (169, 169, 169),
    'DarkGreen': (0, 100, 0),
    'DarkMagenta': (139, 0, 139),
    'DarkOrange': (255, 140, 0),
    'DarkOrchid': (153, 50, 204),
    'DarkRed': (139, 0, 0),
    'DarkSeaGreen': (143, 188, 143),
    'DarkTurquoise': (0, 206, 209),
    'DarkViolet': (148, 0, 211),
    'DeepPink': (255, 20, 147),
    'DeepSkyBlue': (0, 191, 255),
    'DimGray': (105, 105, 105),
    'DodgerBlue': (30, 144, 255),
    'Firebrick': (178, 34, 34),
    'ForestGreen': (34, 139, 34),
    'Fuchsia': (255, 0, 255),
    'Gold': (255, 215, 0),
    'Goldenrod': (218, 165, 32),
    'Gray': (128, 128, 128),
    'Green': (0, 128, 0),
    'GreenYellow': (173, 255, 47),
    'HotPink': (255, 105, 180),
    'IndianRed': (205, 92, 92),
    'Indigo': (75, 0, 130),
    'Khaki': (240, 230, 140),
    'Lavender': (230, 230, 250),
    'LawnGreen': (124, 252, 0),
    'LightBlue': (173, 216, 230),
    'LightCoral': (240, 128, 128),
    'LightGray': (211, 211, 211),
    'LightGreen': (144, 238, 144),
    'LightSalmon': (255, 160, 122),
    'LightSeaGreen': (32, 178, 170),
    'LightSkyBlue': (135, 206, 250),
    'LightSlateGray': (119, 136, 153),
    'LightSteelBlue': (176, 196, 222),
    'Lime': (0, 255, 0),
    'LimeGreen': (50, 205, 50),
    'Magenta': (255, 0, 255),
    'Maroon': (128, 0, 0),
    'MediumBlue': (0, 0, 205),
    'MediumOrchid': (186, 85, 211),
    'MediumPurple': (147, 112, 219),
    'MediumSeaGreen': (60, 179, 113),
    'MediumSpringGreen': (0, 250, 154),
    'MediumVioletRed': (199, 21, 133),
    'MidnightBlue': (25, 25, 112),
    'Navy': (0, 0, 128),
    'Olive': (128, 128, 0),
    'OliveDrab': (107, 142, 35),
    'Orange': (255, 165, 0),
    'OrangeRed': (255, 69, 0),
    'Orchid': (218, 112, 214),
    'PaleGreen': (152, 251, 152),
    'PaleVioletRed': (219, 112, 147),
    'Peru': (205, 133, 63),
    'Pink': (255, 192, 203),
    'Plum': (221, 160, 221),
    'Purple': (128, 0, 128),
    'Red': (255, 0, 0),
    'RosyBrown': (188, 143, 143),
    'RoyalBlue': (65, 105, 225),
    'SaddleBrown': (139, 69, 19),
    'Salmon': (250, 128, 114),
    'SandyBrown': (244, 164, 96),
    'SeaGreen': (46, 139, 87),
    'Sienna': (160, 82, 45),
    'Silver': (192, 192, 192),
    'SkyBlue': (135, 206, 235),
    'SlateBlue': (106, 90, 205),
    'SlateGray': (112, 128, 144),
    'SpringGreen': (0, 255, 127),
    'SteelBlue': (70, 130, 180),
    'Tan': (210, 180, 140),
    'Teal': (0, 128, 128),
    'Tomato': (255, 99, 71),
    'Turquoise': (64, 224, 208),
    'Violet': (238, 130, 238),
    'Wheat': (245, 222, 179),
    'White': (255, 255, 255),
    'Yellow': (255, 255, 0),
    'YellowGreen': (154, 205, 50),
}

_LOOKUP = {name.lower(): name for name in NAMED_COLORS}

# Per-group fallbacks
DEFAULT_MIDNIGHT_COLOR = 'DodgerBlue'
DEFAULT_PIVOT_COLOR = 'DarkOrange'
DEFAULT_RESISTANCE_COLOR = 'ForestGreen'
DEFAULT_SUPPORT_COLOR = 'Red'


def named_color(name: str) -> Optional[Color]:
    """Return the Color for a known name, None otherwise (case-insensitive)."""
    if not name:
        return None
    canonical = _LOOKUP.get(name.strip().lower())
    if canonical is None:
        return None
    return Color(canonical, *NAMED_COLORS[canonical])


def parse_color(name: str, default: str) -> Color:
    """
    Resolve a color name, falling back to ``default`` when it is not recognised.

    Args:
        name: Color name as entered in the indicator settings
        default: Known color name used when ``name`` cannot be resolved

    Returns:
        Resolved Color
    """
    color = named_color(name)
    if color is not None:
        return color

    fallback = named_color(default)
    if fallback is None:
        raise KeyError(f"Default color is not a known color name: {default}")

    logger.warning(f"Unknown color '{name}', using {fallback.name}")
    return fallback
