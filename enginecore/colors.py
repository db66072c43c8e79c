"""Named colours and RGB/RGBA values."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Color(Enum):
    """Named colours known to the engine."""

    ALICE_BLUE = auto()
    ANTIQUE_WHITE = auto()
    AQUA = auto()
    AQUAMARINE = auto()
    AZURE = auto()
    BEIGE = auto()
    BISQUE = auto()
    BLACK = auto()
    BLANCHED_ALMOND = auto()
    BLUE = auto()
    BLUE_VIOLET = auto()
    BROWN = auto()
    BURLY_WOOD = auto()
    CADET_BLUE = auto()
    CHARTREUSE = auto()
    CHOCOLATE = auto()
    CORAL = auto()
    CORNFLOWER_BLUE = auto()
    CORNSILK = auto()
    CRIMSON = auto()
    CYAN = auto()
    DARK_BLUE = auto()
    DARK_CYAN = auto()
    DARK_GOLDEN_ROD = auto()
    DARK_GREY = auto()
    DARK_GREEN = auto()
    DARK_KHAKI = auto()
    DARK_MAGENTA = auto()
    DARK_OLIVE_GREEN = auto()
    DARK_ORANGE = auto()
    DARK_ORCHID = auto()
    DARK_RED = auto()
    DARK_SALMON = auto()
    DARK_SLATE_BLUE = auto()
    DARK_SLATE_GREY = auto()
    DARK_TURQUOISE = auto()
    DARK_VIOLET = auto()
    DEEP_PINK = auto()
    DEEP_SKY_BLUE = auto()
    DIM_GREY = auto()
    DODGER_BLUE = auto()
    FIRE_BRICK = auto()
    FLORAL_WHITE = auto()
    FOREST_GREEN = auto()
    FUCHSIA = auto()
    GAINSBORO = auto()
    GHOST_WHITE = auto()
    GOLD = auto()
    GOLDEN_ROD = auto()
    GREY = auto()
    GREEN = auto()
    GREEN_YELLOW = auto()
    HONEY_DEW = auto()
    HOT_PINK = auto()
    INDIAN_RED = auto()
    INDIGO = auto()
    IVORY = auto()
    KHAKI = auto()
    LAVENDER = auto()
    LAVENDER_BLUSH = auto()
    LAWN_GREEN = auto()
    LEMON_CHIFFON = auto()
    LIGHT_BLUE = auto()
    LIGHT_CORAL = auto()
    LIGHT_CYAN = auto()
    LIGHT_GOLDEN_ROD_YELLOW = auto()
    LIGHT_GREY = auto()
    LIGHT_GREEN = auto()
    LIGHT_PINK = auto()
    LIGHT_SALMON = auto()
    LIGHT_SEA_GREEN = auto()
    LIGHT_SKY_BLUE = auto()
    LIGHT_SLATE_GREY = auto()
    LIGHT_STEEL_BLUE = auto()
    LIGHT_YELLOW = auto()
    LIME = auto()
    LIME_GREEN = auto()
    LINEN = auto()
    MAGENTA = auto()
    MAROON = auto()
    MEDIUM_AQUA_MARINE = auto()
    MEDIUM_BLUE = auto()
    MEDIUM_ORCHID = auto()
    MEDIUM_PURPLE = auto()
    MEDIUM_SEA_GREEN = auto()
    MEDIUM_SLATE_BLUE = auto()
    MEDIUM_SPRING_GREEN = auto()
    MEDIUM_TURQUOISE = auto()
    MEDIUM_VIOLET_RED = auto()
    MIDNIGHT_BLUE = auto()
    MINT_CREAM = auto()
    MISTY_ROSE = auto()
    MOCCASIN = auto()
    NAVAJO_WHITE = auto()
    NAVY = auto()
    OLD_LACE = auto()
    OLIVE = auto()
    OLIVE_DRAB = auto()
    ORANGE = auto()
    ORANGE_RED = auto()
    ORCHID = auto()
    PALE_GOLDEN_ROD = auto()
    PALE_GREEN = auto()
    PALE_TURQUOISE = auto()
    PALE_VIOLET_RED = auto()
    PAPAYA_WHIP = auto()
    PEACH_PUFF = auto()
    PERU = auto()
    PINK = auto()
    PLUM = auto()
    POWDER_BLUE = auto()
    PURPLE = auto()
    REBECCA_PURPLE = auto()
    RED = auto()
    ROSY_BROWN = auto()
    ROYAL_BLUE = auto()
    SADDLE_BROWN = auto()
    SALMON = auto()
    SANDY_BROWN = auto()
    SEA_GREEN = auto()
    SEA_SHELL = auto()
    SIENNA = auto()
    SILVER = auto()
    SKY_BLUE = auto()
    SLATE_BLUE = auto()
    SLATE_GREY = auto()
    SNOW = auto()
    SPRING_GREEN = auto()
    STEEL_BLUE = auto()
    TAN = auto()
    TEAL = auto()
    THISTLE = auto()
    TOMATO = auto()
    TURQUOISE = auto()
    VIOLET = auto()
    WHEAT = auto()
    WHITE = auto()
    WHITE_SMOKE = auto()
    YELLOW = auto()
    YELLOW_GREEN = auto()


_PALETTE: dict[Color, tuple[int, int, int]] = {
    Color.ALICE_BLUE: (240, 248, 255),
    Color.ANTIQUE_WHITE: (250, 235, 215),
    Color.AQUA: (0, 255, 255),
    Color.AQUAMARINE: (127, 255, 212),
    Color.AZURE: (240, 255, 255),
    Color.BEIGE: (245, 245, 220),
    Color.BISQUE: (255, 228, 196),
    Color.BLACK: (0, 0, 0),
    Color.BLANCHED_ALMOND: (255, 235, 205),
    Color.BLUE: (0, 0, 255),
    Color.BLUE_VIOLET: (138, 43, 226),
    Color.BROWN: (165, 42, 42),
    Color.BURLY_WOOD: (222, 184, 135),
    Color.CADET_BLUE: (95, 158, 160),
    Color.CHARTREUSE: (127, 255, 0),
    Color.CHOCOLATE: (210, 105, 30),
    Color.CORAL: (255, 127, 80),
    Color.CORNFLOWER_BLUE: (100, 149, 237),
    Color.CORNSILK: (255, 248, 220),
    Color.CRIMSON: (220, 20, 60),
    Color.CYAN: (0, 255, 255),
    Color.DARK_BLUE: (0, 0, 139),
    Color.DARK_CYAN: (0, 139, 139),
    Color.DARK_GOLDEN_ROD: (184, 134, 11),
    Color.DARK_GREY: (169, 169, 169),
    Color.DARK_GREEN: (0, 100, 0),
    Color.DARK_KHAKI: (189, 183, 107),
    Color.DARK_MAGENTA: (139, 0, 139),
    Color.DARK_OLIVE_GREEN: (85, 107, 47),
    Color.DARK_ORANGE: (255, 140, 0),
    Color.DARK_ORCHID: (153, 50, 204),
    Color.DARK_RED: (139, 0, 0),
    Color.DARK_SALMON: (143, 188, 143),
    Color.DARK_SLATE_BLUE: (72, 61, 139),
    Color.DARK_SLATE_GREY: (47, 79, 79),
    Color.DARK_TURQUOISE: (0, 206, 209),
    Color.DARK_VIOLET: (148, 0, 211),
    Color.DEEP_PINK: (255, 20, 147),
    Color.DEEP_SKY_BLUE: (0, 191, 255),
    Color.DIM_GREY: (105, 105, 105),
    Color.DODGER_BLUE: (30, 144, 255),
    Color.FIRE_BRICK: (178, 34, 34),
    Color.FLORAL_WHITE: (255, 250, 240),
    Color.FOREST_GREEN: (34, 139, 34),
    Color.FUCHSIA: (255, 0, 255),
    Color.GAINSBORO: (220, 220, 220),
    Color.GHOST_WHITE: (248, 248, 255),
    Color.GOLD: (255, 215, 0),
    Color.GOLDEN_ROD: (218, 165, 32),
    Color.GREY: (128, 128, 128),
    Color.GREEN: (0, 128, 0),
    Color.GREEN_YELLOW: (173, 255, 47),
    Color.HONEY_DEW: (240, 255, 240),
    Color.HOT_PINK: (255, 105, 180),
    Color.INDIAN_RED: (205, 92, 92),
    Color.INDIGO: (75, 0, 130),
    Color.IVORY: (255, 255, 240),
    Color.KHAKI: (240, 230, 140),
    Color.LAVENDER: (230, 230, 250),
    Color.LAVENDER_BLUSH: (255, 240, 245),
    Color.LAWN_GREEN: (124, 252, 0),
    Color.LEMON_CHIFFON: (255, 250, 205),
    Color.LIGHT_BLUE: (173, 216, 230),
    Color.LIGHT_CORAL: (240, 128, 128),
    Color.LIGHT_CYAN: (224, 255, 255),
    Color.LIGHT_GOLDEN_ROD_YELLOW: (250, 250, 210),
    Color.LIGHT_GREY: (211, 211, 211),
    Color.LIGHT_GREEN: (144, 238, 144),
    Color.LIGHT_PINK: (255, 182, 193),
    Color.LIGHT_SALMON: (255, 160, 122),
    Color.LIGHT_SEA_GREEN: (32, 178, 170),
    Color.LIGHT_SKY_BLUE: (135, 206, 250),
    Color.LIGHT_SLATE_GREY: (119, 136, 153),
    Color.LIGHT_STEEL_BLUE: (176, 196, 222),
    Color.LIGHT_YELLOW: (255, 255, 224),
    Color.LIME: (0, 255, 0),
    Color.LIME_GREEN: (50, 205, 50),
    Color.LINEN: (250, 240, 230),
    Color.MAGENTA: (255, 0, 255),
    Color.MAROON: (128, 0, 0),
    Color.MEDIUM_AQUA_MARINE: (102, 205, 170),
    Color.MEDIUM_BLUE: (0, 0, 205),
    Color.MEDIUM_ORCHID: (186, 85, 211),
    Color.MEDIUM_PURPLE: (147, 112, 219),
    Color.MEDIUM_SEA_GREEN: (60, 179, 113),
    Color.MEDIUM_SLATE_BLUE: (123, 104, 238),
    Color.MEDIUM_SPRING_GREEN: (0, 250, 154),
    Color.MEDIUM_TURQUOISE: (72, 209, 204),
    Color.MEDIUM_VIOLET_RED: (199, 21, 133),
    Color.MIDNIGHT_BLUE: (25, 25, 112),
    Color.MINT_CREAM: (245, 255, 250),
    Color.MISTY_ROSE: (255, 228, 225),
    Color.MOCCASIN: (255, 228, 181),
    Color.NAVAJO_WHITE: (255, 222, 173),
    Color.NAVY: (0, 0, 128),
    Color.OLD_LACE: (253, 245, 230),
    Color.OLIVE: (128, 128, 0),
    Color.OLIVE_DRAB: (107, 142, 35),
    Color.ORANGE: (255, 165, 0),
    Color.ORANGE_RED: (255, 69, 0),
    Color.ORCHID: (218, 112, 214),
    Color.PALE_GOLDEN_ROD: (238, 232, 170),
    Color.PALE_GREEN: (152, 251, 152),
    Color.PALE_TURQUOISE: (175, 238, 238),
    Color.PALE_VIOLET_RED: (219, 112, 147),
    Color.PAPAYA_WHIP: (255, 239, 213),
    Color.PEACH_PUFF: (255, 218, 185),
    Color.PERU: (205, 133, 63),
    Color.PINK: (255, 192, 203),
    Color.PLUM: (221, 160, 221),
    Color.POWDER_BLUE: (176, 224, 230),
    Color.PURPLE: (128, 0, 128),
    Color.REBECCA_PURPLE: (102, 51, 153),
    Color.RED: (255, 0, 0),
    Color.ROSY_BROWN: (188, 143, 143),
    Color.ROYAL_BLUE: (65, 105, 225),
    Color.SADDLE_BROWN: (139, 69, 19),
    Color.SALMON: (250, 128, 114),
    Color.SANDY_BROWN: (244, 164, 96),
    Color.SEA_GREEN: (46, 139, 87),
    Color.SEA_SHELL: (255, 245, 238),
    Color.SIENNA: (160, 82, 45),
    Color.SILVER: (192, 192, 192),
    Color.SKY_BLUE: (135, 206, 235),
    Color.SLATE_BLUE: (106, 90, 205),
    Color.SLATE_GREY: (112, 128, 144),
    Color.SNOW: (255, 250, 250),
    Color.SPRING_GREEN: (0, 255, 127),
    Color.STEEL_BLUE: (70, 130, 180),
    Color.TAN: (210, 180, 140),
    Color.TEAL: (0, 128, 128),
    Color.THISTLE: (216, 191, 216),
    Color.TOMATO: (255, 99, 71),
    Color.TURQUOISE: (64, 224, 208),
    Color.VIOLET: (238, 130, 238),
    Color.WHEAT: (245, 222, 179),
    Color.WHITE: (255, 255, 255),
    Color.WHITE_SMOKE: (245, 245, 245),
    Color.YELLOW: (255, 255, 0),
    Color.YELLOW_GREEN: (154, 205, 50),
}

OPAQUE = 255.0


@dataclass(frozen=True)
class RGB:
    """An opaque colour with 0-255 channels."""

    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0

    @classmethod
    def from_color(cls, color: Color) -> RGB:
        """Build from a named colour, dropping its alpha."""
        rgba = convert_color(color)
        return cls(rgba.red, rgba.green, rgba.blue)


@dataclass(frozen=True)
class RGBA:
    """A colour with 0-255 channels and alpha; opaque unless told otherwise."""

    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0
    alpha: float = OPAQUE

    @classmethod
    def from_color(cls, color: Color) -> RGBA:
        """Build from a named colour."""
        return convert_color(color)

    @classmethod
    def from_rgb(cls, rgb: RGB) -> RGBA:
        """Build a fully opaque colour from an RGB value."""
        return cls(rgb.red, rgb.green, rgb.blue, OPAQUE)


def convert_color(color: Color) -> RGBA:
    """Return the RGBA value of a named colour; unknown names give transparent black."""
    channels = _PALETTE.get(color) if isinstance(color, Color) else None
    if channels is None:
        return RGBA(0.0, 0.0, 0.0, 0.0)
    red, green, blue = channels
    return RGBA(float(red), float(green), float(blue))