# ocgui/styles.py
import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Union

_HEX_PATTERN = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


class ContentJustification(Enum):
    """How a box distributes its children, as the CSS `justify-content` value."""
    FLEX_START = "flex-start !important"
    FLEX_END = "flex-end !important"
    CENTER = "center !important"
    SPACE_BETWEEN = "space-between !important"
    SPACE_AROUND = "space-around !important"
    SPACE_EVENLY = "space-evenly !important"


class Color(Enum):
    """CSS named colors. Use `Color.hex()` for anything else."""
    # Basic
    BLACK = "black"
    SILVER = "silver"
    GRAY = "gray"
    GREY = "grey"
    WHITE = "white"
    MAROON = "maroon"
    RED = "red"
    PURPLE = "purple"
    FUCHSIA = "fuchsia"
    GREEN = "green"
    LIME = "lime"
    OLIVE = "olive"
    YELLOW = "yellow"
    NAVY = "navy"
    BLUE = "blue"
    TEAL = "teal"
    AQUA = "aqua"
    # Extended
    ALICE_BLUE = "aliceblue"
    ANTIQUE_WHITE = "antiquewhite"
    AQUAMARINE = "aquamarine"
    AZURE = "azure"
    BEIGE = "beige"
    BISQUE = "bisque"
    BLANCHED_ALMOND = "blanchedalmond"
    BLUE_VIOLET = "blueviolet"
    BROWN = "brown"
    BURLY_WOOD = "burlywood"
    CADET_BLUE = "cadetblue"
    CHARTREUSE = "chartreuse"
    CHOCOLATE = "chocolate"
    CORAL = "coral"
    CORNFLOWER_BLUE = "cornflowerblue"
    CORNSILK = "cornsilk"
    CRIMSON = "crimson"
    CYAN = "cyan"
    DARK_BLUE = "darkblue"
    DARK_CYAN = "darkcyan"
    DARK_GOLDENROD = "darkgoldenrod"
    DARK_GRAY = "darkgray"
    DARK_GREY = "darkgrey"
    DARK_GREEN = "darkgreen"
    DARK_KHAKI = "darkkhaki"
    DARK_MAGENTA = "darkmagenta"
    DARK_OLIVE_GREEN = "darkolivegreen"
    DARK_ORANGE = "darkorange"
    DARK_ORCHID = "darkorchid"
    DARK_RED = "darkred"
    DARK_SALMON = "darksalmon"
    DARK_SEA_GREEN = "darkseagreen"
    DARK_SLATE_BLUE = "darkslateblue"
    DARK_SLATE_GRAY = "darkslategray"
    DARK_SLATE_GREY = "darkslategrey"
    DARK_TURQUOISE = "darkturquoise"
    DARK_VIOLET = "darkviolet"
    DEEP_PINK = "deeppink"
    DEEP_SKY_BLUE = "deepskyblue"
    DIM_GRAY = "dimgray"
    DIM_GREY = "dimgrey"
    DODGER_BLUE = "dodgerblue"
    FIRE_BRICK = "firebrick"
    FLORAL_WHITE = "floralwhite"
    FOREST_GREEN = "forestgreen"
    GAINSBORO = "gainsboro"
    GHOST_WHITE = "ghostwhite"
    GOLD = "gold"
    GOLDENROD = "goldenrod"
    GREEN_YELLOW = "greenyellow"
    HONEYDEW = "honeydew"
    HOT_PINK = "hotpink"
    INDIAN_RED = "indianred"
    INDIGO = "indigo"
    IVORY = "ivory"
    KHAKI = "khaki"
    LAVENDER = "lavender"
    LAVENDER_BLUSH = "lavenderblush"
    LAWN_GREEN = "lawngreen"
    LEMON_CHIFFON = "lemonchiffon"
    LIGHT_BLUE = "lightblue"
    LIGHT_CORAL = "lightcoral"
    LIGHT_CYAN = "lightcyan"
    LIGHT_GOLDENROD_YELLOW = "lightgoldenrodyellow"
    LIGHT_GRAY = "lightgray"
    LIGHT_GREY = "lightgrey"
    LIGHT_GREEN = "lightgreen"
    LIGHT_PINK = "lightpink"
    LIGHT_SALMON = "lightsalmon"
    LIGHT_SEA_GREEN = "lightseagreen"
    LIGHT_SKY_BLUE = "lightskyblue"
    LIGHT_SLATE_GRAY = "lightslategray"
    LIGHT_SLATE_GREY = "lightslategrey"
    LIGHT_STEEL_BLUE = "lightsteelblue"
    LIGHT_YELLOW = "lightyellow"
    LIME_GREEN = "limegreen"
    LINEN = "linen"
    MAGENTA = "magenta"
    MEDIUM_AQUAMARINE = "mediumaquamarine"
    MEDIUM_BLUE = "mediumblue"
    MEDIUM_ORCHID = "mediumorchid"
    MEDIUM_PURPLE = "mediumpurple"
    MEDIUM_SEA_GREEN = "mediumseagreen"
    MEDIUM_SLATE_BLUE = "mediumslateblue"
    MEDIUM_SPRING_GREEN = "mediumspringgreen"
    MEDIUM_TURQUOISE = "mediumturquoise"
    MEDIUM_VIOLET_RED = "mediumvioletred"
    MIDNIGHT_BLUE = "midnightblue"
    MINT_CREAM = "mintcream"
    MISTY_ROSE = "mistyrose"
    MOCCASIN = "moccasin"
    NAVAJO_WHITE = "navajowhite"
    OLD_LACE = "oldlace"
    OLIVE_DRAB = "olivedrab"
    ORANGE = "orange"
    ORANGE_RED = "orangered"
    ORCHID = "orchid"
    PALE_GOLDENROD = "palegoldenrod"
    PALE_GREEN = "palegreen"
    PALE_TURQUOISE = "paleturquoise"
    PALE_VIOLET_RED = "palevioletred"
    PAPAYA_WHIP = "papayawhip"
    PEACH_PUFF = "peachpuff"
    PERU = "peru"
    PINK = "pink"
    PLUM = "plum"
    POWDER_BLUE = "powderblue"
    ROSY_BROWN = "rosybrown"
    ROYAL_BLUE = "royalblue"
    SADDLE_BROWN = "saddlebrown"
    SALMON = "salmon"
    SANDY_BROWN = "sandybrown"
    SEA_GREEN = "seagreen"
    SEASHELL = "seashell"
    SIENNA = "sienna"
    SKY_BLUE = "skyblue"
    SLATE_BLUE = "slateblue"
    SLATE_GRAY = "slategray"
    SLATE_GREY = "slategrey"
    SNOW = "snow"
    SPRING_GREEN = "springgreen"
    STEEL_BLUE = "steelblue"
    TAN = "tan"
    THISTLE = "thistle"
    TOMATO = "tomato"
    TURQUOISE = "turquoise"
    VIOLET = "violet"
    WHEAT = "wheat"
    WHITE_SMOKE = "whitesmoke"
    YELLOW_GREEN = "yellowgreen"

    @property
    def css(self) -> str:
        return self.value

    @staticmethod
    def hex(code: str) -> "HexColor":
        """A color given as "#rgb", "#rrggbb" or "#rrggbbaa"."""
        return HexColor(code)


@dataclass(frozen=True)
class HexColor:
    code: str

    def __post_init__(self):
        if not _HEX_PATTERN.match(self.code):
            raise ValueError(f"Invalid hex color: {self.code!r}")

    @property
    def css(self) -> str:
        return self.code.lower()


class FontFamily(Enum):
    SANS_SERIF = "sans-serif"
    SERIF = "serif"
    MONOSPACE = "monospace"

    @property
    def css(self) -> str:
        return self.value


class FontWeight(Enum):
    LIGHTER = "lighter"
    NORMAL = "normal"
    BOLD = "bold"
    BOLDER = "bolder"

    @property
    def css(self) -> str:
        return self.value


class BorderStyle(Enum):
    NONE = "none"
    DOTTED = "dotted"
    DASHED = "dashed"
    SOLID = "solid"

    @property
    def css(self) -> str:
        return self.value


ColorValue = Union[Color, HexColor]


@dataclass(frozen=True)
class Style:
    """
    A single CSS property to apply to a control.

    Build one with the class methods, e.g. `Style.font_size(14)` or
    `Style.background_color(Color.LIGHT_BLUE)`, and pass it to
    `Control.set_style()`.
    """
    name: str
    value: str

    @property
    def css(self) -> Dict[str, str]:
        return {self.name: self.value}

    # Colors

    @classmethod
    def background_color(cls, color: ColorValue) -> "Style":
        return cls("background-color", color.css)

    @classmethod
    def foreground_color(cls, color: ColorValue) -> "Style":
        return cls("color", color.css)

    # Font

    @classmethod
    def font_family(cls, family: Union[FontFamily, str]) -> "Style":
        return cls("font-family", family.css if isinstance(family, FontFamily) else str(family))

    @classmethod
    def font_size(cls, size: int) -> "Style":
        return cls("font-size", _pixels(size))

    @classmethod
    def font_weight(cls, weight: Union[FontWeight, int]) -> "Style":
        return cls("font-weight", weight.css if isinstance(weight, FontWeight) else str(int(weight)))

    # Border

    @classmethod
    def border_style(cls, style: BorderStyle) -> "Style":
        return cls("border-style", style.css)

    @classmethod
    def border_width(cls, width: int) -> "Style":
        return cls("border-width", _pixels(width))

    @classmethod
    def border_radius(cls, radius: int) -> "Style":
        return cls("border-radius", _pixels(radius))

    @classmethod
    def border_color(cls, color: ColorValue) -> "Style":
        return cls("border-color", color.css)


def _pixels(value: int) -> str:
    return f"{int(value)}px"
