"""
Visual Constants
================
Every color, size and spacing used by the login screen lives here.

Why is this file needed?
------------------------
1. Single source: widgets never hardcode a color or a radius, they read it
   from this module.
2. Testability: the relations between surfaces (fill vs. border opacity,
   card radius vs. inner radius) can be checked without creating widgets.

Exports:
    Rgba: Immutable RGBA color with a fractional alpha.
    GlassStyle: Fill, border and corner radius of one glass surface.
    CARD_STYLE, INPUT_STYLE, BUTTON_STYLE, LOGO_STYLE: The four surfaces.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from PySide6.QtGui import QColor, QFont


@dataclass(frozen=True)
class Rgba:
    """RGB channels in 0..255 with an alpha in 0.0..1.0."""
    r: int
    g: int
    b: int
    a: float = 1.0

    def __post_init__(self) -> None:
        for name, channel in (("r", self.r), ("g", self.g), ("b", self.b)):
            if not 0 <= channel <= 255:
                raise ValueError(f"Channel '{name}' must be in 0..255, got {channel}.")
        if not 0.0 <= self.a <= 1.0:
            raise ValueError(f"Alpha must be in 0.0..1.0, got {self.a}.")

    def with_opacity(self, opacity: float) -> Rgba:
        """Same color with a different alpha."""
        return Rgba(self.r, self.g, self.b, opacity)

    def to_qcolor(self) -> QColor:
        color = QColor(self.r, self.g, self.b)
        color.setAlphaF(self.a)
        return color


@dataclass(frozen=True)
class GlassStyle:
    """
    Appearance of a glass surface.

    Attributes:
        fill: Translucent tint painted over the backdrop.
        border: Color of the 1px outline.
        radius: Corner radius in pixels, or None for a circle.
    """
    fill: Rgba
    border: Rgba
    radius: Optional[float] = None

    @property
    def is_circle(self) -> bool:
        return self.radius is None


# -------------------------------------------------------------------------------
# Colors
# -------------------------------------------------------------------------------

WHITE = Rgba(255, 255, 255, 1.0)
TRANSPARENT = Rgba(0, 0, 0, 0.0)

BACKGROUND_COLOR = Rgba(67, 120, 38, 1.0)

ORB_TOP_LEFT_COLOR = Rgba(24, 255, 243, 0.3)
ORB_BOTTOM_RIGHT_COLOR = Rgba(185, 246, 255, 0.3)

SUBTITLE_COLOR = WHITE.with_opacity(0.7)
HINT_COLOR = WHITE.with_opacity(0.54)

# -------------------------------------------------------------------------------
# Background orbs
# -------------------------------------------------------------------------------

ORB_DIAMETER = 800
ORB_STOPS = (0.0, 0.4, 1.0)
ORB_MID_OPACITY = 0.1

# Offsets relative to the background edges (negative = off-canvas)
ORB_TOP_LEFT_OFFSET = (-400, 0)  # (top, left)
ORB_BOTTOM_RIGHT_OFFSET = (-50, -30)  # (bottom, right)

# -------------------------------------------------------------------------------
# Glass surfaces
# -------------------------------------------------------------------------------

CARD_STYLE = GlassStyle(fill=WHITE.with_opacity(0.1), border=WHITE.with_opacity(0.2), radius=30)
INPUT_STYLE = GlassStyle(fill=WHITE.with_opacity(0.1), border=WHITE.with_opacity(0.1), radius=15)
BUTTON_STYLE = GlassStyle(fill=WHITE.with_opacity(0.2), border=WHITE.with_opacity(0.2), radius=15)
LOGO_STYLE = GlassStyle(fill=WHITE.with_opacity(0.2), border=WHITE.with_opacity(0.3), radius=None)

BUTTON_PRESSED_FILL = WHITE.with_opacity(0.3)

CARD_BLUR_SIGMA = 15.0
CARD_PADDING = 30

INPUT_PADDING_H = 20
INPUT_PADDING_V = 15

BUTTON_HEIGHT = 55
BUTTON_LETTER_SPACING = 1.2

LOGO_DIAMETER = 80
LOGO_ICON_SIZE = 40

BORDER_WIDTH = 1.0

# -------------------------------------------------------------------------------
# Typography
# -------------------------------------------------------------------------------

FONT_FAMILY = "Poppins"

TITLE_TEXT = "Glassmorphism UI"
TITLE_FONT_SIZE = 24

SUBTITLE_TEXT = "Notice how the background blurs behind this card."
SUBTITLE_FONT_SIZE = 13

USERNAME_HINT = "Username"
PASSWORD_HINT = "Password"
LOGIN_LABEL = "LOGIN"

# -------------------------------------------------------------------------------
# Layout
# -------------------------------------------------------------------------------

SCREEN_PADDING_H = 24
LOGO_TO_CARD_SPACING = 30
TITLE_TO_SUBTITLE_SPACING = 8
SUBTITLE_TO_INPUT_SPACING = 30
INPUT_TO_INPUT_SPACING = 16
INPUT_TO_BUTTON_SPACING = 30

WINDOW_TITLE = "Glassmorphism Login"
WINDOW_SIZE = (430, 860)


def make_font(pixel_size: int, bold: bool = False, letter_spacing: float = 0.0) -> QFont:
    """Font in the UI family; Qt substitutes the platform sans-serif when it is not installed."""
    font = QFont(FONT_FAMILY)
    font.setStyleHint(QFont.StyleHint.SansSerif)
    font.setPixelSize(pixel_size)
    font.setBold(bold)
    if letter_spacing:
        font.setLetterSpacing(QFont.SpacingType.AbsoluteSpacing, letter_spacing)
    return font
