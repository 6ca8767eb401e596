"""
Glass Surfaces
==============
Translucent, bordered widgets that make up the frosted glass look.

Classes:
    GlassSurface: Base widget painting a tint and a thin border.
    GlassCard: Surface that also blurs the background behind it.
    GlassInput: Text field on a glass surface.
    GlassButton: Push button painted as glass.
    GlassLogo: Circular glass badge with the "blur on" icon.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from PySide6.QtCore import Qt, QPoint, QPointF, QRect, QRectF, Slot
from PySide6.QtGui import QImage, QPainter, QPainterPath, QPaintEvent, QPalette, QPen
from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLayout, QLineEdit, QPushButton, QSizePolicy

from glasslogin.app.ui.blur import blurred_region
from glasslogin.app.ui.style import (
    GlassStyle, Rgba, WHITE, TRANSPARENT, HINT_COLOR, BORDER_WIDTH,
    CARD_STYLE, INPUT_STYLE, BUTTON_STYLE, LOGO_STYLE, BUTTON_PRESSED_FILL,
    CARD_BLUR_SIGMA, CARD_PADDING, INPUT_PADDING_H, INPUT_PADDING_V,
    BUTTON_HEIGHT, BUTTON_LETTER_SPACING, LOGO_DIAMETER, LOGO_ICON_SIZE,
    make_font,
)

if TYPE_CHECKING:
    from glasslogin.app.ui.background import VibrantBackground

logger = logging.getLogger(__name__)

INPUT_FONT_SIZE = 16
BUTTON_FONT_SIZE = 14


# -------------------------------------------------------------------------------
# Painting helpers
# -------------------------------------------------------------------------------

def glass_path(rect: QRect | QRectF, style: GlassStyle) -> QPainterPath:
    """Outline of a glass surface, inset by half the border so the stroke stays inside."""
    inset = BORDER_WIDTH / 2
    r = QRectF(rect).adjusted(inset, inset, -inset, -inset)
    path = QPainterPath()
    if style.is_circle:
        path.addEllipse(r)
    else:
        path.addRoundedRect(r, style.radius, style.radius)
    return path


def paint_glass(painter: QPainter, rect: QRect | QRectF, style: GlassStyle, fill: Optional[Rgba] = None) -> None:
    """Paint the tint and the border of a glass surface."""
    path = glass_path(rect, style)
    painter.save()
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)
    painter.fillPath(path, (fill or style.fill).to_qcolor())
    painter.strokePath(path, QPen(style.border.to_qcolor(), BORDER_WIDTH))
    painter.restore()


def blur_on_dots() -> list[tuple[float, float, float]]:
    """
    Dots of the "blur on" icon as (x, y, radius) in a 24x24 box.

    Large dots in the middle, medium ones around them, and tiny ones on the
    outer edge, so the icon itself looks blurred.
    """
    inner, ring, edge = {10.0, 14.0}, {6.0, 18.0}, {3.0, 21.0}
    coords = sorted(inner | ring | edge)
    dots = []
    for y in coords:
        for x in coords:
            if x in inner and y in inner:
                dots.append((x, y, 1.5))
            elif x in inner | ring and y in inner | ring:
                dots.append((x, y, 1.0))
            elif (x in edge and y in inner) or (y in edge and x in inner):
                dots.append((x, y, 0.5))
    return dots


# -------------------------------------------------------------------------------
# Widgets
# -------------------------------------------------------------------------------

class GlassSurface(QWidget):
    """A translucent tinted container with a translucent border."""
    def __init__(self, glass_style: GlassStyle, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.glass_style = glass_style

    def surface_path(self) -> QPainterPath:
        return glass_path(self.rect(), self.glass_style)

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.paint_backdrop(painter)
        paint_glass(painter, self.rect(), self.glass_style)
        self.paint_content(painter)
        painter.end()

    def paint_backdrop(self, painter: QPainter) -> None:
        """Hook for surfaces that show something behind their tint."""

    def paint_content(self, painter: QPainter) -> None:
        """Hook for surfaces that draw on top of their tint."""


class GlassCard(GlassSurface):
    """
    Rounded glass container that blurs the background behind it.

    The blur samples the image of a `VibrantBackground` registered with
    `set_backdrop_source()`. Without one, only the tint and border are painted.
    """
    def __init__(self, content: QWidget | QLayout, parent: QWidget | None = None) -> None:
        super().__init__(CARD_STYLE, parent)
        self.blur_sigma: float = CARD_BLUR_SIGMA

        layout = QVBoxLayout(self)
        layout.setContentsMargins(CARD_PADDING, CARD_PADDING, CARD_PADDING, CARD_PADDING)
        layout.setSpacing(0)
        if isinstance(content, QLayout):
            layout.addLayout(content)
        else:
            layout.addWidget(content)

        self._backdrop_source: Optional[VibrantBackground] = None
        self._blur_cache: Optional[tuple[tuple[int, ...], QImage]] = None

    def set_backdrop_source(self, background: VibrantBackground) -> None:
        if self._backdrop_source is not None:
            self._backdrop_source.backdrop_changed.disconnect(self.refresh_backdrop)
        self._backdrop_source = background
        background.backdrop_changed.connect(self.refresh_backdrop)
        self.refresh_backdrop()

    def backdrop_source(self) -> Optional[VibrantBackground]:
        return self._backdrop_source

    def backdrop_rect(self) -> QRect:
        """Geometry of this card in the coordinates of the backdrop source."""
        if self._backdrop_source is None:
            return QRect()
        origin = self._backdrop_source.mapFromGlobal(self.mapToGlobal(QPoint(0, 0)))
        return QRect(origin, self.size())

    def blurred_backdrop(self) -> Optional[QImage]:
        """The blurred background under the card, or None without a source."""
        if self._backdrop_source is None or self.width() <= 0 or self.height() <= 0:
            return None

        source = self._backdrop_source.render_backdrop()
        rect = self.backdrop_rect()
        key = (rect.x(), rect.y(), rect.width(), rect.height(), source.cacheKey())
        if self._blur_cache is not None and self._blur_cache[0] == key:
            return self._blur_cache[1]

        logger.debug(f"Re-blurring card backdrop at {rect.x()},{rect.y()} ({rect.width()}x{rect.height()}).")
        blurred = blurred_region(source, rect, self.blur_sigma)
        self._blur_cache = (key, blurred)
        return blurred

    @Slot()
    def refresh_backdrop(self) -> None:
        self._blur_cache = None
        self.update()

    def paint_backdrop(self, painter: QPainter) -> None:
        blurred = self.blurred_backdrop()
        if blurred is None:
            return
        painter.save()
        painter.setClipPath(self.surface_path())
        painter.drawImage(QPoint(0, 0), blurred)
        painter.restore()


class GlassInput(GlassSurface):
    """Frameless text field with a placeholder hint on a glass surface."""
    def __init__(self, hint: str, parent: QWidget | None = None) -> None:
        super().__init__(INPUT_STYLE, parent)

        self.line_edit = QLineEdit(self)
        self.line_edit.setPlaceholderText(hint)
        self.line_edit.setFrame(False)
        self.line_edit.setFont(make_font(INPUT_FONT_SIZE))

        palette = self.line_edit.palette()
        palette.setColor(QPalette.ColorRole.Base, TRANSPARENT.to_qcolor())
        palette.setColor(QPalette.ColorRole.Window, TRANSPARENT.to_qcolor())
        palette.setColor(QPalette.ColorRole.Text, WHITE.to_qcolor())
        palette.setColor(QPalette.ColorRole.PlaceholderText, HINT_COLOR.to_qcolor())
        self.line_edit.setPalette(palette)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(INPUT_PADDING_H, INPUT_PADDING_V, INPUT_PADDING_H, INPUT_PADDING_V)
        layout.addWidget(self.line_edit)

        self.setFocusProxy(self.line_edit)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)

    def hint(self) -> str:
        return self.line_edit.placeholderText()

    def text(self) -> str:
        return self.line_edit.text()


class GlassButton(QPushButton):
    """Full-width glass button with a centered bold label."""
    def __init__(self, label: str, parent: QWidget | None = None) -> None:
        super().__init__(label, parent)
        self.glass_style = BUTTON_STYLE
        self.setFixedHeight(BUTTON_HEIGHT)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        self.setFont(make_font(BUTTON_FONT_SIZE, bold=True, letter_spacing=BUTTON_LETTER_SPACING))
        self.setCursor(Qt.CursorShape.PointingHandCursor)

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        # pressed feedback
        fill = BUTTON_PRESSED_FILL if self.isDown() else None
        paint_glass(painter, self.rect(), self.glass_style, fill=fill)
        painter.setPen(WHITE.to_qcolor())
        painter.setFont(self.font())
        painter.drawText(self.rect(), Qt.AlignmentFlag.AlignCenter, self.text())
        painter.end()


class GlassLogo(GlassSurface):
    """Circular glass badge with a white "blur on" icon."""
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(LOGO_STYLE, parent)
        self.setFixedSize(LOGO_DIAMETER, LOGO_DIAMETER)

    def paint_content(self, painter: QPainter) -> None:
        scale = LOGO_ICON_SIZE / 24.0
        left = (self.width() - LOGO_ICON_SIZE) / 2
        top = (self.height() - LOGO_ICON_SIZE) / 2
        painter.save()
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(WHITE.to_qcolor())
        for x, y, r in blur_on_dots():
            painter.drawEllipse(QPointF(left + x * scale, top + y * scale), r * scale, r * scale)
        painter.restore()
