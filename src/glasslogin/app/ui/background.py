from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt, QRect, QRectF, Signal
from PySide6.QtGui import QImage, QPainter, QPaintEvent, QResizeEvent
from PySide6.QtWidgets import QWidget

from glasslogin.app.ui.gradient import RadialGradientSpec, orb_gradient
from glasslogin.app.ui.style import (
    Rgba, BACKGROUND_COLOR, ORB_DIAMETER,
    ORB_TOP_LEFT_COLOR, ORB_BOTTOM_RIGHT_COLOR,
    ORB_TOP_LEFT_OFFSET, ORB_BOTTOM_RIGHT_OFFSET,
)

logger = logging.getLogger(__name__)


class GradientOrb(QWidget):
    """A fixed-size circle filled with a radial gradient fading to transparent."""
    def __init__(self, color: Rgba, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._gradient = orb_gradient(color)
        self.setFixedSize(ORB_DIAMETER, ORB_DIAMETER)
        self.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents)

    def gradient(self) -> RadialGradientSpec:
        return self._gradient

    def paint_into(self, painter: QPainter, rect: QRect | QRectF) -> None:
        """Paint the orb inside `rect` with an existing painter."""
        rect = QRectF(rect)
        gradient = self._gradient.to_qgradient(rect.center(), rect.width() / 2)
        painter.save()
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(gradient)
        painter.drawEllipse(rect)
        painter.restore()

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        self.paint_into(painter, self.rect())
        painter.end()


class VibrantBackground(QWidget):
    """
    Opaque colored surface with two oversized gradient orbs.

    The orbs are anchored to the top-left and bottom-right corners and hang
    partially off-canvas so that mostly their fading edges are visible.
    Glass surfaces sample `render_backdrop()` to blur what is behind them.
    """
    backdrop_changed = Signal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setAttribute(Qt.WidgetAttribute.WA_OpaquePaintEvent)

        self.top_left_orb = GradientOrb(ORB_TOP_LEFT_COLOR, self)
        self.bottom_right_orb = GradientOrb(ORB_BOTTOM_RIGHT_COLOR, self)

        self._backdrop: Optional[QImage] = None
        self._place_orbs()

    def orbs(self) -> list[GradientOrb]:
        return [self.top_left_orb, self.bottom_right_orb]

    def render_backdrop(self) -> QImage:
        """The background as an image at the current size (cached until resize)."""
        if self._backdrop is None or self._backdrop.size() != self.size():
            logger.debug(f"Rendering backdrop at {self.width()}x{self.height()}.")
            self._place_orbs()
            image = QImage(self.size(), QImage.Format.Format_RGBA8888)
            painter = QPainter(image)
            self._paint_base(painter)
            for orb in self.orbs():
                orb.paint_into(painter, orb.geometry())
            painter.end()
            self._backdrop = image
        return self._backdrop

    # ---- Qt events ----

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        self._paint_base(painter)
        painter.end()

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        self._place_orbs()
        self._backdrop = None
        self.backdrop_changed.emit()

    # ---- internals ----

    def _paint_base(self, painter: QPainter) -> None:
        painter.fillRect(self.rect(), BACKGROUND_COLOR.to_qcolor())

    def _place_orbs(self) -> None:
        top, left = ORB_TOP_LEFT_OFFSET
        self.top_left_orb.move(left, top)

        bottom, right = ORB_BOTTOM_RIGHT_OFFSET
        self.bottom_right_orb.move(
            self.width() - right - ORB_DIAMETER,
            self.height() - bottom - ORB_DIAMETER,
        )
