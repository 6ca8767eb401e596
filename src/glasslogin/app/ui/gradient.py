from __future__ import annotations

from dataclasses import dataclass

from PySide6.QtCore import QPointF
from PySide6.QtGui import QRadialGradient

from glasslogin.app.ui.style import Rgba, TRANSPARENT, ORB_STOPS, ORB_MID_OPACITY


@dataclass(frozen=True)
class GradientStop:
    position: float
    color: Rgba


@dataclass(frozen=True)
class RadialGradientSpec:
    """Ordered color stops of a radial gradient, positions in 0..1 of the radius."""
    stops: tuple[GradientStop, ...]

    def opacities(self) -> list[float]:
        return [stop.color.a for stop in self.stops]

    def positions(self) -> list[float]:
        return [stop.position for stop in self.stops]

    def to_qgradient(self, center: QPointF, radius: float) -> QRadialGradient:
        gradient = QRadialGradient(center, radius)
        for stop in self.stops:
            gradient.setColorAt(stop.position, stop.color.to_qcolor())
        return gradient


def orb_gradient(color: Rgba) -> RadialGradientSpec:
    """
    Gradient of a background orb: the full color at the center, 10% of it at
    40% of the radius, and transparent at the edge.
    """
    center, middle, edge = ORB_STOPS
    return RadialGradientSpec(stops=(
        GradientStop(center, color),
        GradientStop(middle, color.with_opacity(ORB_MID_OPACITY)),
        GradientStop(edge, TRANSPARENT),
    ))
