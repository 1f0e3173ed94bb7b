"""Drawing surface used by the controller, and its QPainter implementation.

Angles are radians measured clockwise from 12 o'clock. Colors are ``(r, g, b)``
tuples with 0-255 channels.
"""

import math
from typing import Protocol

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QColor, QFont, QPainter, QPen


class Surface(Protocol):
    def clear(self, color) -> None: ...

    def fill_circle(self, center, radius, color) -> None: ...

    def stroke_arc(self, center, radius, start_angle, end_angle, color, thickness, alpha=1.0) -> None: ...

    def draw_text(self, text, center, font_size, color) -> None: ...


def _qcolor(color, alpha=1.0):
    c = QColor(*color)
    c.setAlphaF(max(0.0, min(1.0, alpha)))
    return c


# Qt arcs start at 3 o'clock, run counter-clockwise, and are given in 1/16ths of a degree.
def to_qt_angles(start_angle, end_angle):
    start = round((90 - math.degrees(start_angle)) * 16)
    span = round(-math.degrees(end_angle - start_angle) * 16)
    return start, span


class QtSurface:
    """Surface backed by a QPainter that is already active on a widget."""

    def __init__(self, painter: QPainter, width, height, font_family="monospace"):
        self.painter = painter
        self.width = width
        self.height = height
        self.font_family = font_family
        painter.setRenderHint(QPainter.Antialiasing, True)

    def clear(self, color):
        self.painter.fillRect(QRectF(0, 0, self.width, self.height), _qcolor(color))

    def fill_circle(self, center, radius, color):
        p = self.painter
        p.save()
        p.setPen(Qt.NoPen)
        p.setBrush(_qcolor(color))
        p.drawEllipse(QPointF(*center), radius, radius)
        p.restore()

    def stroke_arc(self, center, radius, start_angle, end_angle, color, thickness, alpha=1.0):
        if radius <= 0 or thickness <= 0 or end_angle <= start_angle:
            return
        p = self.painter
        p.save()
        pen = QPen(_qcolor(color, alpha))
        pen.setWidthF(thickness)
        pen.setCapStyle(Qt.FlatCap)
        p.setPen(pen)
        p.setBrush(Qt.NoBrush)
        start, span = to_qt_angles(start_angle, end_angle)
        rect = QRectF(center[0] - radius, center[1] - radius, radius * 2, radius * 2)
        p.drawArc(rect, start, span)
        p.restore()

    def draw_text(self, text, center, font_size, color):
        if font_size < 1:
            return
        p = self.painter
        p.save()
        font = QFont(self.font_family)
        font.setStyleHint(QFont.Monospace)
        font.setPixelSize(max(1, int(font_size)))
        p.setFont(font)
        p.setPen(_qcolor(color))
        # Box big enough for any clock string, centered on the target point
        w = font_size * 8
        h = font_size * 2
        p.drawText(QRectF(center[0] - w / 2, center[1] - h / 2, w, h), Qt.AlignCenter, text)
        p.restore()
