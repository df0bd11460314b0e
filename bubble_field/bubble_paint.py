# draws the bubble field with a QPainter, never touches the model

import math
from typing import Iterable

from PyQt5 import QtCore, QtGui

from bubble_field.bubble_model import Bubble
from CONFIG import *


def _circle(painter: QtGui.QPainter, x: float, y: float, radius: float) -> None:
    painter.drawEllipse(QtCore.QPointF(x, y), radius, radius)


def render_field(
    painter: QtGui.QPainter,
    bubbles: Iterable[Bubble],
    width: float,
    height: float,
    background_alpha: float = BACKGROUND_ALPHA,
) -> None:
    """Wash the previous frame with the background, then draw every bubble on top.

    With ``background_alpha`` below 1 the painter is expected to target a
    persistent buffer, so the last few frames show through as trails.
    """
    background = QtGui.QColor(*BACKGROUND_COLOR)
    background.setAlphaF(background_alpha)
    painter.setRenderHint(QtGui.QPainter.Antialiasing, True)
    painter.fillRect(QtCore.QRectF(0, 0, width, height), background)
    for bubble in bubbles:
        if bubble.popping:
            draw_popping(painter, bubble)
        else:
            draw_resting(painter, bubble)


def draw_resting(painter: QtGui.QPainter, bubble: Bubble) -> None:
    painter.save()
    painter.setOpacity(bubble.opacity)
    painter.setPen(QtCore.Qt.NoPen)

    # body
    painter.setBrush(QtGui.QColor(bubble.color))
    _circle(painter, bubble.x, bubble.y, bubble.radius)

    # highlight, top left
    painter.setBrush(QtGui.QColor.fromRgbF(1.0, 1.0, 1.0, HIGHLIGHT_ALPHA))
    _circle(
        painter,
        bubble.x - bubble.radius * 0.3,
        bubble.y - bubble.radius * 0.3,
        bubble.radius * 0.2,
    )
    painter.restore()


def draw_popping(painter: QtGui.QPainter, bubble: Bubble) -> None:
    p = bubble.pop_progress
    color = QtGui.QColor(bubble.color)

    painter.save()
    painter.setOpacity(bubble.opacity * (1 - p))

    # expanding rings
    painter.setBrush(QtCore.Qt.NoBrush)
    painter.setPen(QtGui.QPen(color, LINE_WIDTH))
    for i in range(RING_COUNT):
        _circle(painter, bubble.x, bubble.y, bubble.radius * (1 + p * 2 + i * 0.5))

    # particles flying outwards
    painter.setPen(QtCore.Qt.NoPen)
    painter.setBrush(color)
    distance = bubble.radius * p * 2
    for i in range(PARTICLE_COUNT):
        angle = (i / PARTICLE_COUNT) * math.pi * 2
        _circle(
            painter,
            bubble.x + math.cos(angle) * distance,
            bubble.y + math.sin(angle) * distance,
            PARTICLE_RADIUS,
        )

    if bubble.show_face and p > 0.5:
        painter.setOpacity((p - 0.5) * 2)
        draw_face(painter, bubble.x, bubble.y, bubble.radius * 0.8)

    painter.restore()


def draw_face(painter: QtGui.QPainter, x: float, y: float, size: float) -> None:
    feature = QtGui.QColor(FACE_FEATURE_COLOR)

    painter.setPen(QtGui.QPen(QtGui.QColor(FACE_OUTLINE_COLOR), LINE_WIDTH))
    painter.setBrush(QtGui.QColor(FACE_COLOR))
    _circle(painter, x, y, size)

    # eyes
    painter.setPen(QtCore.Qt.NoPen)
    painter.setBrush(feature)
    _circle(painter, x - size * 0.3, y - size * 0.2, size * 0.15)
    _circle(painter, x + size * 0.3, y - size * 0.2, size * 0.15)

    # smile, bottom half of a circle (Qt angles are 1/16 deg, negative = clockwise)
    smile = size * 0.4
    painter.setPen(QtGui.QPen(feature, LINE_WIDTH))
    painter.setBrush(QtCore.Qt.NoBrush)
    painter.drawArc(
        QtCore.QRectF(x - smile, y + size * 0.1 - smile, smile * 2, smile * 2),
        0,
        -180 * 16,
    )
