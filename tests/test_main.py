from __future__ import annotations

import random

import pytest

pytest.importorskip("PyQt5.QtMultimedia")

from PyQt5 import QtCore, QtGui

from main import BubblePop


@pytest.fixture
def game(qapp):
    sounds = []
    widget = BubblePop(count=3, rng=random.Random(11), pop_sound=lambda: sounds.append(1))
    widget.anim_timer.stop()
    widget.sounds = sounds
    yield widget
    widget.close()
    widget.deleteLater()


def press(widget, x, y, button=QtCore.Qt.LeftButton):
    event = QtGui.QMouseEvent(
        QtCore.QEvent.MouseButtonPress,
        QtCore.QPointF(x, y),
        button,
        button,
        QtCore.Qt.NoModifier,
    )
    widget.mousePressEvent(event)


def test_click_pops_topmost_bubble_and_counter_updates(game):
    target = game.field.bubbles[-1]
    press(game, target.x, target.y)

    assert target.popping
    assert game.sounds == [1]
    for _ in range(10):
        game.field.step(1 / 60)
    assert game.count_label.text() == "Popped: 1"
    assert len(game.field) == 3


def test_right_click_does_not_pop(game):
    target = game.field.bubbles[-1]
    press(game, target.x, target.y, button=QtCore.Qt.RightButton)
    assert not target.popping


def test_space_bar_shakes_in_more_bubbles(game):
    event = QtGui.QKeyEvent(QtCore.QEvent.KeyPress, QtCore.Qt.Key_Space, QtCore.Qt.NoModifier)
    game.keyPressEvent(event)
    assert len(game.field) == 8


def test_resize_reaches_the_field(game):
    game.resize(300, 500)
    game.resizeEvent(QtGui.QResizeEvent(QtCore.QSize(300, 500), QtCore.QSize(480, 720)))
    assert (game.field.width, game.field.height) == (300, 500)


def test_widget_paints(game):
    pixmap = game.grab()
    assert not pixmap.isNull()


def test_canvas_follows_window_size(game):
    game.resize(300, 500)
    game.resizeEvent(QtGui.QResizeEvent(QtCore.QSize(300, 500), QtCore.QSize(480, 720)))
    assert (game.canvas.width(), game.canvas.height()) == (300, 500)


def test_tick_advances_field_from_its_own_clock(game, monkeypatch):
    started = game.field.last_frame_time
    monkeypatch.setattr("main.time.time", lambda: started + 0.25)
    bubble = game.field.bubbles[0]
    y = bubble.y

    game._tick()

    assert game.field.last_frame_time == started + 0.25
    assert bubble.y == pytest.approx(y - bubble.speed)


def test_trails_fade_on_the_back_buffer(game):
    target = game.field.bubbles[-1]
    target.y = 200.0
    target.x = 200.0
    game._draw_frame()
    game.field.bubbles.remove(target)

    game._draw_frame()

    pixel = game.canvas.toImage().pixelColor(200, 200)
    background = QtGui.QColor(224, 247, 255)
    assert pixel != background
