from bubble_field.motion_input import start_motion_monitor
from bubble_field.shake_detection import ShakeDetectionState
from bubble_field.simulator import BubbleField
from utils import play_pop_sound, preload_sound_effects
from CONFIG import *

import os
import sys
import time
import random
from typing import Callable, Optional

from PyQt5 import QtCore, QtGui, QtWidgets


class BubblePop(QtWidgets.QWidget):
    def __init__(
        self,
        count: int = INITIAL_BUBBLE_COUNT,
        rng: Optional[random.Random] = None,
        pop_sound: Optional[Callable[[], None]] = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("Bubble Pop")
        self.resize(WINDOW_WIDTH, WINDOW_HEIGHT)

        #  Popped counter
        self.count_label = QtWidgets.QLabel(self)
        self.count_label.setAlignment(QtCore.Qt.AlignLeft | QtCore.Qt.AlignTop)
        self.count_label.setAttribute(QtCore.Qt.WA_TransparentForMouseEvents, True)
        self.count_label.setStyleSheet("QLabel { color: #118AB2; font-size: 14pt; font-weight: bold; }")
        self.count_label.move(10, 8)
        self.count_label.setText("Popped: 0")
        self.count_label.adjustSize()

        # --- bubble field ---
        self.field = BubbleField(
            self.width(),
            self.height(),
            rng=rng,
            on_pop_sound=pop_sound,
            on_count_changed=self._show_count,
        )
        self.field.initialize(count)

        # --- shake tracking ---
        self.shake_state = ShakeDetectionState()
        self.motion_stop: Optional[Callable[[], None]] = None

        # --- back buffer, each frame washes over the last one ---
        self.canvas = self._blank_canvas()
        self._draw_frame()

        # --- animation loop ---
        self.anim_timer = QtCore.QTimer(self)
        self.anim_timer.timeout.connect(self._tick)
        self.anim_timer.start(FRAME_INTERVAL_MS)

    def start_motion(self) -> None:
        self.motion_stop = start_motion_monitor(self.shake_state, self.on_shake)

    def _show_count(self, total: int) -> None:
        self.count_label.setText(f"Popped: {total}")
        self.count_label.adjustSize()

    def _blank_canvas(self) -> QtGui.QPixmap:
        canvas = QtGui.QPixmap(self.size())
        canvas.fill(QtGui.QColor(*BACKGROUND_COLOR))
        return canvas

    def _draw_frame(self) -> None:
        painter = QtGui.QPainter(self.canvas)
        self.field.render(painter)
        painter.end()

    def _tick(self) -> None:
        self.field.frame(time.time())
        self._draw_frame()
        self.update()

    def on_shake(self) -> None:
        self.field.burst(SHAKE_BURST_COUNT)
        self.update()

    def resizeEvent(self, event: QtGui.QResizeEvent) -> None:
        super().resizeEvent(event)
        self.field.resize(self.width(), self.height())
        self.canvas = self._blank_canvas()
        self._draw_frame()

    def mousePressEvent(self, event: QtGui.QMouseEvent) -> None:
        if event.button() != QtCore.Qt.LeftButton:
            super().mousePressEvent(event)
            return
        pos = event.localPos()
        self.field.tap(pos.x(), pos.y())
        self.update()

    def keyPressEvent(self, event: QtGui.QKeyEvent) -> None:
        #  No accelerometer on most desktops, space stands in for a shake
        if event.key() == QtCore.Qt.Key_Space and not event.isAutoRepeat():
            print("Shake")
            self.on_shake()
            return
        super().keyPressEvent(event)

    def closeEvent(self, event: QtGui.QCloseEvent) -> None:
        self.anim_timer.stop()
        if self.motion_stop is not None:
            self.motion_stop()
            self.motion_stop = None
        super().closeEvent(event)

    def paintEvent(self, event: QtGui.QPaintEvent) -> None:
        painter = QtGui.QPainter(self)
        painter.drawPixmap(0, 0, self.canvas)
        painter.end()


def main() -> int:
    plugins_path = QtCore.QLibraryInfo.location(QtCore.QLibraryInfo.PluginsPath)
    if plugins_path:
        os.environ.setdefault("QT_PLUGIN_PATH", plugins_path)
        QtCore.QCoreApplication.addLibraryPath(plugins_path)

    app = QtWidgets.QApplication(sys.argv)
    preload_sound_effects()
    game = BubblePop(pop_sound=play_pop_sound)
    game.show()
    game.start_motion()
    return app.exec_()


if __name__ == "__main__":
    raise SystemExit(main())
