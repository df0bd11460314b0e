from __future__ import annotations

import os
import random

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt5 import QtWidgets

from bubble_field.simulator import BubbleField


class RecordingPainter:
    """Stands in for QPainter and remembers every call."""

    def __init__(self):
        self.calls = []

    def __getattr__(self, name):
        def record(*args):
            self.calls.append((name, args))
        return record

    def named(self, name):
        return [args for call, args in self.calls if call == name]


@pytest.fixture(scope="session")
def qapp():
    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication([])
    return app


@pytest.fixture
def painter():
    return RecordingPainter()


@pytest.fixture
def make_field():
    def make(count=10, seed=1234, width=400, height=600, **kwargs):
        return BubbleField(width, height, count=count, rng=random.Random(seed), **kwargs)
    return make
