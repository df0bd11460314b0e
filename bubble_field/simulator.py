from __future__ import annotations

import random
import time
from typing import Callable, Iterator, List, Optional

from PyQt5 import QtGui

from bubble_field.bubble_dabrain import on_pop, update
from bubble_field.bubble_model import Bubble, spawn_bubble
from bubble_field.bubble_paint import render_field
from CONFIG import *


class BubbleField:
    """Owns the live bubbles and steps them once per frame.

    Collaborators are plain callables so the field can be driven without a
    window or a sound card:
    - ``on_pop_sound()`` fires when a bubble starts popping
    - ``on_count_changed(total)`` fires when a pop animation finishes
    """

    def __init__(
        self,
        width: float,
        height: float,
        count: Optional[int] = None,
        rng: Optional[random.Random] = None,
        on_pop_sound: Optional[Callable[[], None]] = None,
        on_count_changed: Optional[Callable[[int], None]] = None,
    ) -> None:
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.on_pop_sound = on_pop_sound
        self.on_count_changed = on_count_changed

        self.bubbles: List[Bubble] = []
        self.popped_count = 0
        self.last_frame_time = time.time()

        if count is not None:
            self.initialize(count)

    def __len__(self) -> int:
        return len(self.bubbles)

    def __iter__(self) -> Iterator[Bubble]:
        return iter(self.bubbles)

    def initialize(self, count: int) -> None:
        if isinstance(count, bool) or not isinstance(count, int):
            raise ValueError(f"bubble count must be an int, got {count!r}")
        if count < 0:
            raise ValueError(f"bubble count must not be negative, got {count}")
        for _ in range(count):
            self.add_bubble()

    def add_bubble(self, x: Optional[float] = None, y: Optional[float] = None) -> Bubble:
        bubble = spawn_bubble(self.rng, self.width, self.height, x=x, y=y)
        self.bubbles.append(bubble)
        return bubble

    def resize(self, width: float, height: float) -> None:
        self.width = width
        self.height = height

    def frame(self, now: Optional[float] = None) -> float:
        """Frame clock entry point. Returns seconds since the previous frame."""
        if now is None:
            now = time.time()
        dt = now - self.last_frame_time
        self.last_frame_time = now
        self.step(dt)
        return dt

    def step(self, dt: float) -> None:
        # dt is unused: bubbles move a fixed number of px per frame
        finished = [
            bubble
            for bubble in list(self.bubbles)
            if update(bubble, self.width, self.height, self.rng)
        ]
        for bubble in finished:
            self.bubbles.remove(bubble)
            self.popped_count += 1
            if self.on_count_changed is not None:
                self.on_count_changed(self.popped_count)
            self.add_bubble()

    def hit_test(self, x: float, y: float) -> Optional[Bubble]:
        # newest bubble is drawn on top, so it wins
        for bubble in reversed(self.bubbles):
            if bubble.contains(x, y):
                return bubble
        return None

    def pop(self, bubble: Bubble) -> None:
        if not on_pop(bubble):
            return
        if self.on_pop_sound is None:
            return
        try:
            self.on_pop_sound()
        except Exception as exc:
            print(f"Pop sound failed: {exc}")

    def tap(self, x: float, y: float) -> Optional[Bubble]:
        bubble = self.hit_test(x, y)
        if bubble is not None:
            self.pop(bubble)
        return bubble

    def burst(self, n: int = SHAKE_BURST_COUNT) -> None:
        for _ in range(n):
            self.add_bubble()

    def render(self, painter: QtGui.QPainter) -> None:
        render_field(painter, self.bubbles, self.width, self.height)
