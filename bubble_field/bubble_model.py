import math
import random
from typing import Optional

from bubble_field.bubble_states import BubbleState
from CONFIG import *


class Bubble:
    """One rising bubble. Looks (radius, speed, color, opacity, face) are fixed at birth."""

    def __init__(
        self,
        x: float,
        y: float,
        radius: float,
        speed: float,
        color: str,
        opacity: float,
        show_face: bool,
    ) -> None:
        # cur pos, this is the only thing that moves
        self.x = x
        self.y = y

        # read-only, see properties below
        self._radius = radius
        self._speed = speed
        self._color = color
        self._opacity = opacity
        self._show_face = show_face

        self.state = BubbleState.RISING
        self.pop_progress = 0.0  # 0 until popped, then 0.1, 0.2 ... 1.0 and it's gone

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def speed(self) -> float:
        return self._speed

    @property
    def color(self) -> str:
        return self._color

    @property
    def opacity(self) -> float:
        return self._opacity

    @property
    def show_face(self) -> bool:
        return self._show_face

    @property
    def popping(self) -> bool:
        return self.state == BubbleState.POPPING

    def contains(self, x: float, y: float) -> bool:
        return math.hypot(x - self.x, y - self.y) <= self._radius

    def __repr__(self) -> str:
        return (
            f"Bubble(x={self.x:.1f}, y={self.y:.1f}, r={self._radius:.1f}, "
            f"{self.state.name}, p={self.pop_progress:.1f})"
        )


def spawn_bubble(
    rng: random.Random,
    width: float,
    height: float,
    x: Optional[float] = None,
    y: Optional[float] = None,
) -> Bubble:
    """Roll a fresh bubble. Without a position it starts just below the bottom edge."""
    if x is None:
        x = rng.random() * width
    if y is None:
        y = height + SPAWN_OFFSET_PX
    return Bubble(
        x=x,
        y=y,
        radius=MIN_RADIUS + rng.random() * RADIUS_RANGE,
        speed=MIN_SPEED + rng.random() * SPEED_RANGE,
        color=rng.choice(BUBBLE_COLORS),
        opacity=MIN_OPACITY + rng.random() * OPACITY_RANGE,
        show_face=rng.random() < FACE_CHANCE,
    )
