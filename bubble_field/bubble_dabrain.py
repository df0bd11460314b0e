import random

from bubble_field.bubble_states import BubbleState
from bubble_field.bubble_model import Bubble
from CONFIG import *


def enter_state(bubble: Bubble, new_state: BubbleState) -> None:
    """Centralized state transition."""

    bubble.state = new_state

    if new_state == BubbleState.RISING:
        bubble.pop_progress = 0.0

    elif new_state == BubbleState.REMOVED:
        bubble.pop_progress = 1.0 # clamp, progress can land a hair over 1


def on_pop(bubble: Bubble) -> bool:
    """Call this when the bubble gets hit. Returns True only if it actually started popping."""

    if bubble.state != BubbleState.RISING: # popped alr, stop poking it
        return False

    enter_state(bubble, BubbleState.POPPING)
    return True


def rise(bubble: Bubble, width: float, height: float, rng: random.Random) -> None:
    bubble.y -= bubble.speed  # fixed px per frame, not scaled by dt

    # floated off the top, recycle at the bottom somewhere else
    if bubble.y < -bubble.radius:
        bubble.y = height + bubble.radius
        bubble.x = rng.random() * width


def update(bubble: Bubble, width: float, height: float, rng: random.Random) -> bool:
    """ Call this once per frame. Returns True when the pop animation is done. """

    if bubble.state == BubbleState.RISING:
        rise(bubble, width, height, rng)
        return False

    if bubble.state == BubbleState.POPPING:
        # round so ten 0.1 steps add up to exactly 1.0
        bubble.pop_progress = round(bubble.pop_progress + POP_STEP, 9)
        if bubble.pop_progress >= 1.0:
            enter_state(bubble, BubbleState.REMOVED)
            return True
        return False

    return False
