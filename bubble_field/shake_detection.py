from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional

from CONFIG import *


@dataclass
class ShakeDetectionState:
    last_x: float = 0.0
    last_y: float = 0.0
    last_z: float = 0.0
    last_shake_time: float = 0.0
    threshold: float = SHAKE_THRESHOLD
    cooldown_s: float = SHAKE_COOLDOWN_S
    motion_status: str = "off"
    shake_count: int = 0


def record_motion_sample(
    state: ShakeDetectionState,
    x: float,
    y: float,
    z: float,
    timestamp: Optional[float] = None,
) -> bool:
    """Feed one accelerometer sample (gravity included). Returns True on a shake."""
    now = time.time() if timestamp is None else timestamp
    if (now - state.last_shake_time) <= state.cooldown_s:
        return False  # still cooling down, sample is dropped

    delta = abs(x - state.last_x) + abs(y - state.last_y) + abs(z - state.last_z)
    state.last_x = x
    state.last_y = y
    state.last_z = z

    if delta > state.threshold:
        state.last_shake_time = now
        state.shake_count += 1
        return True
    return False
