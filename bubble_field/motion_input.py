from __future__ import annotations

import time
from typing import Callable, Optional

from bubble_field.shake_detection import ShakeDetectionState, record_motion_sample


def start_motion_monitor(
    state: ShakeDetectionState,
    on_shake: Callable[[], None],
) -> Optional[Callable[[], None]]:
    """Start listening to the accelerometer if there is one. Returns a stop callback or None."""
    try:
        from PyQt5 import QtSensors
    except Exception:
        state.motion_status = "missing QtSensors"
        print("Motion monitor unavailable: PyQt5 was built without QtSensors.")
        return None

    sensor = QtSensors.QAccelerometer()
    sensor.setAccelerationMode(QtSensors.QAccelerometer.Combined)
    if not sensor.connectToBackend():
        state.motion_status = "unsupported"
        print("Motion monitor unavailable: no accelerometer on this device.")
        return None

    def _reading_changed() -> None:
        reading = sensor.reading()
        if reading is None:
            return
        if record_motion_sample(state, reading.x(), reading.y(), reading.z(), time.time()):
            print("Shake")
            on_shake()

    sensor.readingChanged.connect(_reading_changed)
    if not sensor.start():
        state.motion_status = "failed"
        print("Motion monitor failed to start.")
        return None
    state.motion_status = "active"

    def stop() -> None:
        sensor.stop()
        state.motion_status = "stopped"

    return stop
