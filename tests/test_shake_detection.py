from __future__ import annotations

from bubble_field.shake_detection import ShakeDetectionState, record_motion_sample


def test_gentle_motion_is_not_a_shake():
    state = ShakeDetectionState()
    assert not record_motion_sample(state, 0.0, 9.8, 0.0, timestamp=100.0)
    assert not record_motion_sample(state, 1.0, 9.0, 0.5, timestamp=100.1)
    assert state.shake_count == 0


def test_strong_delta_is_a_shake_then_cools_down():
    state = ShakeDetectionState()
    record_motion_sample(state, 0.0, 9.8, 0.0, timestamp=100.0)

    assert record_motion_sample(state, 20.0, 0.0, 0.0, timestamp=100.2)
    assert state.last_shake_time == 100.2

    # within a second, ignored and not remembered
    assert not record_motion_sample(state, -20.0, 9.8, 5.0, timestamp=100.9)
    assert (state.last_x, state.last_y, state.last_z) == (20.0, 0.0, 0.0)

    assert record_motion_sample(state, -20.0, 9.8, 5.0, timestamp=101.3)
    assert state.shake_count == 2


def test_threshold_is_exclusive():
    state = ShakeDetectionState(threshold=15.0)
    assert not record_motion_sample(state, 15.0, 0.0, 0.0, timestamp=50.0)
    assert record_motion_sample(state, 0.0, 0.0, 0.01, timestamp=50.1)
