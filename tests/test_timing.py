import time

from vang import timing


def test_time_since_start_is_monotonic():
    first = timing.time_since_start()
    time.sleep(0.01)
    second = timing.time_since_start()
    assert second > first >= 0


def test_delta_time_measures_gap_between_updates():
    timing.update_delta_time()
    time.sleep(0.02)
    timing.update_delta_time()
    assert timing.delta_time() >= 0.015


def test_delta_time_is_stable_between_updates():
    timing.update_delta_time()
    first = timing.delta_time()
    time.sleep(0.01)
    assert timing.delta_time() == first


def test_delta_time_never_exceeds_time_since_start():
    timing.update_delta_time()
    assert 0 <= timing.delta_time() <= timing.time_since_start()