"""Frame timing: time since start and the duration of the last frame."""

from __future__ import annotations

import time

_start_time = time.monotonic()
_previous_frame_time = _start_time
_current_frame_time = _start_time


def time_since_start() -> float:
    """Seconds elapsed since the module was loaded."""
    return time.monotonic() - _start_time


def delta_time() -> float:
    """Seconds between the two most recent calls to :func:`update_delta_time`."""
    return _current_frame_time - _previous_frame_time


def update_delta_time() -> None:
    """Mark the start of a new frame."""
    global _previous_frame_time, _current_frame_time
    _previous_frame_time = _current_frame_time
    _current_frame_time = time.monotonic()