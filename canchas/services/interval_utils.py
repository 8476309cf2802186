"""Helpers for comparing same-day time windows.

Windows are half-open ``[start, end)``: a booking that ends at 11:00 leaves
the field free for one that starts at 11:00.
"""

from __future__ import annotations

from datetime import time


def is_valid_interval(start_time: time, end_time: time) -> bool:
    return start_time < end_time


def intervals_overlap(
    existing_start: time,
    existing_end: time,
    candidate_start: time,
    candidate_end: time,
) -> bool:
    """Return ``True`` when the two windows share at least one instant.

    Zero-length or inverted windows are not rejected here; callers validate
    them with :func:`is_valid_interval` first.
    """

    return existing_start < candidate_end and existing_end > candidate_start


__all__ = ["intervals_overlap", "is_valid_interval"]
