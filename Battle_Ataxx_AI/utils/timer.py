"""Helpers for enforcing per-move time limits."""

import time


def deadline_after(seconds):
    """Absolute deadline seconds from now, or None for no limit."""
    if seconds is None:
        return None
    return time.time() + seconds


def expired(deadline):
    return deadline is not None and time.time() > deadline
