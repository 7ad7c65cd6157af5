"""
DeferredCall — a cancellable, frame-polled one-shot timer.

Used by the canvas controller to wait a short while after a free-hand
stroke ends before trying to recognise a shape. There is no thread: the
host passes its frame clock to schedule() and fire_if_due().
"""
from __future__ import annotations
from typing import Optional


class DeferredCall:
    """
    Usage
    -----
    recognise = DeferredCall(delay=0.5)
    recognise.schedule(now)            # stroke ended
    ...
    if recognise.fire_if_due(now):     # once per frame
        ...                            # run the deferred work
    recognise.cancel()                 # a new stroke started in time
    """

    def __init__(self, delay: float = 0.5) -> None:
        self._delay = delay
        self._due_at: Optional[float] = None

    def schedule(self, now: float) -> None:
        """(Re)arm so the call becomes due ``delay`` seconds after ``now``."""
        self._due_at = now + self._delay

    def cancel(self) -> None:
        self._due_at = None

    def fire_if_due(self, now: float) -> bool:
        """
        Return True exactly once when the deadline has passed, disarming
        the call; False while idle or still waiting.
        """
        if self._due_at is None or now < self._due_at:
            return False
        self._due_at = None
        return True

    @property
    def pending(self) -> bool:
        return self._due_at is not None

    @property
    def delay(self) -> float:
        return self._delay
