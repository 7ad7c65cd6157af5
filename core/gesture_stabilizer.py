"""
GestureStabilizer — temporal filter that turns noisy per-frame
classifications into a debounced, confident gesture.

One instance per tracking session; reset() it when tracking restarts so
stale history never biases the new session.
"""
from __future__ import annotations
import math
from collections import Counter, deque
from typing import Optional, Tuple

from domain.enums import GestureKind
from domain.models import GestureResult
from utils.constants import STABILIZER_CONSENSUS_RATIO, STABILIZER_WINDOW
from utils.logger import get_logger

logger = get_logger("GestureStabilizer")


class GestureStabilizer:
    """
    Majority vote over a rolling window of raw results.

    Parameters
    ----------
    window : int
        Number of frames kept in the rolling buffer.
    consensus_ratio : float
        Fraction of ``window`` the leading kind must reach,
        rounded up (5 × 0.6 → 3 frames).
    """

    def __init__(
        self,
        window: int = STABILIZER_WINDOW,
        consensus_ratio: float = STABILIZER_CONSENSUS_RATIO,
    ) -> None:
        self._window = window
        # 5 * 0.6 must ceil to 3, not 4
        self._consensus = math.ceil(round(window * consensus_ratio, 9))
        self._buffer: deque[GestureResult] = deque(maxlen=window)
        self._current: Optional[GestureKind] = None

    # ------------------------------------------------------------------
    def observe(self, raw: GestureResult) -> GestureResult:
        """
        Feed one raw classification and return the stabilized one.

        The position always comes from ``raw``; only kind and confidence
        are voted on. When two kinds tie for the lead, the one seen most
        recently wins.
        """
        self._buffer.append(raw)

        counts = Counter(r.kind for r in self._buffer)
        top = max(counts.values())
        best = next(r.kind for r in reversed(self._buffer) if counts[r.kind] == top)

        if top >= self._consensus:
            stable = GestureResult(best, raw.position, top / self._window)
        else:
            stable = GestureResult.none(raw.position)

        if stable.kind != self._current:
            logger.debug("Stable gesture %s → %s (%d/%d)",
                         self._current.value if self._current else None,
                         stable.kind.value, top, self._window)
            self._current = stable.kind
        return stable

    @property
    def current(self) -> Optional[GestureKind]:
        """The last emitted kind, or None before the first observation."""
        return self._current

    @property
    def window(self) -> Tuple[GestureResult, ...]:
        """Snapshot of the raw results currently in the vote (oldest first)."""
        return tuple(self._buffer)

    @property
    def consensus(self) -> int:
        return self._consensus

    def reset(self) -> None:
        self._buffer.clear()
        self._current = None
