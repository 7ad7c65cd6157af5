"""
Abstract base class for all static pose predicates.

Every pose must:
  - implement matches(hand) → bool
  - declare its KIND and CONFIDENCE class attributes

The classifier walks an ordered list of these and the first match wins,
so the order of the list is part of the contract.
"""
from __future__ import annotations
from abc import ABC, abstractmethod

from domain.enums import GestureKind
from domain.models import GestureResult, HandPose


class PosePredicate(ABC):
    """Base class for all pose predicates."""

    KIND: GestureKind = GestureKind.NONE
    CONFIDENCE: float = 0.0

    @abstractmethod
    def matches(self, hand: HandPose) -> bool:
        """
        Decide whether one frame's hand is in this pose.

        Parameters
        ----------
        hand : HandPose
            A validated 21-landmark hand.
        """

    def result(self, hand: HandPose) -> GestureResult:
        return GestureResult(self.KIND, hand.cursor, self.CONFIDENCE)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} kind={self.KIND.value!r}>"
