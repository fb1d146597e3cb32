"""
StepOutcome - the tagged result of advancing the game by one tick.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Dict, Any


class OutcomeKind(str, Enum):
    MOVED = "MOVED"
    ATE = "ATE"
    GAME_OVER = "GAME_OVER"


@dataclass(frozen=True)
class StepOutcome:
    """
    What happened during one step.

    Attributes:
        kind: MOVED, ATE (food eaten, speed went up) or GAME_OVER
        speed: tick period in ms to use for the next tick
        reason: 'wall' or 'self' when kind is GAME_OVER
    """

    kind: OutcomeKind
    speed: int
    reason: Optional[str] = None

    @classmethod
    def moved(cls, speed: int) -> "StepOutcome":
        return cls(OutcomeKind.MOVED, speed)

    @classmethod
    def ate(cls, speed: int) -> "StepOutcome":
        return cls(OutcomeKind.ATE, speed)

    @classmethod
    def game_over(cls, speed: int, reason: str) -> "StepOutcome":
        return cls(OutcomeKind.GAME_OVER, speed, reason)

    @property
    def is_game_over(self) -> bool:
        return self.kind == OutcomeKind.GAME_OVER

    @property
    def ate_food(self) -> bool:
        return self.kind == OutcomeKind.ATE

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "speed": self.speed, "reason": self.reason}
