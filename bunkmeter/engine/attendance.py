from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from typing import Any, Dict

THRESHOLD = 75.0

# Exact ratio form of THRESHOLD (3/4)
_REQUIRED = Fraction(THRESHOLD) / 100


class InvalidInputError(ValueError):
    """Raised when the calculator cannot produce a percentage for its inputs."""

    pass


class RecommendationKind(str, Enum):
    CAN_MISS = "can_miss"
    NEED_ATTEND = "need_attend"


@dataclass(frozen=True)
class Recommendation:
    kind: RecommendationKind
    classes: int
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "classes": self.classes,
            "message": self.message,
        }


@dataclass(frozen=True)
class AttendanceCalculation:
    percentage: float
    recommendation: Recommendation

    def to_dict(self) -> Dict[str, Any]:
        return {
            "percentage": self.percentage,
            "recommendation": self.recommendation.to_dict(),
        }


def _pluralize(count: int) -> str:
    return "class" if count == 1 else "classes"


class AttendanceCalculator:
    @staticmethod
    def meets_threshold(attended: int, total: int) -> bool:
        """
        Check whether attended/total sits at or above the threshold.
        """
        return attended * _REQUIRED.denominator >= _REQUIRED.numerator * total

    @staticmethod
    def calculate_can_miss(attended: int, total: int) -> int:
        """
        Calculate how many more classes can be missed in a row while staying
        at or above the threshold. Zero when the next absence would drop below it.
        """
        surplus = attended * _REQUIRED.denominator - _REQUIRED.numerator * total
        return max(0, surplus // _REQUIRED.numerator)

    @staticmethod
    def calculate_need_attend(attended: int, total: int) -> int:
        """
        Calculate how many consecutive classes must be attended to climb back
        to the threshold. Always at least one.
        """
        deficit = _REQUIRED.numerator * total - attended * _REQUIRED.denominator
        step = _REQUIRED.denominator - _REQUIRED.numerator
        return max(1, -(-deficit // step))

    @staticmethod
    def calculate(attended: int, total: int) -> AttendanceCalculation:
        """
        Compute the attendance percentage and what to do next.

        Args:
            attended: Classes attended so far.
            total: Classes held so far, must be positive.

        Returns:
            AttendanceCalculation with the raw percentage and either a
            ``can_miss`` or a ``need_attend`` recommendation.

        Raises:
            InvalidInputError: If ``total`` is not positive.
        """
        if total <= 0:
            raise InvalidInputError(
                f"Total classes must be greater than 0, got {total}"
            )

        percentage = (attended / total) * 100

        if AttendanceCalculator.meets_threshold(attended, total):
            can_miss = AttendanceCalculator.calculate_can_miss(attended, total)
            if can_miss > 0:
                message = (
                    f"You can miss up to {can_miss} more {_pluralize(can_miss)} "
                    f"and still maintain {THRESHOLD:g}% attendance."
                )
            else:
                message = (
                    f"You need to attend all upcoming classes to maintain "
                    f"{THRESHOLD:g}% attendance."
                )
            recommendation = Recommendation(
                RecommendationKind.CAN_MISS, can_miss, message
            )
        else:
            need_attend = AttendanceCalculator.calculate_need_attend(attended, total)
            message = (
                f"You need to attend the next {need_attend} consecutive "
                f"{_pluralize(need_attend)} to reach {THRESHOLD:g}% attendance."
            )
            recommendation = Recommendation(
                RecommendationKind.NEED_ATTEND, need_attend, message
            )

        return AttendanceCalculation(percentage, recommendation)


calculate = AttendanceCalculator.calculate
