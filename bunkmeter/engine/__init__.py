from bunkmeter.engine.attendance import (
    THRESHOLD,
    AttendanceCalculation,
    AttendanceCalculator,
    InvalidInputError,
    Recommendation,
    RecommendationKind,
    calculate,
)
from bunkmeter.engine.validators import ValidationError, validate_attendance, validate_label

__all__ = [
    "THRESHOLD",
    "AttendanceCalculation",
    "AttendanceCalculator",
    "InvalidInputError",
    "Recommendation",
    "RecommendationKind",
    "ValidationError",
    "calculate",
    "validate_attendance",
    "validate_label",
]
