from typing import Optional


class ValidationError(ValueError):
    """Raised when submitted attendance input is rejected before calculation."""

    pass


_LABEL_MESSAGES = {
    "name": "Please enter your name",
    "subject": "Please enter a subject",
}


def validate_attendance(attended: int, total: int) -> None:
    if total <= 0:
        raise ValidationError("Total classes must be greater than 0")

    if attended < 0 or attended > total:
        raise ValidationError("Attended classes must be between 0 and total classes")


def validate_label(value: Optional[str], field: str) -> str:
    """Strip a name/subject label, rejecting blank values."""
    cleaned = (value or "").strip()
    if not cleaned:
        raise ValidationError(_LABEL_MESSAGES.get(field, f"Please enter a {field}"))
    return cleaned
