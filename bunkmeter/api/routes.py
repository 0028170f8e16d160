from typing import Any, Dict, Optional

from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel, Field

from bunkmeter.api.responses import APIResponse
from bunkmeter.engine.attendance import AttendanceCalculator, InvalidInputError
from bunkmeter.engine.stream import app_logger
from bunkmeter.engine.validators import (
    ValidationError,
    validate_attendance,
    validate_label,
)

router = APIRouter()

DEFAULT_STUDENT_NAME = "Student"


class CalculationRequest(BaseModel):
    """Request model for a single attendance calculation."""

    name: Optional[str] = Field(
        None, description="Student name; defaults to 'Student' when omitted"
    )
    subject: Optional[str] = Field(
        None, description="Subject label, echoed back for display"
    )
    attended: int = Field(..., description="Classes attended so far")
    total: int = Field(..., description="Classes held so far")


def _run_calculation(attended: int, total: int) -> Dict[str, Any]:
    validate_attendance(attended, total)
    result = AttendanceCalculator.calculate(attended, total)

    app_logger.info(
        f"Calculated {attended}/{total}: {result.percentage:.1f}% -> "
        f"{result.recommendation.kind.value} ({result.recommendation.classes})"
    )
    return result.to_dict()


def _invalid_input(error: Exception) -> HTTPException:
    app_logger.warning(f"Rejected attendance input: {error}")
    response, status_code = APIResponse.error(
        error_type=type(error).__name__,
        details=str(error),
        code="invalid_input",
        status_code=status.HTTP_400_BAD_REQUEST,
    )
    return HTTPException(status_code=status_code, detail=response)


def _unexpected(error: Exception) -> HTTPException:
    app_logger.error(f"Unexpected error: {error}")
    response, status_code = APIResponse.error(
        error_type="UnexpectedError",
        details=str(error),
        code="internal_error",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
    return HTTPException(status_code=status_code, detail=response)


@router.get("/healthcheck")
async def healthcheck() -> Dict[str, Any]:
    return APIResponse.success(
        data={"status": "healthy"},
        code="healthcheck_ok",
        message="Service is healthy and operational",
    )


@router.post("/attendance/calculate")
async def calculate_attendance(request: CalculationRequest) -> Dict[str, Any]:
    try:
        name = (
            validate_label(request.name, "name")
            if request.name is not None
            else DEFAULT_STUDENT_NAME
        )
        subject = (
            validate_label(request.subject, "subject")
            if request.subject is not None
            else None
        )
        calculation = _run_calculation(request.attended, request.total)

    except (ValidationError, InvalidInputError) as error:
        raise _invalid_input(error)
    except Exception as error:
        raise _unexpected(error)

    return APIResponse.success(
        data={
            "name": name,
            "subject": subject,
            "attended": request.attended,
            "total": request.total,
            **calculation,
        },
        code="attendance_calculated",
        message=f"Attendance calculated for {name}",
    )


@router.get("/attendance/calculate")
async def calculate_attendance_query(
    attended: int = Query(..., description="Classes attended so far"),
    total: int = Query(..., description="Classes held so far"),
) -> Dict[str, Any]:
    try:
        calculation = _run_calculation(attended, total)
    except (ValidationError, InvalidInputError) as error:
        raise _invalid_input(error)
    except Exception as error:
        raise _unexpected(error)

    return APIResponse.success(
        data={"attended": attended, "total": total, **calculation},
        code="attendance_calculated",
        message="Attendance calculated",
    )
