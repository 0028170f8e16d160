import time
from typing import Any, Dict


class APIResponse:
    """Standardized API response wrapper for all clients (web, CLI, etc.)"""

    @staticmethod
    def success(data: Any, code: str = "success", message: str = "Operation successful") -> Dict[str, Any]:
        """Return standardized success response"""
        return {
            "success": True,
            "code": code,
            "message": message,
            "data": data,
            "timestamp": time.time(),
        }

    @staticmethod
    def error(error_type: str, details: Any, code: str = "error", status_code: int = 400) -> tuple[Dict[str, Any], int]:
        """Return standardized error response with HTTP status"""
        response = {
            "success": False,
            "code": code,
            "message": f"{error_type}: {details}",
            "error": {
                "type": error_type,
                "details": details,
            },
            "timestamp": time.time(),
        }
        return response, status_code
