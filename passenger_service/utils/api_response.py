"""
Standardized API error responses.

Successful responses return the resource representation itself; errors use
the envelope produced here.
"""

from typing import Any, Dict, Optional


def error_response(
    message: str,
    code: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Create a standardized error response.

    Args:
        message: Error message
        code: Optional error code
        details: Optional additional error details

    Returns:
        Dict with standardized error response format
    """
    error = {"message": message}

    if code:
        error["code"] = code

    if details:
        error["details"] = details

    return {
        "success": False,
        "error": error
    }
