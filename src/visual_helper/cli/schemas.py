#!/usr/bin/env python3
"""
Response Schemas for Visual Helper CLI

This module defines the envelope used for ``--json`` output so scripts get the
same shape from every command.

Third-party package documentation:
- Pydantic: https://docs.pydantic.dev/

Sample input:
- format_cli_response(True, data={"x": 100, "y": 100, "zone": "empty-canvas"})
- format_cli_response(False, error="File not found: obstacles.json")

Expected output:
- {"success": True, "data": {"x": 100, "y": 100, "zone": "empty-canvas"}}
- {"success": False, "error": "File not found: obstacles.json"}
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel


class SuccessResponse(BaseModel):
    success: bool = True
    data: Dict[str, Any]


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    details: Optional[Dict[str, Any]] = None


def format_cli_response(success: bool, data: Optional[Dict[str, Any]] = None, error: Optional[str] = None) -> Dict[str, Any]:
    """
    Format a standardized CLI response.

    Args:
        success: Whether the operation was successful
        data: Response data (for successful operations)
        error: Error message (for failed operations)

    Returns:
        Dict[str, Any]: Formatted response
    """
    if success and data is not None:
        return SuccessResponse(data=data).model_dump()
    elif not success and error is not None:
        return ErrorResponse(error=error).model_dump(exclude_none=True)
    else:
        return {"success": success}
