"""
Campus API Backend: Custom Exception Hierarchy
================================================

What:  Defines application-specific exceptions for different error scenarios.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by the resource controller, the authorization gate and stores.

Exception Hierarchy:
    CampusApiError (base)
    ├── ValidationError       → 400 Bad Request (key, query values or body invalid)
    ├── ForbiddenError        → 403 Forbidden (caller lacks the required role)
    ├── EntityNotFoundError   → 404 Not Found
    └── DatabaseError         → 500 Internal Server Error

Response bodies carry a `type` tag and a `message`; see
`register_exception_handlers` in main.py.
"""

from typing import Any, Dict, List, Optional


class CampusApiError(Exception):
    """
    Base exception for all Campus API application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    # Tag reported in the `type` field of the error body
    type_tag = "CampusApiError"

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(CampusApiError):
    """
    Raised when a key, query parameter or request body fails validation.

    HTTP:    400 Bad Request

    Example response:
        {
            "type": "ValidationError",
            "message": "Invalid query parameters for Articles",
            "details": [{"loc": ["query", "dateAdded"], "msg": "Field required", ...}]
        }
    """

    type_tag = "ValidationError"

    def __init__(
        self,
        message: str = "Validation failed",
        errors: Optional[List[Dict[str, Any]]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
        self.errors = errors or []


class ForbiddenError(CampusApiError):
    """
    Raised when the caller does not hold the role an operation declares.

    HTTP:    403 Forbidden
    Raised before any store access, so a rejected request never touches data.
    """

    type_tag = "AccessDeniedException"

    def __init__(
        self,
        required_role: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if required_role:
            ctx["required_role"] = required_role
        super().__init__(message="Access Denied", context=ctx)
        self.required_role = required_role


class EntityNotFoundError(CampusApiError):
    """
    Raised when a lookup by key finds no record.

    HTTP:    404 Not Found
    Message: "<TypeName> with id <key> not found", with the key rendered verbatim.
    """

    type_tag = "EntityNotFoundException"

    def __init__(
        self,
        type_name: str,
        key: Any,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["type_name"] = type_name
        ctx["key"] = key
        super().__init__(message=f"{type_name} with id {key} not found", context=ctx)
        self.type_name = type_name
        self.key = key


class DatabaseError(CampusApiError):
    """
    Raised when a store operation fails unexpectedly.

    HTTP:    500 Internal Server Error

    Security Note:
        The message returned to the client is always generic.
        Detailed error info (SQL, constraint names) is logged server-side only.
    """

    type_tag = "DatabaseError"

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
