"""Domain exceptions raised by the query/mutation layers.

The HTTP layer maps each class to a status code and a ``{"message": ...}`` body
(see the handlers registered in ``tuf_portal.main``).
"""
from typing import Any, Optional


class PortalException(Exception):
    status_code = 500

    def __init__(self, detail: str = "Internal server error", errors: Optional[list[Any]] = None):
        self.detail = detail
        self.errors = errors
        super().__init__(detail)


class ValidationException(PortalException):
    status_code = 400

    def __init__(self, detail: str = "Invalid request", errors: Optional[list[Any]] = None):
        super().__init__(detail, errors)


class UnauthorizedException(PortalException):
    status_code = 401

    def __init__(self, detail: str = "Unauthorized"):
        super().__init__(detail)


class ForbiddenException(PortalException):
    status_code = 403

    def __init__(self, detail: str = "Forbidden"):
        super().__init__(detail)


class NotFoundException(PortalException):
    status_code = 404

    def __init__(self, detail: str = "Not found"):
        super().__init__(detail)
