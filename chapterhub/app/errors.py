"""
Error taxonomy shared by all use cases.

UNAUTHENTICATED, FORBIDDEN, NOT_FOUND and CONFLICT are always reported as
distinct codes. A target outside the actor's scope is reported exactly like a
missing one (NOT_FOUND).
"""

from chapterhub.libs.result import Error

UNAUTHENTICATED = "UNAUTHENTICATED"
FORBIDDEN = "FORBIDDEN"
NOT_FOUND = "NOT_FOUND"
CONFLICT = "CONFLICT"
VALIDATION_ERROR = "VALIDATION_ERROR"


def unauthenticated(message: str = "Authentication required") -> Error:
    return Error(UNAUTHENTICATED, message)


def forbidden(message: str = "Forbidden") -> Error:
    return Error(FORBIDDEN, message)


def not_found(message: str) -> Error:
    return Error(NOT_FOUND, message)


def conflict(message: str) -> Error:
    return Error(CONFLICT, message)


def invalid(message: str) -> Error:
    return Error(VALIDATION_ERROR, message)
