"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Not found errors (404)
    GROUP_NOT_FOUND = "GROUP_NOT_FOUND"
    INVITE_NOT_FOUND = "INVITE_NOT_FOUND"
    MEMBERSHIP_NOT_FOUND = "MEMBERSHIP_NOT_FOUND"

    # Authorization errors (403)
    INSUFFICIENT_PERMISSIONS = "INSUFFICIENT_PERMISSIONS"
    NOT_A_GROUP_MEMBER = "NOT_A_GROUP_MEMBER"

    # Conflict errors (409)
    CONFLICT = "CONFLICT"
    ALREADY_A_GROUP_MEMBER = "ALREADY_A_GROUP_MEMBER"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    UNKNOWN_ROLE = "UNKNOWN_ROLE"

    # Storage errors (503/504)
    STORAGE_ERROR = "STORAGE_ERROR"
    STORAGE_TIMEOUT = "STORAGE_TIMEOUT"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class ValidationError(AppException):
    """Caller supplied missing or malformed input."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(
            error_code=ErrorCode.VALIDATION_ERROR,
            message=message,
            status_code=400,
            details={"field": field} if field else None,
        )


class NotFoundError(AppException):
    """A referenced entity does not exist."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        details: Any | None = None,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=404,
            details=details,
        )


class GroupNotFoundError(NotFoundError):
    """Group not found."""

    def __init__(self, group_id: str) -> None:
        super().__init__(
            message=f"Group not found: {group_id}",
            error_code=ErrorCode.GROUP_NOT_FOUND,
            details={"group_id": group_id},
        )


class InviteNotFoundError(NotFoundError):
    """No invite matches the given code."""

    def __init__(self) -> None:
        # The code itself is a join secret; keep it out of the response
        super().__init__(
            message="Invalid invite code",
            error_code=ErrorCode.INVITE_NOT_FOUND,
        )


class MembershipNotFoundError(NotFoundError):
    """Device is not a member of the group."""

    def __init__(self, group_id: str, device_id: str) -> None:
        super().__init__(
            message="Device is not a member of this group",
            error_code=ErrorCode.MEMBERSHIP_NOT_FOUND,
            details={"group_id": group_id, "device_id": device_id},
        )


class InsufficientPermissionsError(AppException):
    """The member's role does not grant the requested capability."""

    def __init__(self, capability: str) -> None:
        super().__init__(
            error_code=ErrorCode.INSUFFICIENT_PERMISSIONS,
            message=f"Insufficient permissions: {capability}",
            status_code=403,
            details={"capability": capability},
        )


class NotAGroupMemberError(AppException):
    """Only members of the group may see this."""

    def __init__(self, group_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.NOT_A_GROUP_MEMBER,
            message="You are not a member of this group",
            status_code=403,
            details={"group_id": group_id},
        )


class ConflictError(AppException):
    """A uniqueness constraint was violated."""

    def __init__(
        self,
        message: str = "Resource already exists",
        error_code: ErrorCode = ErrorCode.CONFLICT,
        details: Any | None = None,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=409,
            details=details,
        )


class AlreadyAGroupMemberError(ConflictError):
    """Device is already a member of the group."""

    def __init__(self, group_id: str, device_id: str) -> None:
        super().__init__(
            message="Device is already a member of this group",
            error_code=ErrorCode.ALREADY_A_GROUP_MEMBER,
            details={"group_id": group_id, "device_id": device_id},
        )


class UnknownRoleError(AppException):
    """A stored role is outside the known set. Never mapped to permissions."""

    def __init__(self, role: str) -> None:
        super().__init__(
            error_code=ErrorCode.UNKNOWN_ROLE,
            message=f"Unknown membership role: {role!r}",
            status_code=500,
            details={"role": role},
        )


class StorageError(AppException):
    """The backing store failed. The message never carries driver details."""

    def __init__(
        self,
        message: str = "The data store is unavailable",
        error_code: ErrorCode = ErrorCode.STORAGE_ERROR,
        status_code: int = 503,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=status_code,
        )


class StorageTimeoutError(StorageError):
    """The backing store did not answer in time."""

    def __init__(self) -> None:
        super().__init__(
            message="The data store did not respond in time",
            error_code=ErrorCode.STORAGE_TIMEOUT,
            status_code=504,
        )
