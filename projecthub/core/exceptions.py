"""
Error taxonomy for ProjectHub.

Every failure an action may surface is an ``AppError`` tagged with an
``ErrorKind``. The kind determines the transport status and the
machine-readable code; classification never depends on the subclass.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Generic, List, Optional, TypeVar, Union


class ErrorKind(Enum):
    """Failure kinds with their status and code"""
    APPLICATION = (500, None)
    VALIDATION = (400, "VALIDATION_ERROR")
    AUTHENTICATION = (401, "AUTHENTICATION_ERROR")
    AUTHORIZATION = (403, "AUTHORIZATION_ERROR")
    NOT_FOUND = (404, "NOT_FOUND")
    RATE_LIMIT = (429, "RATE_LIMIT_ERROR")

    def __init__(self, status: int, code: Optional[str]):
        self.status = status
        self.code = code

    @classmethod
    def from_code(cls, code: Optional[str]) -> "ErrorKind":
        """Map a machine-readable code back to its kind (APPLICATION if unknown)."""
        for kind in cls:
            if kind.code is not None and kind.code == code:
                return kind
        return cls.APPLICATION


class AppError(Exception):
    """Base application error"""

    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.APPLICATION,
        code: Optional[str] = None,
        field: Optional[str] = None,
    ):
        self.message = message
        self.kind = kind
        self.code = code if code is not None else kind.code
        self.field = field
        super().__init__(self.message)

    @property
    def status(self) -> int:
        return self.kind.status

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "kind": self.kind.name,
            "message": self.message,
            "status": self.status,
        }
        if self.code is not None:
            data["code"] = self.code
        if self.field is not None:
            data["field"] = self.field
        return data


class ValidationError(AppError):
    """Validation error (400)"""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, ErrorKind.VALIDATION, field=field)


class AuthenticationError(AppError):
    """Authentication error (401)"""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, ErrorKind.AUTHENTICATION)


class AuthorizationError(AppError):
    """Authorization error (403)"""

    def __init__(self, message: str = "Permission denied"):
        super().__init__(message, ErrorKind.AUTHORIZATION)


class NotFoundError(AppError):
    """Not found error (404)"""

    def __init__(self, resource: str):
        self.resource = resource
        super().__init__(f"{resource} not found", ErrorKind.NOT_FOUND)


class RateLimitError(AppError):
    """Rate limit error (429)"""

    def __init__(self, message: str = "Too many requests"):
        super().__init__(message, ErrorKind.RATE_LIMIT)


class ConfigurationError(Exception):
    """Invalid process configuration; raised at startup and never converted"""

    def __init__(self, message: str, errors: Optional[List[Dict[str, str]]] = None):
        self.message = message
        self.errors = errors or []
        super().__init__(self.message)

    def __str__(self) -> str:
        if not self.errors:
            return self.message
        details = "; ".join(f"{e['field']}: {e['message']}" for e in self.errors)
        return f"{self.message} ({details})"


GENERIC_ERROR_MESSAGE = "An unexpected error occurred"

T = TypeVar('T')


@dataclass
class ErrorPayload:
    """Client-safe description of a failure"""
    message: str
    code: Optional[str] = None
    field: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"message": self.message}
        if self.code is not None:
            data["code"] = self.code
        if self.field is not None:
            data["field"] = self.field
        return data


@dataclass
class ActionSuccess(Generic[T]):
    """Successful action result"""
    data: T
    success: bool = field(default=True, init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {"success": True, "data": self.data}


@dataclass
class ActionFailure:
    """Failed action result"""
    error: ErrorPayload
    success: bool = field(default=False, init=False)

    @property
    def status(self) -> int:
        """Transport status for this failure."""
        return ErrorKind.from_code(self.error.code).status

    def to_dict(self) -> Dict[str, Any]:
        return {"success": False, "error": self.error.to_dict()}


ActionResult = Union[ActionSuccess[T], ActionFailure]


def safe_str(error: Any) -> str:
    """``str(error)`` that falls back to a placeholder when ``__str__`` itself fails."""
    try:
        return str(error)
    except Exception:
        return f"<unprintable {type(error).__name__}>"


def to_action_error(error: Any) -> ActionFailure:
    """Convert any raised value into a client-safe failure result."""
    if isinstance(error, AppError):
        return ActionFailure(ErrorPayload(
            message=error.message,
            code=error.code,
            field=error.field if error.kind is ErrorKind.VALIDATION else None,
        ))

    if isinstance(error, BaseException):
        return ActionFailure(ErrorPayload(message=safe_str(error)))

    return ActionFailure(ErrorPayload(message=GENERIC_ERROR_MESSAGE))
