"""
Notes API: Application Error Types
====================================

What:  The errors a handler can delegate to the error chain.
How:   Each error carries a message and an HTTP status. The error chain
       (pipeline.py) is the only place that turns them into responses.
Who:   Raised by services, route dependencies and the not-found interceptor.

Exception Hierarchy:
    AppError (500 by default)
    ├── NotFoundError      → 404
    │   └── RouteNotFoundError
    └── ValidationError    → 400
    ConfigurationError     (startup wiring mistakes, never rendered)

An AppError is immutable once constructed. Raising it, chaining it with
`from` and re-raising it only change how it travels, never what it says.
"""

from types import MappingProxyType
from typing import Any, Mapping, Optional

DEFAULT_MESSAGE = "Internal Server Error"
DEFAULT_STATUS = 500


class AppError(Exception):
    """
    Base error for everything a handler hands to the error chain.

    Attributes:
        message:  User-facing description, rendered in the error envelope.
        status:   HTTP status code; 500 unless a subclass or caller says otherwise.
        context:  Debug details that are logged but never returned to the client.
    """

    default_message = DEFAULT_MESSAGE
    default_status = DEFAULT_STATUS

    def __init__(
        self,
        message: Optional[str] = None,
        status: Optional[int] = None,
        context: Optional[Mapping[str, Any]] = None,
    ):
        self._message = message or self.default_message
        self._status = status if status is not None else self.default_status
        self._context = MappingProxyType(dict(context or {}))
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def status(self) -> int:
        return self._status

    @property
    def context(self) -> Mapping[str, Any]:
        return self._context

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self._message!r}, status={self._status})"


class NotFoundError(AppError):
    """
    Raised when a note or a route does not exist.

    HTTP: 404 Not Found
    """

    default_message = "Not found"
    default_status = 404


class RouteNotFoundError(NotFoundError):
    """
    Raised when no route serves the request's method and path.

    HTTP: 404 Not Found, message "Route not found: <METHOD> <path>"
    """

    def __init__(self, method: str, path: str):
        super().__init__(
            message=f"Route not found: {method} {path}",
            context={"method": method, "path": path},
        )


class ValidationError(AppError):
    """
    Raised when the client sent input that it can fix.

    When:  Missing title/body on create, or a request body that is not valid JSON.
    HTTP:  400 Bad Request
    """

    default_message = "Validation failed"
    default_status = 400

    def __init__(
        self,
        message: Optional[str] = None,
        field: Optional[str] = None,
        context: Optional[Mapping[str, Any]] = None,
    ):
        ctx = dict(context or {})
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)

    @property
    def field(self) -> Optional[str]:
        return self.context.get("field")


class ConfigurationError(Exception):
    """Raised when the application is wired together incorrectly."""


def as_app_error(fault: BaseException) -> AppError:
    """
    Coerce any delegated fault into an AppError.

    AppErrors pass through untouched. Anything else keeps its message and
    borrows a `status` attribute when it carries a usable one; otherwise it
    becomes a generic 500.
    """
    if isinstance(fault, AppError):
        return fault

    status = getattr(fault, "status", None)
    if not isinstance(status, int) or isinstance(status, bool) or not 400 <= status <= 599:
        status = DEFAULT_STATUS

    return AppError(
        message=str(fault) or DEFAULT_MESSAGE,
        status=status,
        context={"original_error": type(fault).__name__},
    )
