"""
Notes API: Request Stages and Error Chain
===========================================

What:  The explicit ordering of request stages (real routes, then the
       not-found interceptor) and of error stages (translators and loggers,
       then one terminal renderer).
How:   `mount_routes()` includes routers in the order given and the
       interceptor last. `ErrorChain` walks its stages for every delegated
       error; each stage returns `Handled` (stop, send this response) or
       `PassThrough` (hand this error to the next stage). The terminal stage
       always renders the JSON envelope.

Error Flow:
    handler raises AppError / body parsing fails
        → ExceptionMiddleware → ErrorChain
        → translate_body_errors → translate_http_errors → log_fault
        → render_error_envelope

    router raises its own 404/405 (method outside the catch-all)
        → ErrorChain → translate_http_errors → RouteNotFoundError (404)

    handler raises anything else
        → not registered here → host default plain-text 500

Only AppError, RequestValidationError and the router's HTTPException are
registered. Generic exceptions are left to the host, so a fault that
nobody delegated never gets the shaped envelope.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Sequence, Union

from fastapi import APIRouter, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from notes_api.exceptions import (
    AppError,
    ConfigurationError,
    RouteNotFoundError,
    ValidationError,
    as_app_error,
)
from notes_api.middleware.request_id import request_id_var
from notes_api.schemas.note import ErrorDetail, ErrorResponse

logger = logging.getLogger(__name__)

MALFORMED_BODY = "Malformed request body"


# ══════════════════════════════════════════════════════════════════════════
# Stage Outcomes
# ══════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class Handled:
    """The stage answered the request; later stages do not run."""

    response: Response


@dataclass(frozen=True)
class PassThrough:
    """The stage hands `error` (possibly translated) to the next stage."""

    error: BaseException


Outcome = Union[Handled, PassThrough]
ErrorStage = Callable[[Request, BaseException], Outcome]
TerminalStage = Callable[[Request, BaseException], Response]


# ══════════════════════════════════════════════════════════════════════════
# Default Error Stages
# ══════════════════════════════════════════════════════════════════════════


def translate_body_errors(request: Request, fault: BaseException) -> Outcome:
    """Turns FastAPI's body-parsing failure into a 400 ValidationError."""
    if isinstance(fault, RequestValidationError):
        return PassThrough(
            ValidationError(
                message=MALFORMED_BODY,
                context={"errors": [err.get("type") for err in fault.errors()]},
            )
        )
    return PassThrough(fault)


def translate_http_errors(request: Request, fault: BaseException) -> Outcome:
    """
    Turns the router's own HTTPExceptions into AppErrors.

    404 and 405 both mean no route serves this method and path, so both
    become RouteNotFoundError. Other statuses keep their status and detail.
    """
    if isinstance(fault, StarletteHTTPException):
        if fault.status_code in (404, 405):
            return PassThrough(RouteNotFoundError(request.method, request.url.path))
        return PassThrough(AppError(message=str(fault.detail), status=fault.status_code))
    return PassThrough(fault)


def log_fault(request: Request, fault: BaseException) -> Outcome:
    """Logs the delegated error: 4xx as WARNING, 5xx as ERROR with traceback."""
    error = as_app_error(fault)
    rid = request_id_var.get("")
    if error.status >= 500:
        logger.error(
            "[%s] %s %s delegated %s: %s | Context: %s",
            rid,
            request.method,
            request.url.path,
            type(fault).__name__,
            error.message,
            dict(error.context),
            exc_info=fault,
        )
    else:
        logger.warning(
            "[%s] %s %s delegated %s (%d): %s",
            rid,
            request.method,
            request.url.path,
            type(fault).__name__,
            error.status,
            error.message,
        )
    return PassThrough(fault)


def render_error_envelope(request: Request, fault: BaseException) -> Response:
    """
    Terminal stage: the single place that produces the shaped error response.

    Any value is accepted. Non-AppError values are coerced (status 500 unless
    the value carries its own status).
    """
    error = as_app_error(fault)
    body = ErrorResponse(error=ErrorDetail(message=error.message, status=error.status))
    return JSONResponse(status_code=error.status, content=body.model_dump())


DEFAULT_ERROR_STAGES: Sequence[ErrorStage] = (translate_body_errors, translate_http_errors, log_fault)

# Exception types routed into the chain. Everything else stays with the host.
DELEGATED_ERRORS = (AppError, RequestValidationError, StarletteHTTPException)


# ══════════════════════════════════════════════════════════════════════════
# Error Chain
# ══════════════════════════════════════════════════════════════════════════


class ErrorChain:
    """
    Ordered error stages followed by exactly one terminal renderer.

    The terminal stage is a separate argument, so it is always last and can
    not be listed twice.
    """

    def __init__(
        self,
        stages: Sequence[ErrorStage] = DEFAULT_ERROR_STAGES,
        terminal: TerminalStage = render_error_envelope,
    ):
        if terminal in stages:
            raise ConfigurationError("The terminal error stage must not also be a regular stage")
        self.stages = tuple(stages)
        self.terminal = terminal

    def dispatch(self, request: Request, fault: BaseException) -> Response:
        for stage in self.stages:
            outcome = stage(request, fault)
            if isinstance(outcome, Handled):
                return outcome.response
            fault = outcome.error
        return self.terminal(request, fault)

    async def __call__(self, request: Request, exc: Exception) -> Response:
        return self.dispatch(request, exc)

    def install(self, app: FastAPI) -> None:
        """
        Register this chain as the app's handler for delegated errors.

        Raises:
            ConfigurationError: an error chain is already installed on `app`
        """
        if getattr(app.state, "error_chain", None) is not None:
            raise ConfigurationError("An error chain is already installed on this application")
        for exc_type in DELEGATED_ERRORS:
            app.add_exception_handler(exc_type, self)
        app.state.error_chain = self


# ══════════════════════════════════════════════════════════════════════════
# Request Stages
# ══════════════════════════════════════════════════════════════════════════


def mount_routes(
    app: FastAPI,
    routers: Sequence[APIRouter],
    interceptor: APIRouter,
) -> None:
    """
    Include `routers` in order, then the not-found interceptor.

    The interceptor matches every path and method, so anything mounted after
    it would be unreachable. Mounting it through this function is the only
    supported way.
    """
    if interceptor in routers:
        raise ConfigurationError("The not-found interceptor must be mounted after every real route")
    for router in routers:
        app.include_router(router)
    app.include_router(interceptor)
