"""
Notes API: Fault Demonstration Routes
=======================================

What:  Two handlers that fail on purpose, one per side of the error contract.

    GET /error   builds a plain RuntimeError and delegates it explicitly.
                 The error chain coerces it to a 500 JSON envelope.
    GET /crash   raises without delegating. The fault skips the error chain,
                 is logged by the access-log middleware, and the host answers
                 with its default plain-text 500. Other requests are unaffected.
"""

from fastapi import APIRouter

from notes_api.exceptions import as_app_error
from notes_api.schemas.note import ErrorResponse

router = APIRouter(tags=["Faults"])


@router.get(
    "/error",
    responses={500: {"description": "Delegated generic fault", "model": ErrorResponse}},
    summary="Delegate a generic error",
)
async def delegated_error() -> None:
    try:
        raise RuntimeError("Something went wrong")
    except RuntimeError as e:
        raise as_app_error(e) from e


@router.get("/crash", summary="Raise an error nobody delegates")
async def unhandled_crash() -> None:
    raise RuntimeError("Unhandled failure in /crash")
