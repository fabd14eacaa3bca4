"""
Notes API: Not-Found Interceptor
==================================

What:  A catch-all route for every path that delegates
       "Route not found: <METHOD> <path>" (404).
When:  Only reached when no real route matched. It must be mounted after
       every real route (see pipeline.mount_routes) and the error chain turns
       its RouteNotFoundError into the JSON envelope.

A request whose path exists but whose method does not (e.g. POST /hello)
also ends up here and gets the same 404. Methods outside ALL_METHODS
(TRACE, CONNECT, custom verbs) make the router raise its own 405, which the
error chain's translate_http_errors stage turns into the same 404.
"""

from fastapi import APIRouter, Request

from notes_api.exceptions import RouteNotFoundError

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]

router = APIRouter()


@router.api_route("/{unmatched_path:path}", methods=ALL_METHODS, include_in_schema=False)
async def route_not_found(request: Request, unmatched_path: str) -> None:
    raise RouteNotFoundError(request.method, request.url.path)
