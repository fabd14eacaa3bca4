"""
Notes API: Hello Route
========================

What:  GET /hello, the smallest possible successful handler.
"""

from fastapi import APIRouter

from notes_api.schemas.note import MessageResponse

router = APIRouter(tags=["Hello"])


@router.get("/hello", response_model=MessageResponse, summary="Say hello")
async def hello() -> MessageResponse:
    return MessageResponse(message="Hello")
