"""
Root endpoint.

``GET /`` answers with a fixed greeting so you can check in a browser
that the backend is up.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()

WELCOME_MESSAGE = "Welcome to the backend!"


@router.get("/", response_class=PlainTextResponse)
async def welcome() -> str:
    return WELCOME_MESSAGE
