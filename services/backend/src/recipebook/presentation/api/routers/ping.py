"""Liveness endpoint at the site root."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()


@router.get("/", response_class=PlainTextResponse, summary="Ping")
async def greeting() -> str:
    return "Hello"
