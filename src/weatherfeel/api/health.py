# src/weatherfeel/api/health.py
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["health"])


@router.get("/hello", response_class=PlainTextResponse)
async def hello():
    return "hello"


@router.get("/health")
async def health():
    return {"status": "ok"}
