from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from mediachat.config import get_settings
from mediachat.errors import ChatError
from mediachat.handlers import chat_handler
from mediachat.models import ErrorBody
from mediachat.utils.logging_config import setup_logging

setup_logging(get_settings().log_level)

app = FastAPI(title="Media Chat API")

app.include_router(chat_handler.router)


@app.exception_handler(ChatError)
async def chat_error_handler(request: Request, exc: ChatError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=ErrorBody(error=exc.message).model_dump())


@app.get("/healthz")
async def healthz():
    return {"status": "ok"}
