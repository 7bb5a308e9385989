from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from voicememo.api.middleware.error_handler import (
    handle_generic_error,
    handle_validation_error,
    handle_voice_memo_error,
)
from voicememo.api.middleware.logging import RequestLoggingMiddleware
from voicememo.api.routes import router as api_router
from voicememo.api.routes.health import router as health_router
from voicememo.config import settings
from voicememo.core.exceptions import VoiceMemoError
from voicememo.core.logger import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    setup_logging(settings.log_level, json_format=settings.log_format.lower() == "json")
    yield
    # Shutdown


def create_app() -> FastAPI:
    app = FastAPI(
        title="Voice Memo API",
        description="Transcription proxy and keyword-based memo summaries",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(RequestLoggingMiddleware)

    # Register exception handlers (order matters - most specific first)
    app.add_exception_handler(VoiceMemoError, handle_voice_memo_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_generic_error)

    app.include_router(health_router)
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
