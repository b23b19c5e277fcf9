"""
Roo Code Assistant - Backend Application

FastAPI application entry point. The editor extension talks to this service
for completions, the chat panel, SPARC guidance and provider settings.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from roo_code.api import api_router
from roo_code.core.config import get_config, get_log_path
from roo_code.core.logging import get_logger, setup_logging

APP_NAME = "Roo Code Assistant"
APP_VERSION = "0.1.0"

_startup_time = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Sets up logging on startup. The database is created by scripts/init_db.py,
    not here.
    """
    global _startup_time
    _startup_time = datetime.now(timezone.utc).isoformat()
    logger = setup_logging()
    config = get_config()
    logger.info("Starting %s...", APP_NAME)
    logger.debug("Log level: %s, log file: %s", config.logging.level, get_log_path())
    logger.info(
        "Default provider: %s, model: %s, request timeout: %ss",
        config.assistant.default_provider,
        config.assistant.default_model,
        config.assistant.request_timeout,
    )
    logger.info("Application startup complete")

    yield

    logger.info("Shutting down application...")


app = FastAPI(
    title=APP_NAME,
    description="Multi-provider AI assistant backend for the SPARC IDE",
    version=APP_VERSION,
    lifespan=lifespan,
)


@app.middleware("http")
async def log_requests(request, call_next):
    logger = get_logger()
    method = request.method
    path = request.url.path
    logger.debug("Request started: %s %s", method, path)
    response = await call_next(request)
    logger.debug("Request completed: %s %s -> %s", method, path, response.status_code)
    return response


app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "vscode-webview://*",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.get("/")
async def root():
    """Root endpoint - health check."""
    return {"name": APP_NAME, "version": APP_VERSION, "status": "running"}


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "startup_time": _startup_time,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


if __name__ == "__main__":
    import uvicorn

    config = get_config()
    uvicorn.run(
        "main:app",
        host=config.server.host,
        port=config.server.port,
        reload=config.server.debug,
    )
