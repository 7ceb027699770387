"""
Reelsmith API
FastAPI application that turns a narration script into a short vertical video

This is the main entry point that wires together all routes and services.
"""

import os
import uuid
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .config import (
    API_TITLE,
    API_DESCRIPTION,
    API_VERSION,
    CORS_ORIGINS,
    OUTPUT_DIR,
)
from .core import (
    setup_logging,
    get_logger,
    set_request_id,
    clear_context,
    parse_bool_env,
)
from .routes import projects_router, scripts_router

# Initialize logging
log_level = os.getenv("LOG_LEVEL", "INFO")
log_file = os.getenv("LOG_FILE")
use_json_logs = parse_bool_env(os.getenv("JSON_LOGS"), default=False)

setup_logging(
    level=log_level,
    log_file=Path(log_file) if log_file else None,
    use_json=use_json_logs,
)

logger = get_logger(__name__, service="api")
logger.info("Starting Reelsmith API", extra={
    "log_level": log_level,
    "json_logs": use_json_logs,
})

OUTPUT_DIR.mkdir(parents=True, exist_ok=True)

app = FastAPI(
    title=API_TITLE,
    description=API_DESCRIPTION,
    version=API_VERSION,
)


@app.middleware("http")
async def add_request_correlation(request: Request, call_next):
    """Attach a correlation ID to every request and its log lines."""
    request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
    set_request_id(request_id)
    path = request.url.path

    logger.info(f"{request.method} {path}", extra={
        "method": request.method,
        "path": path,
    })

    try:
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        logger.info(f"Response: {response.status_code}", extra={
            "status_code": response.status_code,
            "method": request.method,
            "path": path,
        })
        return response
    finally:
        clear_context()


app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Generated images and narration
app.mount("/outputs", StaticFiles(directory=str(OUTPUT_DIR)), name="outputs")

app.include_router(projects_router)
app.include_router(scripts_router)


@app.get("/health")
async def health_check():
    return {"status": "healthy", "version": API_VERSION}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "reelsmith.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        reload=parse_bool_env(os.getenv("RELOAD"), default=False),
    )
