"""
Kharda API - FastAPI application entry point.
"""
from __future__ import annotations

import logging
import os
import sys
import time
import uuid

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse


def _parse_csv_env(name: str, default: list[str]) -> list[str]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    return [value.strip() for value in raw.split(",") if value.strip()]


def _parse_bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


# Configure structured logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger("kharda")

app = FastAPI(
    title="Kharda API",
    description="Hearing diaries compiled from court registry spreadsheets",
    version="0.1.0",
)

# Runtime settings
cors_allow_origins = _parse_csv_env(
    "CORS_ALLOW_ORIGINS",
    [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ],
)
cors_allow_credentials = _parse_bool_env("CORS_ALLOW_CREDENTIALS", True)
audit_logging_enabled = _parse_bool_env("AUDIT_LOGGING", True)
max_request_bytes = int(os.getenv("MAX_REQUEST_BYTES", str(12 * 1024 * 1024)))
security_headers_enabled = _parse_bool_env("SECURITY_HEADERS_ENABLED", True)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_allow_origins,
    allow_credentials=cors_allow_credentials,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "X-Request-Id"],
    expose_headers=["Content-Disposition", "X-Record-Count", "X-Warning-Count", "X-Request-Id"],
)


@app.middleware("http")
async def request_audit_middleware(request: Request, call_next):
    started = time.perf_counter()
    request_id = request.headers.get("X-Request-Id") or uuid.uuid4().hex

    if request.url.path != "/health":
        content_length = request.headers.get("Content-Length")
        if content_length:
            try:
                if int(content_length) > max_request_bytes:
                    return JSONResponse(
                        status_code=413,
                        content={"detail": "Request entity too large"},
                    )
            except ValueError:
                pass

    response = await call_next(request)
    response.headers["X-Request-Id"] = request_id

    if security_headers_enabled:
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("Referrer-Policy", "no-referrer")

    if audit_logging_enabled:
        duration_ms = int((time.perf_counter() - started) * 1000)
        logger.info(
            "request_audit request_id=%s method=%s path=%s status=%s duration_ms=%s",
            request_id,
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )

    return response


# Register routes
from apps.api.routes.diaries import router as diaries_router  # noqa: E402

app.include_router(diaries_router)
app.include_router(diaries_router, prefix="/api/kharda")


@app.get("/health")
def health():
    return {"status": "ok", "version": "0.1.0"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("apps.api.main:app", host="0.0.0.0", port=8000, reload=True)
