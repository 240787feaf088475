"""
Wallet Balances Mock API

A FastAPI-based mock of a wallet balances endpoint. GET /wallets returns a
fixed list of five wallet balances after an artificial delay, which makes it
useful for exercising loading states and client timeouts against a slow
upstream.

Request pipeline:
-----------------
1. Request logging/metrics middleware assigns a request ID
2. The delay stage suspends the request (3 seconds by default) without
   blocking other requests
3. The wallet service builds the records, stamped with the current time
4. Any error is turned into {"error": {"message": ...}} with status 500
"""
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from wallet_mock import metrics
from wallet_mock.api import router
from wallet_mock.config import settings
from wallet_mock.errors import InternalError
from wallet_mock.schemas import ErrorDetail, ErrorEnvelope
from wallet_mock.logging import (
    configure_logging,
    get_logger,
    set_request_context,
    clear_request_context,
    generate_request_id,
)

# Configure structured logging
configure_logging()
logger = get_logger(__name__)

DEFAULT_ERROR_MESSAGE = "Internal Server Error"

# Metrics label for requests that matched no route
UNMATCHED_ROUTE = "unmatched"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Runs before uvicorn binds the socket; uvicorn logs its own line once listening
    logger.info(
        "service_starting",
        service_name=settings.service_name,
        url=f"http://localhost:{settings.port}",
        response_delay_ms=settings.response_delay_ms,
    )

    yield

    logger.info("service_stopping", service_name=settings.service_name)


app = FastAPI(
    title="Wallet Balances Mock API",
    description="Mock wallet balances endpoint with an artificial response delay",
    version="0.1.0",
    lifespan=lifespan,
)


@app.middleware("http")
async def request_logging_middleware(request: Request, call_next):
    """
    Middleware for request tracing, logging, and metrics.

    Sets up request context with:
    - request_id: Unique identifier for tracing
    - Timing for duration_ms calculation
    - Prometheus metrics collection
    """
    method = request.method
    path = request.url.path

    # Skip logging/metrics for health and metrics endpoints
    if path in ("/health", "/metrics"):
        return await call_next(request)

    request_id = request.headers.get("X-Request-ID") or generate_request_id()
    set_request_context(request_id)
    request.state.request_id = request_id

    start_time = time.perf_counter()

    logger.info("request_received", method=method, path=path)

    try:
        response = await call_next(request)

        duration_seconds = time.perf_counter() - start_time

        logger.info(
            "request_completed",
            method=method,
            path=path,
            status_code=response.status_code,
            duration_ms=round(duration_seconds * 1000, 2),
        )

        metrics.record_http_request(method, _route_label(request), response.status_code, duration_seconds)

        response.headers["X-Request-ID"] = request_id

        return response

    except Exception as e:
        duration_ms = (time.perf_counter() - start_time) * 1000

        logger.error(
            "request_failed",
            method=method,
            path=path,
            duration_ms=round(duration_ms, 2),
            error=str(e),
        )

        metrics.record_http_request(method, _route_label(request), 500)

        raise

    finally:
        clear_request_context()


def _route_label(request: Request) -> str:
    """Label metrics by route template so unknown paths share one series."""
    route = request.scope.get("route")
    return getattr(route, "path", UNMATCHED_ROUTE)


def _error_response(message: str) -> JSONResponse:
    """Build the 500 error envelope."""
    envelope = ErrorEnvelope(error=ErrorDetail(message=message or DEFAULT_ERROR_MESSAGE))
    return JSONResponse(status_code=500, content=envelope.model_dump())


@app.exception_handler(InternalError)
async def internal_error_handler(request: Request, exc: InternalError):
    """Handle errors raised by the wallet service."""
    logger.error(
        "wallet_service_error",
        path=request.url.path,
        error=exc.message,
        exc_info=exc,
    )
    return _error_response(exc.message)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    """Handle any other error so clients always get a JSON body."""
    logger.error(
        "unhandled_error",
        path=request.url.path,
        error_type=type(exc).__name__,
        exc_info=exc,
    )
    return _error_response(str(exc))


# Include API routes
app.include_router(router)


@app.get("/health")
async def health_check():
    """Health check endpoint for container orchestration."""
    return {"status": "ok", "service": settings.service_name}


@app.get("/metrics")
async def metrics_endpoint():
    """Prometheus metrics endpoint."""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )


def run() -> None:
    """Start the server on the configured host and port."""
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
