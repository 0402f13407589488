"""FastAPI application for the liquidity pool.

State lives in memory for the lifetime of the process. Rate limiting and
authentication belong to the infrastructure in front of the service.
"""

import logging
import os

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from liquidity_pool import __version__
from liquidity_pool.api.endpoints import router
from liquidity_pool.errors import Overflow, PoolError, StaleState
from liquidity_pool.models.responses import ErrorResponse

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("POOL_HOST", "0.0.0.0")
PORT = int(os.environ.get("POOL_PORT", "8000"))
DEBUG = os.environ.get("POOL_DEBUG", "false").lower() in ("true", "1", "yes")

# Maximum request body size (64 KB, requests are a handful of fields)
MAX_REQUEST_SIZE = 64 * 1024

logger = structlog.get_logger()

app = FastAPI(
    title="Liquidity Pool",
    description="Constant product pool for a native asset and a token",
    version=__version__,
)


@app.middleware("http")
async def limit_request_size(request: Request, call_next):  # type: ignore[no-untyped-def]
    """Reject requests with body larger than MAX_REQUEST_SIZE."""
    content_length = request.headers.get("content-length")
    if content_length:
        try:
            size = int(content_length)
        except ValueError:
            return JSONResponse(status_code=400, content={"detail": "Invalid Content-Length"})
        if size > MAX_REQUEST_SIZE:
            return JSONResponse(status_code=413, content={"detail": "Request too large"})
    return await call_next(request)


def status_for(err: PoolError) -> int:
    """HTTP status for an engine error."""
    if isinstance(err, StaleState):
        return 409
    if isinstance(err, Overflow):
        return 400
    return 422


@app.exception_handler(PoolError)
async def pool_error_handler(request: Request, err: PoolError) -> JSONResponse:
    """Turn engine rejections into error responses carrying the error kind."""
    status_code = status_for(err)
    logger.info(
        "request_rejected",
        path=request.url.path,
        error=err.kind,
        status_code=status_code,
    )
    body = ErrorResponse(error=err.kind, detail=str(err))
    return JSONResponse(status_code=status_code, content=body.model_dump())


app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok"}


def configure_logging(debug: bool = DEBUG) -> None:
    """Configure structlog for console output."""
    log_level = logging.DEBUG if debug else logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
    )


def run() -> None:
    """Run the pool API server.

    Configuration via environment variables:
    - POOL_HOST: Host to bind to (default: 0.0.0.0)
    - POOL_PORT: Port to bind to (default: 8000)
    - POOL_DEBUG: Enable debug logging and reload mode (default: false)
    - POOL_ASSET_A_SYMBOL / POOL_ASSET_A_DECIMALS: Native asset (default: ETH / 18)
    - POOL_ASSET_B_SYMBOL / POOL_ASSET_B_DECIMALS: Token (default: USDT / 6)
    - POOL_DEFAULT_SLIPPAGE_BPS: Default swap slippage tolerance (default: 50)
    """
    configure_logging()
    uvicorn.run(
        "liquidity_pool.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()
