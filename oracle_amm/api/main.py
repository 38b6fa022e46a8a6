"""FastAPI application for the quoter."""

import os

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from oracle_amm import __version__
from oracle_amm.api.endpoints import QuoteRejected, router
from oracle_amm.models.snapshot import ErrorResponse

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("QUOTER_HOST", "0.0.0.0")
PORT = int(os.environ.get("QUOTER_PORT", "8000"))
DEBUG = os.environ.get("QUOTER_DEBUG", "false").lower() in ("true", "1", "yes")

app = FastAPI(
    title="BrownFi Quoter",
    description="Off-chain swap quotes for oracle-anchored BrownFi pools",
    version=__version__,
)


@app.exception_handler(QuoteRejected)
async def quote_rejected_handler(request: Request, exc: QuoteRejected) -> JSONResponse:
    """Render rejected quotes as ErrorResponse bodies."""
    _ = request
    body = ErrorResponse(error=exc.error, detail=exc.detail)
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


app.include_router(router)


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


def run() -> None:
    """Run the quoter API server.

    Configuration via environment variables:
    - QUOTER_HOST: Host to bind to (default: 0.0.0.0)
    - QUOTER_PORT: Port to bind to (default: 8000)
    - QUOTER_DEBUG: Enable debug/reload mode (default: false)
    """
    uvicorn.run(
        "oracle_amm.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()
