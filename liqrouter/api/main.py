"""FastAPI application for the liquidity router."""

import os

import uvicorn
from fastapi import FastAPI

from liqrouter import __version__
from liqrouter.api.endpoints import router

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("LIQROUTER_HOST", "0.0.0.0")
PORT = int(os.environ.get("LIQROUTER_PORT", "8000"))
DEBUG = os.environ.get("LIQROUTER_DEBUG", "false").lower() in ("true", "1", "yes")

app = FastAPI(
    title="Liquidity Router",
    description="Best-execution quotes across constant-product, concentrated-liquidity "
    "and order book pools",
    version=__version__,
)

app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}


def run() -> None:
    """Run the router API server.

    Configuration via environment variables:
    - LIQROUTER_HOST: Host to bind to (default: 0.0.0.0)
    - LIQROUTER_PORT: Port to bind to (default: 8000)
    - LIQROUTER_DEBUG: Enable debug/reload mode (default: false)
    """
    uvicorn.run(
        "liqrouter.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()
