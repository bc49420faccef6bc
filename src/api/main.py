"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from api.models.responses import ErrorCodes, error_response
from api.routes import health_router, monthly_router
from core.config import API_DEBUG, API_VERSION, LOG_LEVEL
from core.exceptions import ConfigurationError, RemoteQueryError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Monthly counter API %s starting", API_VERSION)

    yield


app = FastAPI(
    title="Notion Monthly Finished Counter",
    description="Counts finished items in a Notion database for a calendar month",
    version=API_VERSION,
    debug=API_DEBUG,
    lifespan=lifespan,
)

# CORS middleware (for development)
if API_DEBUG:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError):
    """Missing or invalid credentials: fixed 500, no Notion call made."""
    logger.error("Configuration error on %s: %s", request.url.path, exc)
    return error_response(500, str(exc), ErrorCodes.CONFIGURATION_ERROR)


@app.exception_handler(RemoteQueryError)
async def remote_query_error_handler(request: Request, exc: RemoteQueryError):
    """Pass Notion's status and body through unchanged."""
    headers = {"Cache-Control": "no-store"}
    if isinstance(exc.body, (dict, list)):
        return JSONResponse(status_code=exc.status_code, content=exc.body, headers=headers)
    return Response(
        content=str(exc.body),
        status_code=exc.status_code,
        media_type="text/plain",
        headers=headers,
    )


# Global exception handler for unexpected errors
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions with standard error format."""
    logger.exception("Unhandled error on %s", request.url.path)
    return error_response(500, str(exc), ErrorCodes.INTERNAL_ERROR)


# Include routers
app.include_router(health_router)
app.include_router(monthly_router)


# Entry point for uvicorn
if __name__ == "__main__":
    import uvicorn

    from core.config import API_HOST, API_PORT

    uvicorn.run(
        "api.main:app",
        host=API_HOST,
        port=API_PORT,
        reload=API_DEBUG,
    )
