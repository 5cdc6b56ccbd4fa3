import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .integrations.google_maps import GoogleMapsClient
from .settings import get_settings
from .tools import ToolError
from .tools.router import TOOL_ENDPOINTS
from .tools.router import router as tools_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Load settings and open the shared Google Maps client."""
    settings = get_settings()
    app.state.settings = settings
    app.state.maps_client = GoogleMapsClient(
        api_key=settings.google_maps_api_key,
        timeout=settings.maps_request_timeout,
    )
    try:
        yield
    finally:
        await app.state.maps_client.aclose()


async def tool_error_handler(request: Request, exc: ToolError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.warning(f"Rejected request body on {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={"error": "The request body must be a JSON object with string fields."},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500, content={"error": "An internal server error occurred."}
    )


def create_app() -> FastAPI:
    app = FastAPI(title="LLM Maps Tools", version="0.1.0", lifespan=lifespan)

    app.include_router(tools_router)

    app.add_exception_handler(ToolError, tool_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    @app.get("/")
    async def root():
        """List the available tools."""
        return {"ok": True, "app": app.title, "tools": TOOL_ENDPOINTS}

    return app


app = create_app()


def main():
    """Main entry point for the web server."""
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info(f"LLM Maps Tools running on http://localhost:{settings.port}")
    logger.info("Available tools:")
    for endpoint in TOOL_ENDPOINTS:
        logger.info(f"  - {endpoint}")
    uvicorn.run(app, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
