"""
FastAPI application entry point.
hcomp-app - random phrase and version service.
"""

import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from hcomp_app.api.routes import router
from hcomp_app.config import APP_NAME, HOST, NOT_FOUND_BODY, get_settings

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    yield

    logger.info(f"Shutting down {APP_NAME}...")


app = FastAPI(
    title=APP_NAME,
    description="Returns a random phrase and the running version",
    lifespan=lifespan,
    redirect_slashes=False,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)


@app.exception_handler(StarletteHTTPException)
async def not_found_handler(request: Request, exc: StarletteHTTPException):
    """Render unknown routes as plain text, defer everything else to FastAPI."""
    if exc.status_code == 404:
        return PlainTextResponse(NOT_FOUND_BODY, status_code=404)
    return await http_exception_handler(request, exc)


# Include routers
app.include_router(router)


class ListeningServer(uvicorn.Server):
    """
    uvicorn server that reports the port and version once the socket is bound.
    A failed bind exits inside uvicorn before the line is written.
    """

    async def startup(self, sockets=None) -> None:
        await super().startup(sockets=sockets)
        if self.should_exit:
            return

        settings = get_settings()
        logger.info(f"{APP_NAME} listening on :{settings.port}, version={settings.version}")


def run() -> None:
    """Start the server on all interfaces using the configured port."""
    settings = get_settings()
    config = uvicorn.Config(app, host=HOST, port=settings.port, access_log=False)
    ListeningServer(config).run()


if __name__ == "__main__":
    run()
