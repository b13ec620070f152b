from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.staticfiles import StaticFiles

from cobj_core.config import AppConfig, load_app_config
from cobj_core.hubspot import CustomObjectClient, build_hubspot_client
from cobj_core.ui.router import router as ui_router
from cobj_core.ui.views import STATIC_DIR as UI_STATIC_DIR

logger = logging.getLogger(__name__)


def create_app(
    config: AppConfig | None = None,
    client: CustomObjectClient | None = None,
) -> FastAPI:
    """Build the web app.

    `config` defaults to the environment; `client` defaults to a HubSpot client
    built (and closed) by the app lifespan.
    """

    config = config or load_app_config()

    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        logger.info("Custom object proxy starting up")
        logger.info(f"Object type: {config.custom_object_type} ({config.hubspot_api_base_url})")

        app.state.config = config
        owned = None
        if client is None:
            owned = build_hubspot_client(config)
            app.state.cobj_client = owned
        else:
            app.state.cobj_client = client

        try:
            yield
        finally:
            if owned is not None:
                await owned.aclose()

    app = FastAPI(title="Custom Object Proxy", version="0.1.0", lifespan=_lifespan)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        response = await call_next(request)
        logger.info(f"{request.method} {request.url.path} - {response.status_code}")
        return response

    @app.exception_handler(HTTPException)
    async def _http_exception_handler(request: Request, exc: HTTPException) -> PlainTextResponse:
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def _starlette_http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> PlainTextResponse:
        message = exc.detail if isinstance(exc.detail, str) else "HTTP error"
        return PlainTextResponse(message, status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def _unhandled_error_handler(request: Request, exc: Exception) -> PlainTextResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return PlainTextResponse("Internal server error", status_code=500)

    if UI_STATIC_DIR.is_dir():
        app.mount("/static", StaticFiles(directory=str(UI_STATIC_DIR)), name="static")
    else:
        logger.warning(
            "UI static directory is missing (%s); /static will not be served", UI_STATIC_DIR
        )
    app.include_router(ui_router)

    @app.get("/healthz")
    async def healthz() -> dict[str, str]:
        return {"status": "ok"}

    return app
