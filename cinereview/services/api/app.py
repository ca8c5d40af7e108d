from __future__ import annotations

import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from cinereview.common.logging import get_logger
from cinereview.common.settings import get_settings
from cinereview.services.api.errors import install_error_handlers
from cinereview.services.api.routers import discover, health, movies, reviews, search

cfg = get_settings()
logger = get_logger()


def create_app() -> FastAPI:
    app = FastAPI(
        title="CineReview API",
        version=cfg.app_version,
        docs_url=f"{cfg.api.prefix}/docs",
        openapi_url=f"{cfg.api.prefix}/openapi.json",
    )

    # CORS
    dev = cfg.is_development
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if dev else cfg.api.cors_allow_origins,
        allow_methods=cfg.api.cors_allow_methods,
        allow_headers=cfg.api.cors_allow_headers,
        # browsers reject credentials with a wildcard origin
        allow_credentials=cfg.api.cors_allow_credentials and not dev,
    )

    @app.middleware("http")
    async def _log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            (time.perf_counter() - started) * 1000,
        )
        return response

    install_error_handlers(app)

    # Routers
    app.include_router(health.router)
    app.include_router(movies.router)
    app.include_router(search.router)
    app.include_router(reviews.router)
    app.include_router(discover.router)
    return app

app = create_app()
