"""FastAPI entrypoint: wires config, container, routes, and lifecycle hooks."""

from __future__ import annotations

from contextlib import asynccontextmanager
from time import perf_counter

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from wilayah.api.http.filter import router as filter_router
from wilayah.api.http.health import router as health_router
from wilayah.api.http.regions import router as regions_router
from wilayah.core.config import Settings
from wilayah.core.container import AppContainer, build_container
from wilayah.core.lifecycle import on_shutdown, on_startup
from wilayah.infra.observability.logger import ACCESS_LOGGER, get_logger, setup_logging

access_logger = get_logger(ACCESS_LOGGER)


def create_app(settings: Settings | None = None, container: AppContainer | None = None) -> FastAPI:
    settings = settings or Settings.from_env()
    setup_logging(settings.log_level)
    container = container or build_container(settings)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        await on_startup(container)
        try:
            yield
        finally:
            on_shutdown()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def access_log(request: Request, call_next):
        started = perf_counter()
        response = None
        try:
            response = await call_next(request)
            return response
        finally:
            target = request.url.path + (f"?{request.url.query}" if request.url.query else "")
            access_logger.info(
                "%s %s -> %s in %.1fms",
                request.method,
                target,
                response.status_code if response is not None else 500,
                (perf_counter() - started) * 1000,
            )

    app.include_router(health_router)
    app.include_router(regions_router)
    app.include_router(filter_router)

    return app


app = create_app()
