import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app.api import auth, categories, products
from app.api.deps import build_catalog_store
from app.core.config import Settings
from app.core.errors import CatalogError
from app.db.init_db import init_db
from app.db.session import make_engine

logger = logging.getLogger(__name__)


async def catalog_error_handler(request: Request, exc: CatalogError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def create_app(
    settings: Optional[Settings] = None,
    mirror_transport: Optional[httpx.BaseTransport] = None,
) -> FastAPI:
    settings = settings or Settings()
    logging.basicConfig(level=settings.LOG_LEVEL.upper())

    engine = make_engine(settings.DATABASE_URL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Таблицы и начальные данные один раз при старте
        init_db(engine)
        app.state.catalog = build_catalog_store(settings, engine, transport=mirror_transport)
        logger.info("Sitora API started (env=%s, mirror=%s)", settings.ENV, settings.mirror_enabled)
        yield
        app.state.catalog.close()

    app = FastAPI(
        title="Sitora Catalog API",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.settings = settings

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(CatalogError, catalog_error_handler)

    # Routers - all already have /api prefix
    app.include_router(auth.router)
    app.include_router(categories.router)
    app.include_router(products.router)

    @app.get("/api/health")
    def health_check():
        return {
            "status": "healthy",
            "env": settings.ENV,
            "mirror": settings.mirror_enabled
        }

    # Собранный фронтенд, если есть; иначе просто статус сервиса
    if settings.STATIC_DIR and os.path.isdir(settings.STATIC_DIR):
        app.mount("/", StaticFiles(directory=settings.STATIC_DIR, html=True), name="static")
    else:
        @app.get("/")
        def root():
            return {"status": "ok", "service": "sitora-api"}

    return app


app = create_app()
