from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wallet_service import __version__
from wallet_service.core.config import get_settings
from wallet_service.core.observability import setup_logging
from wallet_service.infrastructure.database import dispose_engine, init_db
from wallet_service.interfaces.http import create_api_router, create_health_router
from wallet_service.interfaces.http.error_handlers import register_error_handlers

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.logging.level, settings.logging.format)
    await init_db()
    yield
    await dispose_engine()


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.project_name,
        description="Wallet metadata service with phone-number credentials",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(create_api_router(settings.api_prefix))
    app.include_router(create_health_router())

    return app


app = create_app()
