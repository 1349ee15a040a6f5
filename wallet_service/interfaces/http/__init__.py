from fastapi import APIRouter

from wallet_service.interfaces.http.routers import auth, health, wallets


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(auth.router, prefix="/auth", tags=["auth"])
    router.include_router(wallets.router, prefix="/wallets", tags=["wallets"])
    return router


def create_health_router() -> APIRouter:
    router = APIRouter()
    router.include_router(health.router, prefix="/health", tags=["health"])
    return router


__all__ = [
    "create_api_router",
    "create_health_router",
]
