"""API route registration."""

from fastapi import APIRouter

from wakeup.api.routes import health, hosts, wake

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(hosts.router, prefix="/hosts", tags=["hosts"])
api_router.include_router(wake.router, tags=["wake"])
