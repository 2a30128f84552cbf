from fastapi import APIRouter

from . import health, registration

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(registration.router)
