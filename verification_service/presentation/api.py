from fastapi import APIRouter

from verification_service.presentation.routers.v1.static_codes import (
    router as static_codes_router,
)
from verification_service.presentation.routes.health import router as health_router

api = APIRouter()
api.include_router(health_router)

# Add all v1 routers here
routers = (static_codes_router,)
for router in routers:
    api.include_router(router, prefix="/v1")
