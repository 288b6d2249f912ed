"""API v1 router configuration."""

from fastapi import APIRouter

from api.v1.routes.auth import router as auth_router
from api.v1.routes.console import router as console_router
from api.v1.routes.orders import router as orders_router
from api.v1.routes.products import router as products_router
from api.v1.routes.profiles import router as profiles_router
from api.v1.schemas.common import ErrorResponse

router = APIRouter(
    responses={
        401: {"model": ErrorResponse, "description": "No active session or bad token"},
        429: {"model": ErrorResponse, "description": "Rate limit exceeded"},
    }
)
router.include_router(auth_router)
router.include_router(console_router)
router.include_router(profiles_router)
router.include_router(products_router)
router.include_router(orders_router)
