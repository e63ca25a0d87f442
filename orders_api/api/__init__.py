from fastapi import APIRouter
from .routes import orders_router

# Main API router
api_router = APIRouter(prefix="/api")

api_router.include_router(orders_router)

__all__ = ["api_router"]
