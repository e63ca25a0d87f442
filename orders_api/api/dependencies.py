from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_db
from ..repositories.order_repository import OrderRepository, SqlAlchemyOrderRepository
from ..services.order_service import OrderService


async def get_order_repository(
    db: AsyncSession = Depends(get_db)
) -> OrderRepository:
    """Dependency for OrderRepository"""
    return SqlAlchemyOrderRepository(db)


async def get_order_service(
    request: Request,
    repository: OrderRepository = Depends(get_order_repository)
) -> OrderService:
    """Dependency for OrderService"""
    settings = request.app.state.settings
    return OrderService(
        repository,
        default_page_size=settings.default_page_size,
        max_page_size=settings.max_page_size
    )
