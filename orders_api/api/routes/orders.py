from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from ...schemas.order import OrderPage, OrderRequest, OrderResponse
from ...services.order_service import OrderService
from ..dependencies import get_order_service

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("", response_model=OrderResponse)
async def create_order(
        payload: OrderRequest,
        order_service: OrderService = Depends(get_order_service)
):
    """Create a new order"""
    return await order_service.create(payload)


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(
        order_id: int,
        order_service: OrderService = Depends(get_order_service)
):
    """Get an order by id"""
    return await order_service.get(order_id)


@router.get("", response_model=OrderPage)
async def list_orders(
        page: int = Query(0, ge=0, description="Zero-based page number"),
        size: Optional[int] = Query(None, ge=1, description="Orders per page, defaults to the configured page size"),
        order_service: OrderService = Depends(get_order_service)
):
    """List orders sorted by id, one page at a time"""
    return await order_service.list(page=page, size=size)


@router.put("/{order_id}", response_model=OrderResponse)
async def update_order(
        order_id: int,
        payload: OrderRequest,
        order_service: OrderService = Depends(get_order_service)
):
    """Replace the customer and items of an order"""
    return await order_service.update(order_id, payload)


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_order(
        order_id: int,
        order_service: OrderService = Depends(get_order_service)
):
    """Delete an order and its items"""
    await order_service.delete(order_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
