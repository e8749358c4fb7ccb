"""Cart and checkout routes."""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from ...schemas.store import Cart, CartItemAdd, CartItemUpdate, CartItemUpdateResult, Order, ShippingInfo
from ...services import CartService, OrderService
from ..dependencies import get_cart_service, get_current_user_id, get_order_service

router = APIRouter(prefix="/api/users", tags=["cart"])


@router.get("/cart", response_model=Cart)
def get_cart(
    user_id: str = Depends(get_current_user_id),
    service: CartService = Depends(get_cart_service),
) -> Cart:
    return service.get_cart(user_id)


@router.post("/cart/items", response_model=Cart, status_code=status.HTTP_201_CREATED)
def add_cart_item(
    data: CartItemAdd,
    user_id: str = Depends(get_current_user_id),
    service: CartService = Depends(get_cart_service),
) -> Cart:
    return service.add_to_cart(user_id, data.product_id, data.quantity)


@router.patch("/cart/items/{item_id}", response_model=CartItemUpdateResult)
def update_cart_item(
    item_id: str,
    data: CartItemUpdate,
    user_id: str = Depends(get_current_user_id),
    service: CartService = Depends(get_cart_service),
) -> CartItemUpdateResult:
    return service.update_cart_item(user_id, item_id, data.quantity)


@router.delete("/cart/items/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_cart_item(
    item_id: str,
    user_id: str = Depends(get_current_user_id),
    service: CartService = Depends(get_cart_service),
) -> Response:
    service.remove_cart_item(user_id, item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/orders", response_model=Order, status_code=status.HTTP_201_CREATED)
def checkout(
    shipping: ShippingInfo,
    user_id: str = Depends(get_current_user_id),
    service: OrderService = Depends(get_order_service),
) -> Order:
    """Turn the caller's cart into an order."""
    return service.create_order_from_cart(user_id, shipping)


@router.get("/orders", response_model=List[Order])
def list_orders(
    user_id: str = Depends(get_current_user_id),
    service: OrderService = Depends(get_order_service),
) -> List[Order]:
    return service.list_user_orders(user_id)
