# storefront/api/routers/orders.py
from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from storefront.api.dependencies import get_order_store
from storefront.domain.errors import ResourceNotFound
from storefront.domain.schemas import OrderCreate, OrderCreated, OrderOut
from storefront.stores import OrderStore
from storefront.utils.parsing import parse_int

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("", response_model=OrderCreated)
def create_order(
    payload: OrderCreate | None = Body(None),
    store: OrderStore = Depends(get_order_store),
):
    """
    Accepts an order as submitted. Neither the user nor the items are checked.
    """
    payload = payload or OrderCreate()
    order_id = store.create_order(payload.user_id, payload.items)
    return {"message": "Order created", "order_id": order_id}


@router.get("/{order_id}", response_model=OrderOut)
def get_order(order_id: str, store: OrderStore = Depends(get_order_store)):
    try:
        return store.get_order(parse_int(order_id))
    except ResourceNotFound as e:
        return JSONResponse(status_code=404, content={"error": e.message})
