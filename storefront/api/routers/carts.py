# storefront/api/routers/carts.py
from typing import List

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from storefront.api.dependencies import get_cart_store
from storefront.domain.errors import ResourceNotFound
from storefront.domain.schemas import CartLineOut, CartOut, ItemIn
from storefront.stores import CartStore
from storefront.utils.parsing import parse_int

router = APIRouter(prefix="/cart", tags=["cart"])


@router.post("/{user_id}", response_model=CartOut)
def add_item(
    user_id: str,
    payload: ItemIn | None = Body(None),
    store: CartStore = Depends(get_cart_store),
):
    #no body at all is treated like an empty object
    payload = payload or ItemIn()
    cart = store.add_item(user_id, payload.product_id, payload.quantity)
    return {"message": "Item added", "cart": cart}


@router.delete("/{user_id}/{product_id}", response_model=CartOut)
def remove_item(user_id: str, product_id: str, store: CartStore = Depends(get_cart_store)):
    try:
        cart = store.remove_item(user_id, parse_int(product_id))
    except ResourceNotFound as e:
        return JSONResponse(status_code=404, content={"error": e.message})
    return {"message": "Item removed", "cart": cart}


@router.get("/{user_id}", response_model=List[CartLineOut])
def get_cart(user_id: str, store: CartStore = Depends(get_cart_store)):
    return store.get_cart(user_id)
