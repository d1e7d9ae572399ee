# storefront/api/routers/products.py
from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from storefront.api.dependencies import get_catalog_store
from storefront.domain.errors import ResourceNotFound
from storefront.domain.schemas import ProductOut
from storefront.stores import CatalogStore
from storefront.utils.parsing import parse_int

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=List[ProductOut])
def list_products(store: CatalogStore = Depends(get_catalog_store)):
    return store.list_all()


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: str, store: CatalogStore = Depends(get_catalog_store)):
    try:
        return store.get_by_id(parse_int(product_id))
    except ResourceNotFound as e:
        return JSONResponse(status_code=404, content={"error": e.message})
