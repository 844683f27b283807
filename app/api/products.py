# app/api/products.py

from typing import List

from fastapi import APIRouter

router = APIRouter(prefix="/api/productos", tags=["productos"])

PRODUCTS = ["mouse", "teclado", "bocinas"]


@router.get("", response_model=List[str])
@router.get("/", response_model=List[str], include_in_schema=False)
def list_products() -> List[str]:
    return list(PRODUCTS)
