# app/modules/products/router.py
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.config.database import get_db
from app.shared.schemas.common import BaseResponse
from .repository import ProductsRepository
from .service import ProductsService
from .schemas import ProductCreate, ProductResponse, ProductActiveUpdate, ProductDeleteRequest

router = APIRouter()


def get_products_service(db: Session = Depends(get_db)) -> ProductsService:
    return ProductsService(ProductsRepository(db))


@router.get("", response_model=List[ProductResponse])
def list_products(service: ProductsService = Depends(get_products_service)):
    """Listar el catálogo de productos con stock actual"""
    return service.list_products()

@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def create_product(
    product_data: ProductCreate,
    service: ProductsService = Depends(get_products_service)
):
    """Crear un producto; la categoría se crea si no existe"""
    return service.create_product(product_data)

@router.get("/{product_id}", response_model=ProductResponse)
def get_product(product_id: int, service: ProductsService = Depends(get_products_service)):
    """Obtener un producto por ID"""
    return service.get_product(product_id)

@router.patch("", response_model=ProductResponse)
def set_product_active(
    update: ProductActiveUpdate,
    service: ProductsService = Depends(get_products_service)
):
    """Activar o desactivar un producto"""
    return service.set_active(update.id, update.active)

@router.delete("", response_model=BaseResponse)
def delete_product(
    request: ProductDeleteRequest,
    service: ProductsService = Depends(get_products_service)
):
    """Eliminar un producto sin ventas registradas"""
    return service.delete_product(request.id)
