# app/modules/sales/router.py
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.config.database import get_db
from app.shared.schemas.common import BaseResponse
from .repository import SalesRepository
from .service import SalesService
from .schemas import (
    SaleCreateRequest, SaleDetail, SaleListItem,
    SaleStatusUpdateRequest, SaleStatusResponse, SaleDeleteRequest
)

router = APIRouter()


def get_sales_service(db: Session = Depends(get_db)) -> SalesService:
    """Servicio de ventas con su repository sobre la sesión del request"""
    return SalesService(SalesRepository(db))


@router.post("", response_model=SaleDetail, status_code=status.HTTP_201_CREATED)
def create_sale(
    sale_data: SaleCreateRequest,
    service: SalesService = Depends(get_sales_service)
):
    """
    Registrar venta completa

    **Incluye:**
    - Validación de cliente, productos y stock antes de escribir
    - Venta + items + descuento de inventario en una transacción
    - Precio unitario congelado al momento de la venta
    """
    return service.create_sale(sale_data)

@router.get("", response_model=List[SaleListItem])
def list_sales(service: SalesService = Depends(get_sales_service)):
    """Listar todas las ventas, más recientes primero"""
    return service.list_sales()

@router.patch("", response_model=SaleStatusResponse)
def update_sale_status(
    update: SaleStatusUpdateRequest,
    service: SalesService = Depends(get_sales_service)
):
    """Actualizar estado de venta: PENDIENTE, COMPLETADA o CANCELADA"""
    return service.update_sale_status(update.id, update.estado)

@router.delete("", response_model=BaseResponse)
def delete_sale(
    request: SaleDeleteRequest,
    service: SalesService = Depends(get_sales_service)
):
    """Eliminar una venta y devolver su stock"""
    return service.delete_sale(request.id)
