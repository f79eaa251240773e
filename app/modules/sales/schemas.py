# app/modules/sales/schemas.py
from pydantic import Field
from typing import List, Optional
from decimal import Decimal
from datetime import datetime
from app.shared.schemas.common import BaseResponse, CamelModel, Money

# ===== REQUESTS =====

class SaleItemCreate(CamelModel):
    product_id: int = Field(..., gt=0, description="ID del producto")
    quantity: int = Field(..., gt=0, description="Cantidad")
    unit_price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2, description="Precio unitario al momento de la venta")

class SaleCreateRequest(CamelModel):
    customer_id: int = Field(..., gt=0, description="ID del cliente")
    items: List[SaleItemCreate] = Field(..., min_length=1, description="Items de la venta")

class SaleStatusUpdateRequest(CamelModel):
    id: int = Field(..., gt=0, description="ID de la venta")
    estado: str = Field(..., min_length=1, description="PENDIENTE, COMPLETADA o CANCELADA")

class SaleDeleteRequest(CamelModel):
    id: int = Field(..., gt=0, description="ID de la venta")

# ===== RESPONSES =====

class CustomerInfo(CamelModel):
    name: str
    email: str

class ProductSnapshot(CamelModel):
    id: int
    name: str
    stock: int

class ProductName(CamelModel):
    name: str

class SaleItemDetail(CamelModel):
    id: int
    product_id: int
    quantity: int
    unit_price: Money
    subtotal: Money
    product: ProductSnapshot

class SaleListItemLine(CamelModel):
    id: int
    product_id: int
    quantity: int
    unit_price: Money
    subtotal: Money
    product: ProductName

class SaleSummary(CamelModel):
    id: int
    customer_id: int
    total: Money
    estado: str
    created_at: Optional[datetime] = None
    customer: CustomerInfo

class SaleDetail(SaleSummary):
    items: List[SaleItemDetail]

class SaleListItem(SaleSummary):
    items: List[SaleListItemLine]

class SaleStatusResponse(BaseResponse):
    sale: SaleSummary
