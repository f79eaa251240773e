# app/modules/products/schemas.py
from pydantic import Field
from typing import Optional
from decimal import Decimal
from datetime import datetime
from app.shared.schemas.common import CamelModel, Money

class ProductCreate(CamelModel):
    """Schema para crear un producto (la categoría se crea si no existe)"""
    name: str = Field(..., min_length=1, max_length=255, description="Nombre del producto")
    description: Optional[str] = None
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2, description="Precio de venta")
    stock: int = Field(0, ge=0, description="Stock inicial")
    category: str = Field(..., min_length=1, max_length=100, description="Nombre de la categoría")
    active: bool = True

class ProductResponse(CamelModel):
    """Producto del catálogo con su categoría"""
    id: int
    name: str
    description: Optional[str] = None
    price: Money
    stock: int
    active: bool
    category: Optional[str] = None
    created_at: Optional[datetime] = None

class ProductActiveUpdate(CamelModel):
    id: int = Field(..., gt=0, description="ID del producto")
    active: bool = Field(..., description="Producto disponible para la venta (los inactivos se rechazan al vender)")

class ProductDeleteRequest(CamelModel):
    id: int = Field(..., gt=0, description="ID del producto")
