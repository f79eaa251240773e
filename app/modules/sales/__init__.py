# app/modules/sales/__init__.py
"""
Módulo de Ventas - Transacciones de venta con control de stock

Este módulo maneja el ciclo completo de ventas incluyendo:
- Registro de ventas con descuento atómico de inventario
- Listado de ventas con cliente e items
- Cambio de estado (PENDIENTE, COMPLETADA, CANCELADA)
- Eliminación de ventas con reversión de stock

Arquitectura:
- router.py: Endpoints de ventas
- service.py: Lógica de negocio de ventas
- repository.py: Acceso a datos y transacciones
- schemas.py: Modelos de request/response
"""

from .router import router
from .service import SalesService
from .repository import SalesRepository

__all__ = [
    "router",
    "SalesService",
    "SalesRepository"
]
