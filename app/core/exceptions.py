# app/core/exceptions.py
"""
Errores de dominio del sistema de inventario y ventas.

Cada error lleva un código estable (error_code) que el cliente puede
distinguir, el status HTTP con el que se expone y un mensaje legible.
"""
from typing import Any, Dict, Optional


class InventarioError(Exception):
    """Base de todos los errores de negocio"""
    error_code = "INVENTARIO_ERROR"
    status_code = 400

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(InventarioError):
    """Datos de entrada incompletos o inválidos"""
    error_code = "VALIDATION_ERROR"
    status_code = 400


class NotFoundError(InventarioError):
    """Producto, cliente o venta inexistente"""
    error_code = "NOT_FOUND"
    status_code = 404


class InsufficientStockError(InventarioError):
    """La cantidad solicitada supera el stock disponible"""
    error_code = "INSUFFICIENT_STOCK"
    status_code = 409


class TransactionFailure(InventarioError):
    """El commit atómico no pudo completarse (conflicto, lock, caída del motor)"""
    error_code = "TRANSACTION_FAILURE"
    status_code = 503
