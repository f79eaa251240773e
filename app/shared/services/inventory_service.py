from typing import List, Dict, Any
from collections import OrderedDict
from sqlalchemy.orm import Session
from sqlalchemy import update
import logging

from app.core.exceptions import NotFoundError, InsufficientStockError, ValidationError
from app.shared.database.models import Product

logger = logging.getLogger(__name__)

class InventoryService:
    """Operaciones de stock usadas dentro de una transacción de venta"""

    @staticmethod
    def required_quantities(items: List[Dict[str, Any]]) -> "OrderedDict[int, int]":
        """
        Cantidad total requerida por producto, ordenada por product_id.

        Dos líneas del mismo producto suman su cantidad: el stock se valida
        contra el total, no línea por línea.
        """
        totals: Dict[int, int] = {}
        for item in items:
            totals[item['product_id']] = totals.get(item['product_id'], 0) + item['quantity']
        return OrderedDict(sorted(totals.items()))

    @staticmethod
    def validate_and_reserve_stock(
        db: Session,
        items: List[Dict[str, Any]]
    ) -> Dict[int, Product]:
        """
        Validar y reservar stock con bloqueo pesimista.

        - SELECT FOR UPDATE sobre todos los productos de la venta
        - Bloqueo en orden ascendente de id (sin deadlocks entre ventas)
        - Validación completa antes de modificar datos

        Args:
            db: Sesión de base de datos
            items: Items a validar [{product_id, quantity}]

        Returns:
            Dict[product_id, Product]: Productos bloqueados

        Raises:
            NotFoundError: Si algún producto no existe
            ValidationError: Si algún producto está inactivo
            InsufficientStockError: Si algún producto no alcanza la cantidad
        """
        required = InventoryService.required_quantities(items)

        products = db.query(Product).filter(
            Product.id.in_(list(required.keys()))
        ).order_by(Product.id).with_for_update().all()

        reserved = {product.id: product for product in products}

        missing = [product_id for product_id in required if product_id not in reserved]
        if missing:
            raise NotFoundError(
                "Producto no encontrado: " + ", ".join(f"ID {product_id}" for product_id in missing),
                details={"product_ids": missing}
            )

        inactive = [product for product in products if not product.is_active]
        if inactive:
            raise ValidationError(
                "Producto no disponible para la venta: " + ", ".join(product.name for product in inactive),
                details={"product_ids": [product.id for product in inactive]}
            )

        unavailable = []
        for product_id, quantity in required.items():
            product = reserved[product_id]
            if product.stock < quantity:
                unavailable.append({
                    "product_id": product_id,
                    "name": product.name,
                    "available": product.stock,
                    "required": quantity
                })

        if unavailable:
            raise InsufficientStockError(
                "Stock insuficiente para: " + ", ".join(
                    f"{x['name']} (stock: {x['available']}, necesario: {x['required']})"
                    for x in unavailable
                ),
                details={"products": unavailable}
            )

        return reserved

    @staticmethod
    def decrement_stock(db: Session, items: List[Dict[str, Any]]) -> None:
        """
        Descontar stock con UPDATE condicional (stock >= cantidad).

        Si otra transacción consumió el stock entre la validación y el
        descuento, el UPDATE no afecta filas y la venta completa se revierte.
        """
        for product_id, quantity in InventoryService.required_quantities(items).items():
            result = db.execute(
                update(Product)
                .where(Product.id == product_id, Product.stock >= quantity)
                .values(stock=Product.stock - quantity)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount != 1:
                logger.warning(f"Conflicto de stock en producto {product_id} (necesario: {quantity})")
                raise InsufficientStockError(
                    f"Stock insuficiente para el producto ID {product_id}",
                    details={"products": [{"product_id": product_id, "required": quantity}]}
                )

    @staticmethod
    def restore_stock(db: Session, items: List[Dict[str, Any]]) -> None:
        """Devolver al stock las cantidades de una venta eliminada"""
        for product_id, quantity in InventoryService.required_quantities(items).items():
            db.execute(
                update(Product)
                .where(Product.id == product_id)
                .values(stock=Product.stock + quantity)
                .execution_options(synchronize_session=False)
            )
