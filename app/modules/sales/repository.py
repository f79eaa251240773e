from sqlalchemy.orm import Session, joinedload, selectinload
from typing import Dict, Any, List, Optional
from decimal import Decimal
import logging

from app.config.database import transactional
from app.core.exceptions import NotFoundError
from app.modules.customers.repository import CustomersRepository
from app.shared.database.models import Sale, SaleItem, SaleStatus
from app.shared.services.inventory_service import InventoryService

logger = logging.getLogger(__name__)

class SalesRepository:
    def __init__(
        self,
        db: Session,
        inventory_service: Optional[InventoryService] = None,
        customers: Optional[CustomersRepository] = None
    ):
        self.db = db
        self.inventory_service = inventory_service or InventoryService()
        self.customers = customers or CustomersRepository(db)

    def create_sale_atomic(self, customer_id: int, items: List[Dict[str, Any]]) -> Sale:
        """
        Crear venta con actualización de inventario en transacción atómica.

        Proceso:
        1. Verificar cliente
        2. Reservar stock (SELECT FOR UPDATE, orden por product_id)
        3. Crear Sale + SaleItems (precio congelado de la solicitud)
        4. Descontar stock (UPDATE condicional)
        5. Commit único

        Args:
            customer_id: ID del cliente
            items: [{product_id, quantity, unit_price}]

        Returns:
            Sale: Venta creada con sus items

        Raises:
            NotFoundError: Cliente o producto inexistente
            InsufficientStockError: Stock insuficiente
            TransactionFailure: Error del motor durante la transacción
        """
        with transactional(self.db):
            # PASO 1: Cliente
            customer = self.customers.get_customer(customer_id)
            if not customer:
                raise NotFoundError(
                    f"Cliente con ID {customer_id} no encontrado",
                    details={"customer_id": customer_id}
                )

            # PASO 2: VALIDAR Y RESERVAR stock
            logger.info(f"Reservando stock para {len(items)} items")
            reserved = self.inventory_service.validate_and_reserve_stock(self.db, items)
            logger.info("Stock reservado: " + ", ".join(
                f"{product.name} ({product.stock})" for product in reserved.values()
            ))

            # PASO 3: CREAR VENTA + ITEMS
            sale_items = []
            total = Decimal("0")
            for item in items:
                subtotal = item['quantity'] * Decimal(str(item['unit_price']))
                total += subtotal
                sale_items.append(SaleItem(
                    product_id=item['product_id'],
                    quantity=item['quantity'],
                    unit_price=Decimal(str(item['unit_price'])),
                    subtotal=subtotal
                ))

            sale = Sale(
                customer_id=customer.id,
                total=total,
                status=SaleStatus.COMPLETED.value,
                items=sale_items
            )
            self.db.add(sale)
            self.db.flush()  # Obtener sale.id
            logger.info(f"Venta creada con ID: {sale.id} ({len(sale_items)} items, total {total})")

            # PASO 4: ACTUALIZAR INVENTARIO
            self.inventory_service.decrement_stock(self.db, items)
            logger.info("Inventario actualizado")

        logger.info(f"Transacción completada - Venta #{sale.id}")
        self.db.refresh(sale)
        return sale

    def list_sales(self) -> List[Sale]:
        """Todas las ventas, más recientes primero"""
        return self.db.query(Sale).options(
            joinedload(Sale.customer),
            selectinload(Sale.items).joinedload(SaleItem.product)
        ).order_by(Sale.created_at.desc(), Sale.id.desc()).all()

    def update_sale_status(self, sale_id: int, status: SaleStatus) -> Optional[Sale]:
        """Cambiar el estado de una venta (sin efectos sobre el stock)"""
        with transactional(self.db):
            sale = self.db.query(Sale).filter(Sale.id == sale_id).with_for_update().first()
            if not sale:
                return None
            previous = sale.status
            sale.status = status.value

        logger.info(f"Venta #{sale_id}: estado {previous} -> {status.value}")
        self.db.refresh(sale)
        return sale

    def delete_sale_atomic(self, sale_id: int) -> bool:
        """
        Eliminar venta revirtiendo el stock en una sola transacción.

        1. Devolver stock de cada item (sin importar el estado)
        2. Eliminar items
        3. Eliminar venta
        """
        with transactional(self.db):
            sale = self.db.query(Sale).options(
                selectinload(Sale.items)
            ).filter(Sale.id == sale_id).with_for_update().first()
            if not sale:
                return False

            items = [
                {'product_id': item.product_id, 'quantity': item.quantity}
                for item in sale.items
            ]
            self.inventory_service.restore_stock(self.db, items)
            logger.info(f"Stock revertido para {len(items)} items de la venta #{sale_id}")

            self.db.delete(sale)  # cascade: sale_items

        logger.info(f"Venta #{sale_id} eliminada")
        return True
