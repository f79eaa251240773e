# app/modules/sales/service.py
from typing import List
import logging

from app.core.exceptions import ValidationError, NotFoundError
from app.shared.database.models import Sale, SaleItem, SaleStatus, User
from app.shared.schemas.common import BaseResponse
from .repository import SalesRepository
from .schemas import (
    SaleCreateRequest, SaleDetail, SaleListItem, SaleSummary, SaleStatusResponse,
    SaleItemDetail, SaleListItemLine, CustomerInfo, ProductSnapshot, ProductName
)


logger = logging.getLogger(__name__)

class SalesService:
    def __init__(self, repository: SalesRepository):
        self.repository = repository

    def create_sale(self, sale_data: SaleCreateRequest) -> SaleDetail:
        """
        Crear venta completa.

        Responsabilidades:
        - Validar datos de entrada
        - Delegar transacción al repository
        - Construir respuesta con productos (stock ya descontado) y cliente
        """
        if not sale_data.customer_id or not sale_data.items:
            raise ValidationError("Datos de venta incompletos")

        logger.info(f"Iniciando venta - Cliente: {sale_data.customer_id}, Items: {len(sale_data.items)}")

        sale = self.repository.create_sale_atomic(
            customer_id=sale_data.customer_id,
            items=[item.model_dump() for item in sale_data.items]
        )

        logger.info(f"Venta {sale.id} completada exitosamente")
        return self._build_detail(sale)

    def list_sales(self) -> List[SaleListItem]:
        """Obtener todas las ventas con cliente e items"""
        return [
            SaleListItem(
                **self._summary_fields(sale),
                items=[
                    SaleListItemLine(
                        **self._item_fields(item),
                        product=ProductName(name=item.product.name)
                    )
                    for item in sale.items
                ]
            )
            for sale in self.repository.list_sales()
        ]

    def update_sale_status(self, sale_id: int, estado: str) -> SaleStatusResponse:
        """Actualizar estado de venta (solo etiqueta, no toca el stock)"""
        if not sale_id or not estado:
            raise ValidationError("Datos incompletos")

        try:
            status = SaleStatus(estado)
        except ValueError:
            raise ValidationError(
                "Estado no válido. Los estados permitidos son: " + ", ".join(SaleStatus.values()),
                details={"allowed": SaleStatus.values(), "received": estado}
            ) from None

        sale = self.repository.update_sale_status(sale_id, status)
        if not sale:
            raise NotFoundError("Venta no encontrada", details={"sale_id": sale_id})

        return SaleStatusResponse(
            success=True,
            message="Estado de venta actualizado",
            sale=SaleSummary(**self._summary_fields(sale))
        )

    def delete_sale(self, sale_id: int) -> BaseResponse:
        """Eliminar una venta devolviendo su stock"""
        if not sale_id:
            raise ValidationError("ID de venta no proporcionado")

        if not self.repository.delete_sale_atomic(sale_id):
            raise NotFoundError("Venta no encontrada", details={"sale_id": sale_id})

        return BaseResponse(success=True, message="Venta eliminada correctamente")

    # MÉTODOS PRIVADOS HELPERS

    @staticmethod
    def _customer_info(customer: User) -> CustomerInfo:
        return CustomerInfo(name=customer.full_name, email=customer.email)

    def _summary_fields(self, sale: Sale) -> dict:
        return {
            "id": sale.id,
            "customer_id": sale.customer_id,
            "total": sale.total,
            "estado": sale.status,
            "created_at": sale.created_at,
            "customer": self._customer_info(sale.customer)
        }

    @staticmethod
    def _item_fields(item: SaleItem) -> dict:
        return {
            "id": item.id,
            "product_id": item.product_id,
            "quantity": item.quantity,
            "unit_price": item.unit_price,
            "subtotal": item.subtotal
        }

    def _build_detail(self, sale: Sale) -> SaleDetail:
        """Construir respuesta de venta creada"""
        return SaleDetail(
            **self._summary_fields(sale),
            items=[
                SaleItemDetail(
                    **self._item_fields(item),
                    product=ProductSnapshot(
                        id=item.product.id,
                        name=item.product.name,
                        stock=item.product.stock
                    )
                )
                for item in sale.items
            ]
        )
