from typing import List
import logging

from app.core.exceptions import NotFoundError, ValidationError
from app.shared.database.models import Product
from app.shared.schemas.common import BaseResponse
from .repository import ProductsRepository
from .schemas import ProductCreate, ProductResponse

logger = logging.getLogger(__name__)

class ProductsService:
    def __init__(self, repository: ProductsRepository):
        self.repository = repository

    def list_products(self) -> List[ProductResponse]:
        return [self._build_response(product) for product in self.repository.list_products()]

    def get_product(self, product_id: int) -> ProductResponse:
        product = self.repository.get_product(product_id)
        if not product:
            raise NotFoundError(f"Producto con ID {product_id} no encontrado")
        return self._build_response(product)

    def create_product(self, product_data: ProductCreate) -> ProductResponse:
        category_name = product_data.category.strip().upper()
        product = self.repository.create_product(
            {
                "name": product_data.name.strip(),
                "description": product_data.description,
                "price": product_data.price,
                "stock": product_data.stock,
                "is_active": product_data.active
            },
            category_name
        )
        logger.info(f"Producto creado: {product.name} ({category_name}, stock {product.stock})")
        return self._build_response(product)

    def set_active(self, product_id: int, active: bool) -> ProductResponse:
        product = self.repository.set_active(product_id, active)
        if not product:
            raise NotFoundError(f"Producto con ID {product_id} no encontrado")
        logger.info(f"Producto {product_id} {'activado' if active else 'desactivado'}")
        return self._build_response(product)

    def delete_product(self, product_id: int) -> BaseResponse:
        """
        Eliminar un producto.

        Un producto referenciado por items de venta no se elimina: las ventas
        conservan su detalle. Para retirarlo del catálogo se desactiva.
        """
        references = self.repository.count_sale_items(product_id)
        if references:
            raise ValidationError(
                "No se puede eliminar un producto con ventas registradas; desactívelo en su lugar",
                details={"product_id": product_id, "sale_items": references}
            )

        if not self.repository.delete_product(product_id):
            raise NotFoundError(f"Producto con ID {product_id} no encontrado")

        logger.info(f"Producto {product_id} eliminado")
        return BaseResponse(success=True, message="Producto eliminado correctamente")

    @staticmethod
    def _build_response(product: Product) -> ProductResponse:
        return ProductResponse(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            stock=product.stock,
            active=product.is_active,
            category=product.category.name if product.category else None,
            created_at=product.created_at
        )
