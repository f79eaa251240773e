from sqlalchemy.orm import Session, joinedload
from typing import List, Optional

from app.config.database import transactional
from app.shared.database.models import Category, Product, SaleItem

class ProductsRepository:
    def __init__(self, db: Session):
        self.db = db

    def list_products(self) -> List[Product]:
        """Catálogo completo, más recientes primero"""
        return self.db.query(Product).options(
            joinedload(Product.category)
        ).order_by(Product.created_at.desc(), Product.id.desc()).all()

    def get_product(self, product_id: int) -> Optional[Product]:
        return self.db.query(Product).options(
            joinedload(Product.category)
        ).filter(Product.id == product_id).first()

    def create_product(self, product_data: dict, category_name: str) -> Product:
        """Crear producto, creando la categoría en la misma transacción si no existe"""
        with transactional(self.db):
            category = self.db.query(Category).filter(Category.name == category_name).first()
            if not category:
                category = Category(name=category_name)
                self.db.add(category)

            product = Product(**product_data, category=category)
            self.db.add(product)

        self.db.refresh(product)
        return product

    def set_active(self, product_id: int, active: bool) -> Optional[Product]:
        """Activar o desactivar un producto"""
        with transactional(self.db):
            product = self.db.query(Product).filter(Product.id == product_id).first()
            if not product:
                return None
            product.is_active = active

        self.db.refresh(product)
        return product

    def count_sale_items(self, product_id: int) -> int:
        return self.db.query(SaleItem).filter(SaleItem.product_id == product_id).count()

    def delete_product(self, product_id: int) -> bool:
        with transactional(self.db):
            product = self.db.query(Product).filter(Product.id == product_id).first()
            if not product:
                return False
            self.db.delete(product)
        return True
