# app/shared/database/models.py
from sqlalchemy import (
    Column, Integer, String, Boolean, DateTime, Text,
    Numeric, ForeignKey, CheckConstraint, Index,
    func
)
from sqlalchemy.orm import relationship, declarative_base
import enum

Base = declarative_base()


class UserType(str, enum.Enum):
    ADMIN = "ADMIN"
    VENDEDOR = "VENDEDOR"
    CLIENTE = "CLIENTE"


class SaleStatus(str, enum.Enum):
    """Estados de una venta: PENDING, COMPLETED, CANCELLED"""
    PENDING = "PENDIENTE"
    COMPLETED = "COMPLETADA"
    CANCELLED = "CANCELADA"

    @classmethod
    def values(cls):
        return [status.value for status in cls]


# =====================================================
# MIXIN PARA TIMESTAMPS
# =====================================================
class TimestampMixin:
    """Mixin que agrega campos created_at y updated_at"""
    created_at = Column(DateTime, nullable=False, server_default=func.current_timestamp())
    updated_at = Column(DateTime, nullable=False, server_default=func.current_timestamp(), onupdate=func.current_timestamp())


# =====================================================
# USUARIOS Y CLIENTES
# =====================================================

class User(Base):
    """Modelo de Usuario (administradores, vendedores y clientes)"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), nullable=False, unique=True)
    password_hash = Column(String(255), nullable=False)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False, default='')
    phone = Column(String(50))
    user_type = Column(String(20), nullable=False, default=UserType.CLIENTE.value, index=True)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, server_default=func.current_timestamp())

    # Relationships
    sales = relationship("Sale", back_populates="customer")

    __table_args__ = (
        CheckConstraint(
            "user_type IN ('ADMIN', 'VENDEDOR', 'CLIENTE')",
            name='ck_users_user_type'
        ),
    )

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}".strip()


# =====================================================
# PRODUCTOS
# =====================================================

class Category(Base):
    """Modelo de Categoría de Producto"""
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, unique=True)

    products = relationship("Product", back_populates="category")


class Product(Base, TimestampMixin):
    """Modelo de Producto"""
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text)
    price = Column(Numeric(10, 2), nullable=False, default=0)
    stock = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)
    category_id = Column(Integer, ForeignKey("categories.id"), index=True)

    __table_args__ = (
        CheckConstraint('price >= 0', name='ck_products_price_non_negative'),
        CheckConstraint('stock >= 0', name='ck_products_stock_non_negative'),
    )

    # Relationships
    category = relationship("Category", back_populates="products")
    sale_items = relationship("SaleItem", back_populates="product")


# =====================================================
# VENTAS
# =====================================================

class Sale(Base):
    """Modelo de Venta"""
    __tablename__ = "sales"

    id = Column(Integer, primary_key=True, index=True)
    customer_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    total = Column(Numeric(12, 2), nullable=False)
    status = Column(String(20), nullable=False, default=SaleStatus.COMPLETED.value)
    created_at = Column(DateTime, nullable=False, server_default=func.current_timestamp())

    __table_args__ = (
        CheckConstraint(
            "status IN ('PENDIENTE', 'COMPLETADA', 'CANCELADA')",
            name='ck_sales_status'
        ),
        Index('ix_sales_created_at_id', 'created_at', 'id'),
    )

    # Relationships
    customer = relationship("User", back_populates="sales")
    items = relationship(
        "SaleItem",
        back_populates="sale",
        cascade="all, delete-orphan",
        order_by="SaleItem.id"
    )


class SaleItem(Base):
    """Modelo de Item de Venta (precio congelado al momento de la venta)"""
    __tablename__ = "sale_items"

    id = Column(Integer, primary_key=True, index=True)
    sale_id = Column(Integer, ForeignKey("sales.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)
    quantity = Column(Integer, nullable=False)
    unit_price = Column(Numeric(10, 2), nullable=False)
    subtotal = Column(Numeric(12, 2), nullable=False)

    __table_args__ = (
        CheckConstraint('quantity > 0', name='ck_sale_items_quantity_positive'),
    )

    # Relationships
    sale = relationship("Sale", back_populates="items")
    product = relationship("Product", back_populates="sale_items")
