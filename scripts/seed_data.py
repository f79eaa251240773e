"""
Script para crear el esquema y datos de prueba
Ejecutar desde la raíz del proyecto: python -m scripts.seed_data
"""
import logging
from decimal import Decimal

from app.config.database import SessionLocal, engine, transactional
from app.core.security import get_password_hash
from app.shared.database.models import Base, Category, Product, User, UserType

logger = logging.getLogger(__name__)

USERS = [
    ("admin@inventario.com", "admin123", "Ana", "Administradora", UserType.ADMIN),
    ("vendedor@inventario.com", "vendedor123", "Juan", "Vendedor", UserType.VENDEDOR),
    ("cliente1@inventario.com", "cliente123", "María", "López", UserType.CLIENTE),
    ("cliente2@inventario.com", "cliente123", "Pedro", "Gómez", UserType.CLIENTE),
]

CATEGORIES = ["ELECTRONICA", "ROPA", "HOGAR"]

PRODUCTS = [
    ("Audífonos inalámbricos", "ELECTRONICA", Decimal("49.90"), 25),
    ("Cargador USB-C", "ELECTRONICA", Decimal("15.00"), 60),
    ("Camiseta algodón", "ROPA", Decimal("12.50"), 40),
    ("Juego de toallas", "HOGAR", Decimal("22.00"), 15),
]


def seed(db) -> int:
    """Crear usuarios, categorías y productos que no existan. Retorna cuántos registros creó."""
    created = 0

    with transactional(db):
        for email, password, first_name, last_name, user_type in USERS:
            if db.query(User).filter(User.email == email).first():
                logger.info(f"Usuario {email} ya existe")
                continue
            db.add(User(
                email=email,
                password_hash=get_password_hash(password),
                first_name=first_name,
                last_name=last_name,
                user_type=user_type.value,
                is_active=True
            ))
            created += 1
            logger.info(f"Usuario creado: {email} ({user_type.value})")

        categories = {}
        for name in CATEGORIES:
            category = db.query(Category).filter(Category.name == name).first()
            if not category:
                category = Category(name=name)
                db.add(category)
                created += 1
            categories[name] = category

        for name, category_name, price, stock in PRODUCTS:
            if db.query(Product).filter(Product.name == name).first():
                continue
            db.add(Product(
                name=name,
                price=price,
                stock=stock,
                is_active=True,
                category=categories[category_name]
            ))
            created += 1
            logger.info(f"Producto creado: {name} (stock {stock})")

    return created


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")

    Base.metadata.create_all(bind=engine)
    logger.info("Esquema verificado")

    db = SessionLocal()
    try:
        created = seed(db)
    finally:
        db.close()

    if created:
        logger.info(f"{created} registros creados")
    else:
        logger.info("Todos los registros ya existían")


if __name__ == "__main__":
    main()
