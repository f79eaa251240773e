import os

os.environ["DATABASE_URL"] = "sqlite://"

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.config.database import get_db
from app.main import app
from app.modules.sales.repository import SalesRepository
from app.modules.sales.service import SalesService
from app.shared.database.models import Base, Category, Product, User, UserType


engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


@event.listens_for(engine, "connect")
def _enable_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(autouse=True)
def _schema():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    def override_get_db():
        session = TestingSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sales_service(db):
    return SalesService(SalesRepository(db))


@pytest.fixture
def customer(db):
    user = User(
        email="maria@example.com",
        password_hash="x",
        first_name="María",
        last_name="López",
        user_type=UserType.CLIENTE.value,
    )
    db.add(user)
    db.commit()
    return user


@pytest.fixture
def seller(db):
    user = User(
        email="juan@example.com",
        password_hash="x",
        first_name="Juan",
        last_name="Vendedor",
        user_type=UserType.VENDEDOR.value,
    )
    db.add(user)
    db.commit()
    return user


@pytest.fixture
def make_product(db):
    category = Category(name="GENERAL")
    db.add(category)
    db.commit()

    def _make(name="Producto", price="10.00", stock=5, active=True):
        product = Product(
            name=name,
            price=Decimal(price),
            stock=stock,
            is_active=active,
            category_id=category.id,
        )
        db.add(product)
        db.commit()
        return product

    return _make


@pytest.fixture
def stock_of(db):
    def _stock(product_id):
        db.expire_all()
        return db.get(Product, product_id).stock

    return _stock
