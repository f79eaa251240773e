import threading
from decimal import Decimal

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool

from app.core.exceptions import InsufficientStockError, TransactionFailure
from app.modules.sales.repository import SalesRepository
from app.modules.sales.schemas import SaleCreateRequest
from app.modules.sales.service import SalesService
from app.shared.database.models import Base, Category, Product, Sale, User, UserType


BUYERS = 20
STOCK = 5


def test_concurrent_sales_never_oversell(tmp_path):
    engine = create_engine(
        f"sqlite:///{tmp_path / 'ventas.db'}",
        connect_args={"check_same_thread": False, "timeout": 30},
        poolclass=NullPool,
    )
    Base.metadata.create_all(bind=engine)
    Session = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    with Session() as db:
        customer = User(
            email="maria@example.com",
            password_hash="x",
            first_name="María",
            last_name="López",
            user_type=UserType.CLIENTE.value,
        )
        product = Product(
            name="Audífonos",
            price=Decimal("10.00"),
            stock=STOCK,
            is_active=True,
            category=Category(name="GENERAL"),
        )
        db.add_all([customer, product])
        db.commit()
        customer_id, product_id = customer.id, product.id

    barrier = threading.Barrier(BUYERS)
    results = []
    lock = threading.Lock()

    def buy():
        db = Session()
        try:
            service = SalesService(SalesRepository(db))
            request = SaleCreateRequest(
                customer_id=customer_id,
                items=[{"product_id": product_id, "quantity": 1, "unit_price": "10.00"}],
            )
            barrier.wait()
            try:
                service.create_sale(request)
                outcome = "ok"
            except (InsufficientStockError, TransactionFailure) as exc:
                outcome = type(exc).__name__
            except Exception as exc:
                outcome = repr(exc)
            with lock:
                results.append(outcome)
        finally:
            db.close()

    threads = [threading.Thread(target=buy) for _ in range(BUYERS)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(results) == BUYERS
    assert set(results) <= {"ok", "InsufficientStockError", "TransactionFailure"}

    sold = results.count("ok")
    with Session() as db:
        stock = db.get(Product, product_id).stock
        sales = db.query(Sale).count()

    assert 1 <= sold <= STOCK
    assert stock == STOCK - sold
    assert sales == sold
    engine.dispose()
