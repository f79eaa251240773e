# app/config/database.py
from contextlib import contextmanager
from typing import Iterator
import logging

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from app.core.exceptions import InventarioError, TransactionFailure
from .settings import settings

logger = logging.getLogger(__name__)

# Configuración del engine
engine_kwargs = {
    "pool_pre_ping": True,
    "echo": settings.sql_echo
}

if settings.is_sqlite:
    # SQLite: una conexión compartida entre hilos del servidor
    engine_kwargs["connect_args"] = {"check_same_thread": False}
else:
    engine_kwargs["pool_recycle"] = 300

# Create engine
engine = create_engine(
    settings.database_url_with_ssl,
    **engine_kwargs
)

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Database dependency
def get_db():
    """Database dependency for FastAPI"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transactional(db: Session) -> Iterator[Session]:
    """
    Unidad de trabajo atómica sobre la sesión.

    - Salida normal: COMMIT
    - Cualquier excepción: ROLLBACK
    - Errores de dominio se propagan tal cual
    - Errores del motor (locks, serialización, integridad) se traducen
      a TransactionFailure
    """
    try:
        yield db
        db.commit()
    except InventarioError:
        db.rollback()
        raise
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Transacción revertida por error de base de datos")
        raise TransactionFailure(
            "No se pudo completar la transacción, intente nuevamente",
            details={"reason": e.__class__.__name__}
        ) from e
    except Exception:
        db.rollback()
        raise
