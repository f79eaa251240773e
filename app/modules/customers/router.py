# app/modules/customers/router.py
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.config.database import get_db
from app.core.exceptions import NotFoundError
from .repository import CustomersRepository
from .schemas import CustomerResponse

router = APIRouter()

@router.get("", response_model=List[CustomerResponse])
def list_customers(db: Session = Depends(get_db)):
    """Listar clientes para el formulario de ventas"""
    return CustomersRepository(db).list_customers()

@router.get("/{customer_id}", response_model=CustomerResponse)
def get_customer(customer_id: int, db: Session = Depends(get_db)):
    """Obtener un cliente por ID"""
    customer = CustomersRepository(db).get_customer(customer_id)
    if not customer:
        raise NotFoundError(f"Cliente con ID {customer_id} no encontrado")
    return customer
