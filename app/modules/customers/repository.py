from sqlalchemy.orm import Session
from typing import List, Optional

from app.shared.database.models import User, UserType

class CustomersRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_customer(self, customer_id: int) -> Optional[User]:
        """Obtener un cliente por ID"""
        return self.db.query(User).filter(
            User.id == customer_id,
            User.user_type == UserType.CLIENTE.value
        ).first()

    def list_customers(self) -> List[User]:
        """Clientes ordenados por nombre"""
        return self.db.query(User).filter(
            User.user_type == UserType.CLIENTE.value
        ).order_by(User.first_name, User.last_name, User.id).all()
