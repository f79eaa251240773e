from sqlalchemy.orm import Session
from typing import List, Optional

from app.config.database import transactional
from app.shared.database.models import Sale, User

class UsersRepository:
    def __init__(self, db: Session):
        self.db = db

    def list_users(self) -> List[User]:
        return self.db.query(User).order_by(User.id).all()

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def create_user(self, user_data: dict) -> User:
        """Crear usuario (password_hash ya calculado)"""
        with transactional(self.db):
            user = User(**user_data)
            self.db.add(user)

        self.db.refresh(user)
        return user

    def set_active(self, user_id: int, active: bool) -> Optional[User]:
        with transactional(self.db):
            user = self.db.query(User).filter(User.id == user_id).first()
            if not user:
                return None
            user.is_active = active

        self.db.refresh(user)
        return user

    def count_sales(self, user_id: int) -> int:
        return self.db.query(Sale).filter(Sale.customer_id == user_id).count()

    def delete_user(self, user_id: int) -> bool:
        with transactional(self.db):
            user = self.db.query(User).filter(User.id == user_id).first()
            if not user:
                return False
            self.db.delete(user)
        return True
