from typing import List
import logging

from app.core.exceptions import NotFoundError, ValidationError
from app.core.security import get_password_hash
from app.shared.database.models import User
from app.shared.schemas.common import BaseResponse
from .repository import UsersRepository
from .schemas import UserCreate, UserResponse

logger = logging.getLogger(__name__)

class UsersService:
    def __init__(self, repository: UsersRepository):
        self.repository = repository

    def list_users(self) -> List[UserResponse]:
        return [self._build_response(user) for user in self.repository.list_users()]

    def create_user(self, user_data: UserCreate) -> UserResponse:
        """
        Crear usuario.

        - Email único (400 si ya está registrado)
        - La contraseña se guarda como hash bcrypt
        """
        email = user_data.email.strip().lower()
        if self.repository.get_by_email(email):
            raise ValidationError(
                "El correo electrónico ya está registrado",
                details={"email": email}
            )

        user = self.repository.create_user({
            "first_name": user_data.first_name.strip(),
            "last_name": user_data.last_name.strip(),
            "email": email,
            "password_hash": get_password_hash(user_data.password),
            "phone": user_data.phone,
            "user_type": user_data.user_type.value,
            "is_active": user_data.active
        })
        logger.info(f"Usuario creado: {user.email} ({user.user_type})")
        return self._build_response(user)

    def set_active(self, user_id: int, active: bool) -> UserResponse:
        user = self.repository.set_active(user_id, active)
        if not user:
            raise NotFoundError(f"Usuario con ID {user_id} no encontrado")
        return self._build_response(user)

    def delete_user(self, user_id: int) -> BaseResponse:
        """Eliminar usuario sin ventas asociadas"""
        sales = self.repository.count_sales(user_id)
        if sales:
            raise ValidationError(
                "No se puede eliminar un usuario con ventas registradas",
                details={"user_id": user_id, "sales": sales}
            )

        if not self.repository.delete_user(user_id):
            raise NotFoundError(f"Usuario con ID {user_id} no encontrado")

        logger.info(f"Usuario {user_id} eliminado")
        return BaseResponse(success=True, message="Usuario eliminado correctamente")

    @staticmethod
    def _build_response(user: User) -> UserResponse:
        return UserResponse(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            phone=user.phone,
            user_type=user.user_type,
            active=user.is_active,
            created_at=user.created_at
        )
