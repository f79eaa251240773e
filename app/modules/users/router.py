# app/modules/users/router.py
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.config.database import get_db
from app.shared.schemas.common import BaseResponse
from .repository import UsersRepository
from .service import UsersService
from .schemas import UserCreate, UserActiveUpdate, UserDeleteRequest, UserResponse

router = APIRouter()


def get_users_service(db: Session = Depends(get_db)) -> UsersService:
    return UsersService(UsersRepository(db))


@router.get("", response_model=List[UserResponse])
def list_users(service: UsersService = Depends(get_users_service)):
    """Listar usuarios"""
    return service.list_users()

@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(user_data: UserCreate, service: UsersService = Depends(get_users_service)):
    """Crear usuario con contraseña hasheada"""
    return service.create_user(user_data)

@router.patch("", response_model=UserResponse)
def set_user_active(update: UserActiveUpdate, service: UsersService = Depends(get_users_service)):
    """Activar o desactivar un usuario"""
    return service.set_active(update.id, update.active)

@router.delete("", response_model=BaseResponse)
def delete_user(request: UserDeleteRequest, service: UsersService = Depends(get_users_service)):
    """Eliminar un usuario"""
    return service.delete_user(request.id)
