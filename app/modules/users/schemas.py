# app/modules/users/schemas.py
from pydantic import Field
from typing import Optional
from datetime import datetime
from app.shared.database.models import UserType
from app.shared.schemas.common import CamelModel

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"

class UserCreate(CamelModel):
    """Schema para crear un usuario"""
    first_name: str = Field(..., min_length=1, max_length=255, description="Nombre")
    last_name: str = Field("", max_length=255, description="Apellido")
    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN, description="Correo electrónico")
    password: str = Field(..., min_length=6, description="Contraseña en texto plano (se guarda hasheada)")
    phone: Optional[str] = Field(None, max_length=50)
    user_type: UserType = Field(UserType.CLIENTE, description="ADMIN, VENDEDOR o CLIENTE")
    active: bool = True

class UserActiveUpdate(CamelModel):
    id: int = Field(..., gt=0, description="ID del usuario")
    active: bool

class UserDeleteRequest(CamelModel):
    id: int = Field(..., gt=0, description="ID del usuario")

class UserResponse(CamelModel):
    """Usuario sin datos sensibles"""
    id: int
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    user_type: str
    active: bool
    created_at: Optional[datetime] = None
