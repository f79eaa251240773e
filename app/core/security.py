# app/core/security.py
from passlib.context import CryptContext

# Password context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def _bcrypt_safe(password: str) -> str:
    # bcrypt solo considera los primeros 72 bytes
    return password.encode('utf-8')[:72].decode('utf-8', errors='ignore')


def get_password_hash(password: str) -> str:
    """Generar hash de contraseña"""
    return pwd_context.hash(_bcrypt_safe(password))


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verificar contraseña contra su hash"""
    return pwd_context.verify(_bcrypt_safe(plain_password), hashed_password)
