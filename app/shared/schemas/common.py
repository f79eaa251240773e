# app/shared/schemas/common.py
from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel
from typing import Annotated, Any, Dict, Optional
from datetime import datetime
from decimal import Decimal

# Montos: Decimal en el servidor, número en el JSON
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

class BaseResponse(BaseModel):
    success: bool
    message: str = ""
    timestamp: datetime = Field(default_factory=datetime.now)

class ErrorResponse(BaseResponse):
    success: bool = False
    error_code: Optional[str] = None
    details: Optional[Dict[str, Any]] = None

class CamelModel(BaseModel):
    """Modelo con nombres camelCase en el JSON (customerId, unitPrice, ...)"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True
    )
