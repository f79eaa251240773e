# app/modules/customers/schemas.py
from app.shared.schemas.common import CamelModel

class CustomerResponse(CamelModel):
    id: int
    first_name: str
    last_name: str
    email: str
