# app/schemas/tokens.py
from pydantic import BaseModel
from typing import Optional
from app.models.user import Role

class LoginResponse(BaseModel):
    message: str = "Login successful"
    access_token: str
    token_type: str = "bearer"
    role: Role
    name: str
    department: Optional[str] = None
