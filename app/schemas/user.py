import re
from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import List
from datetime import datetime

from app.config.security import SecurityConfig
from app.models.user import Role

_PASSWORD_PATTERN = re.compile(SecurityConfig.PASSWORD['pattern'])


class IdentityCreate(BaseModel):
    name: str = Field(min_length=2, max_length=50)
    email: EmailStr
    password: str = Field(
        min_length=SecurityConfig.PASSWORD['min_length'],
        max_length=SecurityConfig.PASSWORD['max_length'],
    )
    department: str  # department id

    @field_validator("password")
    @classmethod
    def password_strength(cls, value: str) -> str:
        if not _PASSWORD_PATTERN.match(value):
            raise ValueError(
                "Password must contain at least 1 uppercase letter, 1 lowercase letter, "
                "and 1 number or special character"
            )
        return value


class IdentityCreated(BaseModel):
    message: str
    id: str


class UserLogin(BaseModel):
    email: EmailStr
    password: str


class EmployeeListItem(BaseModel):
    id: str
    name: str
    email: str
    department: str
    joined: datetime


class DepartmentOut(BaseModel):
    id: str
    name: str

    model_config = {
        "from_attributes": True
    }


class DepartmentMember(BaseModel):
    id: str
    name: str
    email: str
    role: Role
    createdAt: datetime = Field(validation_alias="created_at")

    model_config = {
        "from_attributes": True,
        "populate_by_name": True
    }


class DepartmentDetail(BaseModel):
    id: str
    name: str
    employees: List[DepartmentMember] = []

    model_config = {
        "from_attributes": True
    }
