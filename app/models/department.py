# app/models/department.py
from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship
from app.database import Base
from app.models.base import new_id, utcnow


class Department(Base):
    __tablename__ = "departments"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String, unique=True, index=True, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    admins = relationship("Admin", back_populates="department")
    employees = relationship("Employee", back_populates="department")
