# app/models/user.py
import enum
from sqlalchemy import Column, String, DateTime, ForeignKey, Enum
from sqlalchemy.orm import relationship
from app.database import Base
from app.models.base import new_id, utcnow


class Role(enum.Enum):
    MANAGER = "MANAGER"
    CONTRIBUTOR = "CONTRIBUTOR"


class Admin(Base):
    """Manager pool"""
    __tablename__ = "admins"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    role = Column(Enum(Role), default=Role.MANAGER, nullable=False)
    department_id = Column(String(36), ForeignKey("departments.id"), nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    department = relationship("Department", back_populates="admins")
    created_tasks = relationship("Task", back_populates="creator")


class Employee(Base):
    """Contributor pool"""
    __tablename__ = "employees"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    role = Column(Enum(Role), default=Role.CONTRIBUTOR, nullable=False)
    department_id = Column(String(36), ForeignKey("departments.id"), nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    department = relationship("Department", back_populates="employees")
    assigned_tasks = relationship("Task", back_populates="assignee")
