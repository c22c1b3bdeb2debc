from sqlalchemy import Column, String, Text, DateTime, ForeignKey, Enum
from sqlalchemy.orm import relationship
from app.database import Base
from app.models.base import new_id, utcnow
import enum


class TaskStatus(enum.Enum):
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


class Task(Base):
    __tablename__ = "tasks"

    id = Column(String(36), primary_key=True, default=new_id)
    title = Column(String, nullable=False, index=True)
    description = Column(Text, nullable=False)
    status = Column(Enum(TaskStatus), default=TaskStatus.PENDING, nullable=False)

    # Relationships
    admin_id = Column(String(36), ForeignKey("admins.id"), nullable=False, index=True)
    assigned_to = Column(String(36), ForeignKey("employees.id"), nullable=False, index=True)

    # System dates
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    creator = relationship("Admin", back_populates="created_tasks")
    assignee = relationship("Employee", back_populates="assigned_tasks")
