from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from app.models.task import TaskStatus


class TaskCreate(BaseModel):
    # camelCase keys, as sent by the frontend
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    status: Optional[TaskStatus] = None
    assignedTo: str


class TaskOut(BaseModel):
    id: str
    title: str
    description: str
    status: TaskStatus
    createdAt: datetime = Field(validation_alias="created_at")
    updatedAt: Optional[datetime] = Field(default=None, validation_alias="updated_at")
    adminId: str = Field(validation_alias="admin_id")
    assignedTo: str = Field(validation_alias="assigned_to")

    model_config = {
        "from_attributes": True,
        "populate_by_name": True
    }
