# app/repositories/task.py
from typing import Iterable, List, Optional

from sqlalchemy.orm import Session

from app.models.task import Task, TaskStatus


class TaskRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, task_id: str) -> Optional[Task]:
        return self.db.get(Task, task_id)

    def create(self, task: Task) -> Task:
        self.db.add(task)
        self.db.commit()
        self.db.refresh(task)
        return task

    def list_by_assignee(self, employee_id: str) -> List[Task]:
        return (
            self.db.query(Task)
            .filter(Task.assigned_to == employee_id)
            .order_by(Task.created_at)
            .all()
        )

    def list_by_assignees(self, employee_ids: Iterable[str]) -> List[Task]:
        employee_ids = list(employee_ids)
        if not employee_ids:
            return []
        return (
            self.db.query(Task)
            .filter(Task.assigned_to.in_(employee_ids))
            .order_by(Task.created_at)
            .all()
        )

    def list_by_creator(self, admin_id: str) -> List[Task]:
        return (
            self.db.query(Task)
            .filter(Task.admin_id == admin_id)
            .order_by(Task.created_at)
            .all()
        )

    def update_status(self, task: Task, status: TaskStatus) -> Task:
        # Last write wins, there is no version column
        task.status = status
        self.db.commit()
        self.db.refresh(task)
        return task
