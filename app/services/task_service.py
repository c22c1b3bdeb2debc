# app/services/task_service.py
import logging
from typing import List

from app.models.task import Task, TaskStatus
from app.repositories.identity import IdentityRepository
from app.repositories.task import TaskRepository
from app.schemas.task import TaskCreate, TaskOut
from app.utils.errors import NotFound
from app.utils.identity import Contributor, Manager

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(self, tasks: TaskRepository, identities: IdentityRepository):
        self.tasks = tasks
        self.identities = identities

    def create_task(self, manager: Manager, data: TaskCreate) -> TaskOut:
        assignee = self.identities.get_employee(data.assignedTo)
        if assignee is None:
            raise NotFound(f"Employee '{data.assignedTo}' not found")

        task = self.tasks.create(Task(
            title=data.title,
            description=data.description,
            status=data.status or TaskStatus.PENDING,
            admin_id=manager.id,
            assigned_to=assignee.id,
        ))
        logger.info("✅ Task %s created by %s for %s", task.id, manager.id, assignee.id)
        return TaskOut.model_validate(task)

    def tasks_assigned_to(self, contributor: Contributor) -> List[TaskOut]:
        return [TaskOut.model_validate(t) for t in self.tasks.list_by_assignee(contributor.id)]

    def tasks_created_by(self, manager: Manager) -> List[TaskOut]:
        return [TaskOut.model_validate(t) for t in self.tasks.list_by_creator(manager.id)]

    def update_status(self, contributor: Contributor, task_id: str, status: TaskStatus) -> TaskOut:
        """Any status may follow any status; only the assignee may change it"""
        task = self.tasks.get(task_id)
        if task is None or task.assigned_to != contributor.id:
            raise NotFound("Task not found or not assigned to you")

        old_status = task.status
        task = self.tasks.update_status(task, status)
        logger.info("✅ Task %s status %s -> %s", task.id, old_status.value, task.status.value)
        return TaskOut.model_validate(task)
