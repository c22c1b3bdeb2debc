from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.task import TaskStatus
from app.repositories.department import DepartmentRepository
from app.repositories.identity import IdentityRepository
from app.repositories.task import TaskRepository
from app.schemas.reports import DepartmentAverage, MonthlyStat
from app.schemas.task import TaskCreate, TaskOut
from app.services.analytics import TaskAnalytics
from app.services.task_service import TaskService
from app.utils.auth import require_contributor, require_manager
from app.utils.identity import Contributor, Manager

router = APIRouter()


def get_task_service(db: Session = Depends(get_db)) -> TaskService:
    return TaskService(TaskRepository(db), IdentityRepository(db))


def get_task_analytics(db: Session = Depends(get_db)) -> TaskAnalytics:
    return TaskAnalytics(TaskRepository(db), DepartmentRepository(db))


@router.post("", response_model=TaskOut, status_code=status.HTTP_201_CREATED)
def create_task(
    task: TaskCreate,
    service: TaskService = Depends(get_task_service),
    current_admin: Manager = Depends(require_manager("Only Admins can create tasks")),
):
    return service.create_task(current_admin, task)


@router.get("", response_model=List[TaskOut])
def get_tasks(
    service: TaskService = Depends(get_task_service),
    current_employee: Contributor = Depends(require_contributor("Only Employees can view tasks")),
):
    return service.tasks_assigned_to(current_employee)


@router.get("/average/{department}", response_model=DepartmentAverage)
def get_average_by_department(
    department: str,
    analytics: TaskAnalytics = Depends(get_task_analytics),
    current_admin: Manager = Depends(require_manager("Only Admins can view average tasks")),
):
    return analytics.department_monthly(department)


@router.get("/average", response_model=List[MonthlyStat])
def get_average(
    analytics: TaskAnalytics = Depends(get_task_analytics),
    current_employee: Contributor = Depends(require_contributor("Only Employees can view average tasks")),
):
    return analytics.employee_monthly(current_employee.id)


@router.get("/getTasksByAdmin", response_model=List[TaskOut])
def get_tasks_by_admin(
    service: TaskService = Depends(get_task_service),
    current_admin: Manager = Depends(require_manager("Only Admins can view tasks")),
):
    return service.tasks_created_by(current_admin)


@router.post("/{task_id}/{status}", response_model=TaskOut)
def update_task_status(
    task_id: str,
    status: TaskStatus,
    service: TaskService = Depends(get_task_service),
    current_employee: Contributor = Depends(require_contributor("Only Employees can update tasks")),
):
    return service.update_status(current_employee, task_id, status)
