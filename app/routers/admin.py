# app/routers/admin.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.repositories.department import DepartmentRepository
from app.repositories.identity import IdentityRepository
from app.schemas.user import DepartmentDetail, DepartmentOut, EmployeeListItem, IdentityCreate, IdentityCreated
from app.services.admin_service import AdminService
from app.utils.auth import require_identity, require_manager
from app.utils.identity import Identity, Manager

router = APIRouter()


def get_admin_service(db: Session = Depends(get_db)) -> AdminService:
    return AdminService(IdentityRepository(db), DepartmentRepository(db))


@router.post("/create-employee", response_model=IdentityCreated, status_code=status.HTTP_201_CREATED)
def create_employee(
    data: IdentityCreate,
    service: AdminService = Depends(get_admin_service),
    current_admin: Manager = Depends(require_manager("Only Admins can create employees")),
):
    employee = service.create_employee(data)
    return IdentityCreated(message="User created successfully", id=employee.id)


@router.post("/create-admin", response_model=IdentityCreated, status_code=status.HTTP_201_CREATED)
def create_admin(
    data: IdentityCreate,
    service: AdminService = Depends(get_admin_service),
    current_admin: Manager = Depends(require_manager("Only Admins can create admins")),
):
    admin = service.create_admin(data)
    return IdentityCreated(message="Admin created successfully", id=admin.id)


@router.get("/employees", response_model=List[EmployeeListItem])
def get_employees(
    service: AdminService = Depends(get_admin_service),
    current_admin: Manager = Depends(require_manager("Only Admins can view employees")),
):
    return service.list_employees()


@router.get("/departments", response_model=List[DepartmentOut])
def get_departments(
    service: AdminService = Depends(get_admin_service),
    current_admin: Manager = Depends(require_manager("Only Admins can view departments")),
):
    return service.list_departments()


@router.get("/department/{name}", response_model=DepartmentDetail)
def get_department(
    name: str,
    service: AdminService = Depends(get_admin_service),
    current_identity: Identity = Depends(require_identity()),
):
    """Any signed-in employee or admin"""
    return service.get_department(name)
