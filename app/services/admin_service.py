# app/services/admin_service.py
import logging
from typing import List, Type, Union

from sqlalchemy.exc import IntegrityError

from app.models.user import Admin, Employee
from app.repositories.department import DepartmentRepository
from app.repositories.identity import IdentityRepository
from app.schemas.user import DepartmentDetail, DepartmentOut, EmployeeListItem, IdentityCreate
from app.utils.errors import Conflict, NotFound
from app.utils.security import hash_password

logger = logging.getLogger(__name__)


class AdminService:
    """Identity creation and directory lookups for managers"""

    def __init__(self, identities: IdentityRepository, departments: DepartmentRepository):
        self.identities = identities
        self.departments = departments

    def create_employee(self, data: IdentityCreate) -> Employee:
        return self._create_identity(Employee, data)

    def create_admin(self, data: IdentityCreate) -> Admin:
        return self._create_identity(Admin, data)

    def _create_identity(self, model: Type[Union[Admin, Employee]], data: IdentityCreate):
        # Emails are unique across both pools, not just within one table
        if self.identities.email_exists(data.email):
            raise Conflict("User with this email already exists")

        department = self.departments.get(data.department)
        if department is None:
            raise NotFound(f"Department '{data.department}' not found")

        record = model(
            name=data.name,
            email=data.email,
            hashed_password=hash_password(data.password),
            department_id=department.id,
        )
        try:
            record = self.identities.create(record)
        except IntegrityError as exc:
            # Lost a race against a concurrent insert of the same email
            raise Conflict("User with this email already exists") from exc

        logger.info("✅ %s %s created in %s", model.__name__, record.id, department.name)
        return record

    def list_employees(self) -> List[EmployeeListItem]:
        return [
            EmployeeListItem(
                id=employee.id,
                name=employee.name,
                email=employee.email,
                department=employee.department.name,
                joined=employee.created_at,
            )
            for employee in self.identities.list_employees()
        ]

    def list_departments(self) -> List[DepartmentOut]:
        return [DepartmentOut.model_validate(d) for d in self.departments.list_all()]

    def get_department(self, name: str) -> DepartmentDetail:
        department = self.departments.get_by_name_with_members(name)
        if department is None:
            raise NotFound(f"Department '{name}' not found")
        return DepartmentDetail.model_validate(department)
