# app/repositories/identity.py
from typing import List, Optional, Union

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from app.models.user import Admin, Employee


class IdentityRepository:
    """Lookups and inserts for both identity pools (employees and admins)"""

    def __init__(self, db: Session):
        self.db = db

    def get_employee(self, employee_id: str) -> Optional[Employee]:
        return self.db.get(Employee, employee_id)

    def get_admin(self, admin_id: str) -> Optional[Admin]:
        return self.db.get(Admin, admin_id)

    def get_employee_by_email(self, email: str) -> Optional[Employee]:
        return self.db.query(Employee).filter(Employee.email == email).first()

    def get_admin_by_email(self, email: str) -> Optional[Admin]:
        return self.db.query(Admin).filter(Admin.email == email).first()

    def email_exists(self, email: str) -> bool:
        """Check the email against both pools, employees first"""
        if self.get_employee_by_email(email) is not None:
            return True
        return self.get_admin_by_email(email) is not None

    def list_employees(self) -> List[Employee]:
        return (
            self.db.query(Employee)
            .options(joinedload(Employee.department))
            .order_by(Employee.created_at)
            .all()
        )

    def list_employees_by_department(self, department_id: str) -> List[Employee]:
        return (
            self.db.query(Employee)
            .filter(Employee.department_id == department_id)
            .order_by(Employee.created_at)
            .all()
        )

    def create(self, identity: Union[Admin, Employee]) -> Union[Admin, Employee]:
        self.db.add(identity)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise
        self.db.refresh(identity)
        return identity
