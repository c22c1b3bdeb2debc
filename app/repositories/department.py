# app/repositories/department.py
from typing import List, Optional

from sqlalchemy.orm import Session, selectinload

from app.models.department import Department


class DepartmentRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, department_id: str) -> Optional[Department]:
        return self.db.get(Department, department_id)

    def get_by_name(self, name: str) -> Optional[Department]:
        return self.db.query(Department).filter(Department.name == name).first()

    def get_by_name_with_members(self, name: str) -> Optional[Department]:
        """Department plus its current employees, loaded in one round trip"""
        return (
            self.db.query(Department)
            .options(selectinload(Department.employees))
            .filter(Department.name == name)
            .first()
        )

    def list_all(self) -> List[Department]:
        return self.db.query(Department).order_by(Department.name).all()

    def create(self, name: str) -> Department:
        department = Department(name=name)
        self.db.add(department)
        self.db.commit()
        self.db.refresh(department)
        return department
