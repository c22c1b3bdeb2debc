"""
Shared fixtures: an in-memory SQLite store behind the ``get_db`` dependency,
record factories, and bearer-token helpers.
"""

import os

# Must be set before the app modules read their configuration
os.environ["SECRET_KEY"] = "test-secret"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"

from datetime import datetime  # noqa: E402
from itertools import count  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.database import Base, get_db  # noqa: E402
from app.models import Admin, Department, Employee, Task, TaskStatus  # noqa: E402
from app.utils.security import CredentialVerifier, hash_password  # noqa: E402
from main import app  # noqa: E402

PASSWORD = "Secret@123"
_PASSWORD_HASH = hash_password(PASSWORD)
_sequence = count(1)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def verifier():
    return CredentialVerifier("test-secret")


@pytest.fixture
def auth_headers(verifier):
    def _headers(identity_id: str) -> dict:
        return {"Authorization": f"Bearer {verifier.issue(identity_id)}"}

    return _headers


@pytest.fixture
def make_department(db):
    def _make(name: str = "Engineering") -> Department:
        department = Department(name=name)
        db.add(department)
        db.commit()
        db.refresh(department)
        return department

    return _make


@pytest.fixture
def make_employee(db):
    def _make(department: Department, email: str = None, **fields) -> Employee:
        n = next(_sequence)
        employee = Employee(
            name=fields.pop("name", f"Employee {n}"),
            email=email or f"employee{n}@example.com",
            hashed_password=_PASSWORD_HASH,
            department_id=department.id,
            **fields,
        )
        db.add(employee)
        db.commit()
        db.refresh(employee)
        return employee

    return _make


@pytest.fixture
def make_admin(db):
    def _make(department: Department, email: str = None, **fields) -> Admin:
        n = next(_sequence)
        admin = Admin(
            name=fields.pop("name", f"Admin {n}"),
            email=email or f"admin{n}@example.com",
            hashed_password=_PASSWORD_HASH,
            department_id=department.id,
            **fields,
        )
        db.add(admin)
        db.commit()
        db.refresh(admin)
        return admin

    return _make


@pytest.fixture
def make_task(db):
    def _make(
        admin: Admin,
        employee: Employee,
        created_at: datetime = None,
        status: TaskStatus = TaskStatus.PENDING,
    ) -> Task:
        n = next(_sequence)
        task = Task(
            title=f"Task {n}",
            description=f"Description {n}",
            status=status,
            admin_id=admin.id,
            assigned_to=employee.id,
        )
        if created_at is not None:
            task.created_at = created_at
        db.add(task)
        db.commit()
        db.refresh(task)
        return task

    return _make


@pytest.fixture
def password():
    return PASSWORD
