from datetime import datetime, timezone

import pytest
from fastapi import Depends

from app.database import get_db
from app.models.task import TaskStatus
from app.repositories.department import DepartmentRepository
from app.repositories.task import TaskRepository
from app.routers.tasks import get_task_analytics
from app.services.analytics import TaskAnalytics
from main import app


@pytest.fixture
def engineering(make_department):
    return make_department("Engineering")


@pytest.fixture
def admin(make_admin, engineering):
    return make_admin(engineering)


@pytest.fixture
def employee(make_employee, engineering):
    return make_employee(engineering)


def _pin_clock(now):
    def fixed_clock_analytics(db=Depends(get_db)):
        return TaskAnalytics(TaskRepository(db), DepartmentRepository(db), clock=lambda: now)

    app.dependency_overrides[get_task_analytics] = fixed_clock_analytics


def _create(client, headers, assignee_id, **fields):
    payload = {"title": "Write report", "description": "Quarterly numbers", "assignedTo": assignee_id}
    payload.update(fields)
    return client.post("/tasks", json=payload, headers=headers)


def test_admin_creates_task(client, auth_headers, admin, employee):
    response = _create(client, auth_headers(admin.id), employee.id)

    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "PENDING"
    assert body["adminId"] == admin.id
    assert body["assignedTo"] == employee.id
    assert {"id", "title", "description", "createdAt", "updatedAt"} <= body.keys()


def test_create_task_with_initial_status(client, auth_headers, admin, employee):
    response = _create(client, auth_headers(admin.id), employee.id, status="IN_PROGRESS")

    assert response.json()["status"] == "IN_PROGRESS"


def test_create_task_for_unknown_employee(client, auth_headers, admin):
    response = _create(client, auth_headers(admin.id), "missing")

    assert response.status_code == 404


def test_create_task_cannot_target_an_admin(client, auth_headers, admin, make_admin, engineering):
    other_admin = make_admin(engineering)

    response = _create(client, auth_headers(admin.id), other_admin.id)

    assert response.status_code == 404


def test_employee_cannot_create_task(client, auth_headers, employee):
    response = _create(client, auth_headers(employee.id), employee.id)

    assert response.status_code == 403
    assert response.json()["detail"] == "Only Admins can create tasks"


def test_employee_sees_only_own_tasks(client, auth_headers, admin, employee, make_employee, make_task, engineering):
    mine = make_task(admin, employee)
    make_task(admin, make_employee(engineering))

    response = client.get("/tasks", headers=auth_headers(employee.id))

    assert response.status_code == 200
    assert [t["id"] for t in response.json()] == [mine.id]


def test_admin_cannot_use_employee_endpoints(client, auth_headers, admin, employee, make_task):
    task = make_task(admin, employee)
    headers = auth_headers(admin.id)

    assert client.get("/tasks", headers=headers).status_code == 403
    assert client.get("/tasks/average", headers=headers).status_code == 403
    assert client.post(f"/tasks/{task.id}/COMPLETED", headers=headers).status_code == 403


def test_tasks_by_admin(client, auth_headers, admin, employee, make_admin, make_task, engineering):
    mine = make_task(admin, employee)
    make_task(make_admin(engineering), employee)

    response = client.get("/tasks/getTasksByAdmin", headers=auth_headers(admin.id))

    assert response.status_code == 200
    assert [t["id"] for t in response.json()] == [mine.id]
    assert client.get("/tasks/getTasksByAdmin", headers=auth_headers(employee.id)).status_code == 403


def test_assignee_updates_status_freely(client, auth_headers, admin, employee, make_task):
    task = make_task(admin, employee)
    headers = auth_headers(employee.id)

    done = client.post(f"/tasks/{task.id}/COMPLETED", headers=headers)
    reopened = client.post(f"/tasks/{task.id}/PENDING", headers=headers)

    assert done.status_code == 200
    assert done.json()["status"] == "COMPLETED"
    assert reopened.json()["status"] == "PENDING"


def test_other_employee_cannot_update_status(client, auth_headers, admin, employee, make_employee, make_task, engineering):
    task = make_task(admin, employee)
    stranger = make_employee(engineering)

    response = client.post(f"/tasks/{task.id}/COMPLETED", headers=auth_headers(stranger.id))

    assert response.status_code == 404
    assert response.json()["detail"] == "Task not found or not assigned to you"


def test_unknown_status_is_rejected(client, auth_headers, admin, employee, make_task):
    task = make_task(admin, employee)

    response = client.post(f"/tasks/{task.id}/DONE", headers=auth_headers(employee.id))

    assert response.status_code == 422


def test_own_average_has_entry_per_month(client, auth_headers, admin, employee, make_task):
    make_task(admin, employee, datetime(2025, 6, 30, 23, 59))
    _pin_clock(datetime(2025, 6, 30, 23, 59, 59, tzinfo=timezone.utc))

    response = client.get("/tasks/average", headers=auth_headers(employee.id))

    assert response.status_code == 200
    stats = response.json()
    assert len(stats) == 6
    assert stats[0]["month"] == "January"
    assert stats[-1]["totalTasks"] == 1
    assert stats[-1]["completionRate"] == 0


def test_department_average(client, auth_headers, admin, employee, make_task):
    make_task(admin, employee, datetime(2025, 3, 3), TaskStatus.COMPLETED)
    make_task(admin, employee, datetime(2025, 3, 9), TaskStatus.COMPLETED)
    make_task(admin, employee, datetime(2025, 3, 21), TaskStatus.PENDING)

    _pin_clock(datetime(2025, 4, 2, tzinfo=timezone.utc))

    response = client.get("/tasks/average/Engineering", headers=auth_headers(admin.id))

    assert response.status_code == 200
    body = response.json()
    assert body["department"] == "Engineering"
    assert body["monthlyStats"][2] == {
        "month": "March", "totalTasks": 3, "completedTasks": 2, "completionRate": 66.67,
    }
    assert body["monthlyStats"][3] == {
        "month": "April", "totalTasks": 0, "completedTasks": 0, "completionRate": 0,
    }
    assert body["overall"] == {"totalTasks": 3, "completedTasks": 2, "completionRate": 66.67}


def test_department_average_requires_admin(client, auth_headers, employee):
    response = client.get("/tasks/average/Engineering", headers=auth_headers(employee.id))

    assert response.status_code == 403


def test_department_average_unknown_department(client, auth_headers, admin):
    response = client.get("/tasks/average/Astronomy", headers=auth_headers(admin.id))

    assert response.status_code == 404
