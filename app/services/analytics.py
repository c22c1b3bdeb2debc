# app/services/analytics.py
"""
Monthly and year-to-date task completion statistics.

Every call reads the task records fresh and buckets them by creation month of
the current year. Nothing is cached, so concurrent writes simply show up (or
not) in the next call.
"""

import calendar
import logging
import math
from datetime import date, datetime, timezone
from typing import Callable, Iterable, List, Optional

from app.models.task import TaskStatus
from app.repositories.department import DepartmentRepository
from app.repositories.task import TaskRepository
from app.schemas.reports import DepartmentAverage, MonthlyStat, OverallStat
from app.utils.errors import NotFound

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def month_index(created_at: datetime, today: date) -> Optional[int]:
    """Zero-based month of ``created_at`` within the year of ``today``, None for other years"""
    if created_at.year != today.year:
        return None
    return created_at.month - 1


def completion_rate(completed: int, total: int) -> float:
    """Percentage rounded to 2 decimals, 0 when there is nothing to complete"""
    if total == 0:
        return 0.0
    # Ties round half up, not to even
    return math.floor(completed / total * 100 * 100 + 0.5) / 100


def monthly_stats(tasks: Iterable, today: date) -> List[MonthlyStat]:
    """One stat per month from January through the month of ``today``"""
    current_month = today.month - 1
    totals = [0] * (current_month + 1)
    completed = [0] * (current_month + 1)

    for task in tasks:
        index = month_index(task.created_at, today)
        if index is None or index > current_month:
            continue
        totals[index] += 1
        if task.status == TaskStatus.COMPLETED:
            completed[index] += 1

    return [
        MonthlyStat(
            month=calendar.month_name[index + 1],
            totalTasks=totals[index],
            completedTasks=completed[index],
            completionRate=completion_rate(completed[index], totals[index]),
        )
        for index in range(current_month + 1)
    ]


def overall_stat(tasks: Iterable, today: date) -> OverallStat:
    """Totals over the whole current year, later months included"""
    year_tasks = [task for task in tasks if month_index(task.created_at, today) is not None]
    total = len(year_tasks)
    completed = sum(1 for task in year_tasks if task.status == TaskStatus.COMPLETED)
    return OverallStat(
        totalTasks=total,
        completedTasks=completed,
        completionRate=completion_rate(completed, total),
    )


class TaskAnalytics:
    """Completion statistics per employee or per department"""

    def __init__(
        self,
        tasks: TaskRepository,
        departments: DepartmentRepository,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self.tasks = tasks
        self.departments = departments
        self.clock = clock

    def employee_monthly(self, employee_id: str) -> List[MonthlyStat]:
        today = self.clock().date()
        return monthly_stats(self.tasks.list_by_assignee(employee_id), today)

    def department_monthly(self, department_name: str) -> DepartmentAverage:
        department = self.departments.get_by_name_with_members(department_name)
        if department is None:
            raise NotFound(f"Department '{department_name}' not found")

        today = self.clock().date()
        member_ids = [employee.id for employee in department.employees]
        tasks = self.tasks.list_by_assignees(member_ids)
        logger.debug(
            "Aggregating %d tasks for %d employees in %s",
            len(tasks), len(member_ids), department_name,
        )

        return DepartmentAverage(
            department=department_name,
            monthlyStats=monthly_stats(tasks, today),
            overall=overall_stat(tasks, today),
        )
