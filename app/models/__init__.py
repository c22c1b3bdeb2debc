from .department import Department
from .user import Admin, Employee, Role
from .task import Task, TaskStatus
