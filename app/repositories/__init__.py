from .identity import IdentityRepository
from .department import DepartmentRepository
from .task import TaskRepository
