from .user import IdentityCreate, IdentityCreated, UserLogin, EmployeeListItem, DepartmentOut, DepartmentMember, DepartmentDetail
from .tokens import LoginResponse
from .task import TaskCreate, TaskOut
from .reports import MonthlyStat, OverallStat, DepartmentAverage
