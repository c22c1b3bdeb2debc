from pydantic import BaseModel
from typing import List


class MonthlyStat(BaseModel):
    month: str
    totalTasks: int
    completedTasks: int
    completionRate: float


class OverallStat(BaseModel):
    totalTasks: int
    completedTasks: int
    completionRate: float


class DepartmentAverage(BaseModel):
    department: str
    monthlyStats: List[MonthlyStat]
    overall: OverallStat
