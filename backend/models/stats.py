from pydantic import BaseModel
from typing import Optional
from datetime import date

class StatisticsReport(BaseModel):
    model_config = {"frozen": True}

    current_streak: int = 0  # 当前连续打卡天数
    current_streak_start: Optional[date] = None
    longest_streak: int = 0  # 历史最长连续天数
    longest_streak_start: Optional[date] = None
    longest_streak_end: Optional[date] = None
    total_workouts: int = 0
    first_workout_date: Optional[date] = None
    total_days_passed: int = 0  # 从第一次打卡到今天（含两端）
    all_time_percentage: int = 0
    month_percentage: int = 0  # 本月1号到今天的打卡率
