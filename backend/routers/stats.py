from fastapi import APIRouter, Depends, Query
from datetime import date
from typing import Optional

from aggregator import compute
from database import WorkoutStore, get_store
from models import StatisticsReport

router = APIRouter(prefix="/stats", tags=["统计"])

@router.get("", response_model=StatisticsReport)
def get_stats(
    as_of: Optional[date] = Query(default=None, description="统计截止日，默认今天（本地日期）"),
    store: WorkoutStore = Depends(get_store),
):
    """获取连续打卡和打卡率统计"""
    today = as_of or date.today()
    return compute(store.observations(), today)
