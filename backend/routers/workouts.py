import logging
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from database import UNSET, WorkoutStore, get_store
from models import WorkoutRecord, WorkoutUpsertRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/workouts", tags=["打卡"])

@router.get("", response_model=List[WorkoutRecord])
def list_workouts(
    start_date: Optional[date] = Query(default=None, description="起始日期（含）"),
    end_date: Optional[date] = Query(default=None, description="结束日期（含）"),
    store: WorkoutStore = Depends(get_store),
):
    """获取打卡记录，按日期升序"""
    if start_date is None and end_date is None:
        return store.get_all()

    start = start_date or date.min
    end = end_date or date.max
    if start > end:
        raise HTTPException(status_code=400, detail="起始日期不能晚于结束日期")

    return store.get_in_range(start.isoformat(), end.isoformat())

@router.get("/{day}", response_model=WorkoutRecord)
def get_workout(day: date, store: WorkoutStore = Depends(get_store)):
    """获取某一天的打卡记录"""
    record = store.get(day.isoformat())
    if not record:
        raise HTTPException(status_code=404, detail="该日期没有打卡记录")
    return record

@router.put("/{day}", response_model=WorkoutRecord)
def set_workout(
    day: date,
    request: WorkoutUpsertRequest,
    store: WorkoutStore = Depends(get_store),
):
    """设置某一天的打卡状态；请求体里没有 weight 时保留原体重"""
    weight = request.weight if "weight" in request.model_fields_set else UNSET
    record = store.upsert(day.isoformat(), request.worked_out, weight)
    if record.weigh_in_due:
        logger.info("%s 是称重日，尚未记录体重", record.date)
    return record
