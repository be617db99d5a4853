from pydantic import BaseModel, Field, computed_field
from typing import Optional
import datetime as dt

from config import MAX_WEIGHT_LBS, WEIGH_IN_WEEKDAY

class Observation(BaseModel):
    """某一天的打卡观测值，交给统计引擎使用"""
    model_config = {"frozen": True}

    worked_out: bool = False
    weight: Optional[float] = Field(default=None, gt=0, allow_inf_nan=False, description="体重（磅），未记录时为空")

class WorkoutRecord(BaseModel):
    date: dt.date
    worked_out: bool = False
    weight: Optional[float] = None  # 未设置时为 None，不会存成 0
    created_at: dt.datetime
    updated_at: dt.datetime

    @computed_field
    @property
    def weigh_in_due(self) -> bool:
        """称重日打卡但还没有体重"""
        return self.worked_out and self.weight is None and self.date.weekday() == WEIGH_IN_WEEKDAY

class WorkoutUpsertRequest(BaseModel):
    worked_out: bool
    weight: Optional[float] = Field(
        default=None,
        gt=0,
        le=MAX_WEIGHT_LBS,
        allow_inf_nan=False,
        description="体重（磅）；不传则保留原值，传 null 则清除",
    )
