import inspect

import pytest
from pydantic import ValidationError

from models import Observation, WorkoutUpsertRequest
from routers.stats import get_stats
from routers.workouts import get_workout, list_workouts, set_workout


@pytest.mark.parametrize("weight", [0, -1.5, float("inf"), float("-inf"), float("nan")])
def test_observation_rejects_non_positive_or_non_finite_weight(weight):
    with pytest.raises(ValidationError):
        Observation(worked_out=True, weight=weight)


def test_observation_weight_defaults_to_absent():
    assert Observation(worked_out=True).weight is None


@pytest.mark.parametrize("weight", [0, float("inf"), float("nan"), 1000.5])
def test_upsert_request_rejects_invalid_weight(weight):
    with pytest.raises(ValidationError):
        WorkoutUpsertRequest(worked_out=True, weight=weight)


def test_upsert_request_tracks_explicit_weight():
    assert "weight" not in WorkoutUpsertRequest(worked_out=True).model_fields_set
    assert "weight" in WorkoutUpsertRequest(worked_out=True, weight=None).model_fields_set


@pytest.mark.parametrize("handler", [list_workouts, get_workout, set_workout, get_stats])
def test_database_handlers_run_in_threadpool(handler):
    # pymongo 是阻塞调用，处理函数必须是普通函数
    assert not inspect.iscoroutinefunction(handler)
