# Models package
from .workout import Observation, WorkoutRecord, WorkoutUpsertRequest
from .stats import StatisticsReport
