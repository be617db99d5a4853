from .workouts import router as workouts_router
from .stats import router as stats_router
