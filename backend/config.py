import os
from dotenv import load_dotenv

load_dotenv()

# MongoDB配置
MONGODB_URL = os.getenv("MONGODB_URL", "mongodb://localhost:27017")
DATABASE_NAME = os.getenv("DATABASE_NAME", "workout_tracker")
WORKOUTS_COLLECTION = os.getenv("WORKOUTS_COLLECTION", "workouts")

# 体重配置（磅）
MAX_WEIGHT_LBS = float(os.getenv("MAX_WEIGHT_LBS", "1000"))
WEIGH_IN_WEEKDAY = int(os.getenv("WEIGH_IN_WEEKDAY", "0"))  # 0 = 周一

# 日志配置
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# 服务器配置
API_PREFIX = "/api"
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
