import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from aggregator import InvalidDateError
from config import API_PREFIX, CORS_ORIGINS, LOG_LEVEL
from database import get_store
from routers import workouts_router, stats_router

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    get_store().initialize()
    yield

app = FastAPI(
    title="健身打卡记录 API",
    description="用于记录每日是否健身、体重，并统计连续打卡天数的后端服务",
    version="1.0.0",
    lifespan=lifespan,
)

# 配置CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(InvalidDateError)
async def invalid_date_handler(request: Request, exc: InvalidDateError):
    logger.error("数据库中存在无效日期: %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": "存储的打卡数据有误"})

@app.exception_handler(PyMongoError)
async def database_error_handler(request: Request, exc: PyMongoError):
    logger.error("数据库错误: %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=503, content={"detail": "数据库暂时不可用"})

# 注册路由
app.include_router(workouts_router, prefix=API_PREFIX)
app.include_router(stats_router, prefix=API_PREFIX)

@app.get("/")
async def root():
    return {"message": "健身打卡记录 API 服务运行中", "version": "1.0.0"}

@app.get("/health")
async def health_check():
    return {"status": "healthy"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
