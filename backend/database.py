import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional

from pymongo import ASCENDING, MongoClient, ReturnDocument

from config import MONGODB_URL, DATABASE_NAME, WORKOUTS_COLLECTION
from models import Observation, WorkoutRecord

logger = logging.getLogger(__name__)

client = MongoClient(MONGODB_URL)
db = client[DATABASE_NAME]

# 集合
workouts_collection = db[WORKOUTS_COLLECTION]

# 区分"没传体重"和"体重传了 None"
UNSET = object()

def _to_record(doc: dict) -> WorkoutRecord:
    return WorkoutRecord(
        date=doc["date"],
        worked_out=bool(doc.get("worked_out", False)),
        weight=doc.get("weight"),
        created_at=doc["created_at"],
        updated_at=doc["updated_at"],
    )

class WorkoutStore:
    """按日期存储打卡记录，每个日期最多一条"""

    def __init__(self, collection):
        self.collection = collection

    def initialize(self) -> None:
        """创建索引"""
        self.collection.create_index("date", unique=True)
        logger.info("索引已创建: %s.date", self.collection.name)

    def get(self, date: str) -> Optional[WorkoutRecord]:
        doc = self.collection.find_one({"date": date}, {"_id": 0})
        return _to_record(doc) if doc else None

    def get_all(self) -> List[WorkoutRecord]:
        docs = self.collection.find({}, {"_id": 0}).sort("date", ASCENDING)
        return [_to_record(doc) for doc in docs]

    def get_in_range(self, start_date: str, end_date: str) -> List[WorkoutRecord]:
        """包含两端，按日期升序"""
        logger.debug("查询区间 %s ~ %s", start_date, end_date)
        docs = self.collection.find(
            {"date": {"$gte": start_date, "$lte": end_date}},
            {"_id": 0},
        ).sort("date", ASCENDING)
        return [_to_record(doc) for doc in docs]

    def upsert(self, date: str, worked_out: bool, weight=UNSET) -> WorkoutRecord:
        """写入某天的打卡状态

        weight 不传时保留原值；传 None 时清除体重。
        """
        now = datetime.now(timezone.utc)
        update = {
            "$set": {"worked_out": worked_out, "updated_at": now},
            "$setOnInsert": {"date": date, "created_at": now},
        }
        if weight is None:
            update["$unset"] = {"weight": ""}
        elif weight is not UNSET:
            update["$set"]["weight"] = float(weight)

        doc = self.collection.find_one_and_update(
            {"date": date},
            update,
            projection={"_id": 0},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        logger.info("打卡已保存: date=%s worked_out=%s weight=%s", date, worked_out, doc.get("weight"))
        return _to_record(doc)

    def observations(self) -> Dict[str, Observation]:
        """全部历史记录的快照，供统计引擎使用"""
        return {
            doc["date"]: Observation(worked_out=bool(doc.get("worked_out", False)), weight=doc.get("weight"))
            for doc in self.collection.find({}, {"_id": 0, "date": 1, "worked_out": 1, "weight": 1})
        }

store = WorkoutStore(workouts_collection)

def get_store() -> WorkoutStore:
    return store
