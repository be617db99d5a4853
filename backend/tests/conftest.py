import mongomock
import pytest
from fastapi.testclient import TestClient

from database import WorkoutStore, get_store
from main import app


@pytest.fixture
def store():
    collection = mongomock.MongoClient().db.workouts
    workout_store = WorkoutStore(collection)
    workout_store.initialize()
    return workout_store


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    # 不进入 with 块，避免 lifespan 连接真实的 MongoDB
    yield TestClient(app)
    app.dependency_overrides.clear()
