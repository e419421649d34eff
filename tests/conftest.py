import mongomock
import pytest

from app.core.config import Settings


@pytest.fixture
def settings():
    return Settings(
        MONGODB_URI="mongodb://localhost:27017",
        MONGODB_DB_NAME="car_rental_test",
        SEED_ADMIN_EMAIL="admin@carrentalplatform.com",
        SEED_ADMIN_PASSWORD="ChangeMe123!",
        _env_file=None,
    )


@pytest.fixture
def mongo_db():
    client = mongomock.MongoClient()
    yield client["car_rental_test"]
    client.close()
