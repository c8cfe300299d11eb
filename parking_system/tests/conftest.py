import pytest
from sqlmodel import SQLModel, create_engine
from sqlalchemy.pool import StaticPool

from parking_system.database import init_db


@pytest.fixture
def engine():
    # ONE SHARED IN-MEMORY CONNECTION PER TEST
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(test_engine)
    yield test_engine
    SQLModel.metadata.drop_all(test_engine)
    test_engine.dispose()
