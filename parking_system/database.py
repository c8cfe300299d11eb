import os
import logging
from sqlmodel import create_engine, SQLModel, Session, select
from sqlalchemy import inspect
from dotenv import load_dotenv

from parking_system.config import Config
from parking_system.models.parking_models import ParkingSpot, Ticket

logger = logging.getLogger(__name__)

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///parking.db")
DATABASE_ECHO = os.getenv("DATABASE_ECHO", "false").lower() in ("1", "true", "yes")

engine = create_engine(DATABASE_URL, echo=DATABASE_ECHO)


def init_db(db_engine=None):
    db_engine = db_engine if db_engine is not None else engine
    try:
        inspector = inspect(db_engine)
        # LIST OF ALL TABLES
        existing_tables = inspector.get_table_names()

        # NO NEED TO CREATE IF IT IS ALREADY EXIST
        if not {ParkingSpot.__tablename__, Ticket.__tablename__}.issubset(existing_tables):
            SQLModel.metadata.create_all(db_engine)
            logger.info("Tables created successfully")
        else:
            logger.info("Tables already exist, skipping creation")

        seed_parking_spots(db_engine)
    except Exception as e:
        logger.error(f"Error in initializing the database: {e}")
        raise


def seed_parking_spots(db_engine):
    with Session(db_engine) as db:
        if db.exec(select(ParkingSpot)).first() is not None:
            return 0

        spots = [
            ParkingSpot(vehicle_type=vehicle_type, available=True)
            for vehicle_type, count in Config.PARKING_LAYOUT.items()
            for _ in range(count)
        ]
        db.add_all(spots)
        db.commit()
        logger.info(f"Seeded {len(spots)} parking spots")
        return len(spots)
