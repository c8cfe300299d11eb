import os
from decimal import Decimal
from zoneinfo import ZoneInfo

from dotenv import load_dotenv

from parking_system.models.parking_models import VehicleType

load_dotenv()


class Config:
    SECONDS_PER_HOUR = 3600
    FREE_PARKING_MINUTES = 30
    LOYALTY_DISCOUNT = Decimal("0.95")
    RATE_PER_HOUR = {
        VehicleType.CAR: Decimal("1.5"),
        VehicleType.BIKE: Decimal("1.0"),
    }
    # NUMBER OF SPOTS SEEDED INTO AN EMPTY PARKING TABLE, LOWEST IDS FIRST
    PARKING_LAYOUT = {
        VehicleType.CAR: 3,
        VehicleType.BIKE: 2,
    }
    TIMEZONE = os.getenv("PARKING_TIMEZONE", "UTC")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    @staticmethod
    def get_timezone():
        return ZoneInfo(Config.TIMEZONE)
