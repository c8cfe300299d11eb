from datetime import datetime, timedelta, timezone
from decimal import Decimal, ROUND_HALF_UP

from parking_system.config import Config
from parking_system.exceptions import InvalidTimeRange, UnknownVehicleType
from parking_system.models.parking_models import VehicleType

CENT = Decimal("0.01")
MILLISECONDS_PER_HOUR = Config.SECONDS_PER_HOUR * 1000


def as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def round_price(value) -> Decimal:
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def hourly_rate(vehicle_type) -> Decimal:
    if not isinstance(vehicle_type, VehicleType):
        raise UnknownVehicleType(f"Unknown Parking Type: {vehicle_type}")
    return Config.RATE_PER_HOUR[vehicle_type]


def calculate_fare(entry_time, exit_time, vehicle_type, apply_discount=False) -> Decimal:
    if entry_time is None or exit_time is None:
        raise InvalidTimeRange(f"Out time provided is incorrect: {exit_time}")

    entry_time_aware = as_utc(entry_time)
    exit_time_aware = as_utc(exit_time)
    if exit_time_aware < entry_time_aware:
        raise InvalidTimeRange(f"Out time provided is incorrect: {exit_time}")

    duration_ms = (exit_time_aware - entry_time_aware) // timedelta(milliseconds=1)
    duration_hours = Decimal(duration_ms) / Decimal(MILLISECONDS_PER_HOUR)

    if duration_hours * 60 < Config.FREE_PARKING_MINUTES:
        return round_price(0)

    price = duration_hours * hourly_rate(vehicle_type)
    if apply_discount:
        price = price * Config.LOYALTY_DISCOUNT

    return round_price(price)


def format_time(moment):
    if moment is None:
        return None
    return as_utc(moment).astimezone(tz=Config.get_timezone()).strftime("%Y-%m-%d %I:%M %p")
