from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from sqlmodel import Field, SQLModel

from parking_system.exceptions import InvalidVehicleType

REG_NUMBER_MAX_LENGTH = 10


class VehicleType(str, Enum):
    CAR = "CAR"
    BIKE = "BIKE"

    @classmethod
    def from_selection(cls, selection: int) -> "VehicleType":
        # MENU ORDER SHOWN BY THE INPUT READER
        selections = {1: cls.CAR, 2: cls.BIKE}
        if isinstance(selection, bool):
            raise InvalidVehicleType(f"Entered input is invalid: {selection}")
        try:
            return selections[selection]
        except (KeyError, TypeError):
            raise InvalidVehicleType(f"Entered input is invalid: {selection}")


class ParkingSpot(SQLModel, table=True):
    __tablename__ = "parking"

    id: Optional[int] = Field(default=None, primary_key=True)
    vehicle_type: VehicleType
    available: bool = Field(default=True)


class Ticket(SQLModel, table=True):
    __tablename__ = "ticket"

    id: Optional[int] = Field(default=None, primary_key=True)
    parking_number: int = Field(foreign_key="parking.id")
    vehicle_reg_number: str = Field(index=True, max_length=REG_NUMBER_MAX_LENGTH)
    price: Decimal = Field(default=Decimal("0"), max_digits=10, decimal_places=2)
    in_time: datetime
    out_time: Optional[datetime] = Field(default=None)
