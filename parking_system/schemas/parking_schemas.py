from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlmodel import SQLModel

from parking_system.models.parking_models import VehicleType


class SpotDescriptor(SQLModel):
    id: int
    vehicle_type: VehicleType
    available: bool = True


class TicketRecord(SQLModel):
    id: Optional[int] = None
    parking_spot: SpotDescriptor
    vehicle_reg_number: str
    in_time: datetime
    out_time: Optional[datetime] = None
    price: Decimal = Decimal("0")
