import logging

from parking_system.exceptions import InvalidVehicleType, NoAvailableSpot
from parking_system.models.parking_models import VehicleType
from parking_system.schemas.parking_schemas import SpotDescriptor

logger = logging.getLogger(__name__)


class SpotAllocator:
    def __init__(self, spot_store):
        self.spot_store = spot_store

    def allocate(self, vehicle_type) -> SpotDescriptor:
        if not isinstance(vehicle_type, VehicleType):
            raise InvalidVehicleType(f"Unsupported vehicle type: {vehicle_type}")

        parking_number = self.spot_store.get_next_available_slot(vehicle_type)
        if not parking_number or parking_number <= 0:
            raise NoAvailableSpot(
                f"Error fetching parking number from DB. Parking slots might be full for {vehicle_type.value}"
            )

        logger.info(f"Next available {vehicle_type.value} spot is {parking_number}")
        # THE CALLER CLAIMS THE SPOT ONCE A TICKET IS ATTACHED TO IT
        return SpotDescriptor(id=parking_number, vehicle_type=vehicle_type, available=True)
