import logging
from sqlmodel import Session
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from parking_system.exceptions import PersistenceFailure
from parking_system.models.parking_models import VehicleType
from parking_system.schemas.parking_schemas import SpotDescriptor

logger = logging.getLogger(__name__)


class ParkingSpotStore:
    def __init__(self, engine):
        self.engine = engine

    def get_next_available_slot(self, vehicle_type: VehicleType) -> int:
        try:
            with Session(self.engine) as db:
                query = text("""
                    SELECT MIN(id) AS id FROM parking
                    WHERE available = :available AND vehicle_type = :vehicle_type
                """)
                row = db.execute(query, {"available": True, "vehicle_type": vehicle_type.name}).fetchone()
                return row.id if row and row.id else 0
        except SQLAlchemyError as e:
            logger.error(f"Error fetching next available slot for {vehicle_type.name}: {e}")
            raise PersistenceFailure(f"Error fetching next available slot: {e}")

    def get_spot(self, spot_id: int):
        try:
            with Session(self.engine) as db:
                query = text("SELECT id, vehicle_type, available FROM parking WHERE id = :spot_id")
                row = db.execute(query, {"spot_id": spot_id}).fetchone()
        except SQLAlchemyError as e:
            logger.error(f"Error fetching parking spot {spot_id}: {e}")
            raise PersistenceFailure(f"Error fetching parking spot {spot_id}: {e}")

        if not row:
            return None
        return SpotDescriptor(id=row.id, vehicle_type=VehicleType[row.vehicle_type], available=bool(row.available))

    def claim_spot(self, spot: SpotDescriptor) -> bool:
        # COMPARE-AND-SET: ONLY ONE ENTRY CAN FLIP A GIVEN SPOT TO UNAVAILABLE
        query = text("""
            UPDATE parking SET available = :claimed
            WHERE id = :spot_id AND available = :available
        """)
        return self._write(query, {"claimed": False, "spot_id": spot.id, "available": True}, spot)

    def update_parking(self, spot: SpotDescriptor) -> bool:
        query = text("UPDATE parking SET available = :available WHERE id = :spot_id")
        return self._write(query, {"available": spot.available, "spot_id": spot.id}, spot)

    def _write(self, query, params, spot) -> bool:
        try:
            with Session(self.engine) as db:
                result = db.execute(query, params)
                db.commit()
                return result.rowcount == 1
        except SQLAlchemyError as e:
            logger.error(f"Error updating parking spot {spot.id}: {e}")
            return False
