import logging
from sqlmodel import Session, select, func, col
from sqlalchemy.exc import SQLAlchemyError

from parking_system.exceptions import PersistenceFailure
from parking_system.models.parking_models import ParkingSpot, Ticket
from parking_system.schemas.parking_schemas import SpotDescriptor, TicketRecord

logger = logging.getLogger(__name__)


class TicketStore:
    def __init__(self, engine):
        self.engine = engine

    def get_ticket(self, vehicle_reg_number: str, open_only: bool = True):
        statement = (
            select(Ticket, ParkingSpot)
            .join(ParkingSpot, Ticket.parking_number == ParkingSpot.id)
            .where(Ticket.vehicle_reg_number == vehicle_reg_number)
        )
        if open_only:
            statement = statement.where(col(Ticket.out_time).is_(None))
        statement = statement.order_by(col(Ticket.in_time).desc(), col(Ticket.id).desc())

        try:
            with Session(self.engine) as db:
                row = db.exec(statement).first()
        except SQLAlchemyError as e:
            logger.error(f"Error fetching ticket for vehicle {vehicle_reg_number}: {e}")
            raise PersistenceFailure(f"Error fetching ticket for vehicle {vehicle_reg_number}: {e}")

        if not row:
            return None

        ticket, parking_spot = row
        return TicketRecord(
            id=ticket.id,
            parking_spot=SpotDescriptor(
                id=parking_spot.id,
                vehicle_type=parking_spot.vehicle_type,
                available=parking_spot.available,
            ),
            vehicle_reg_number=ticket.vehicle_reg_number,
            in_time=ticket.in_time,
            out_time=ticket.out_time,
            price=ticket.price,
        )

    def get_nb_ticket(self, vehicle_reg_number: str) -> int:
        statement = select(func.count(Ticket.id)).where(Ticket.vehicle_reg_number == vehicle_reg_number)
        try:
            with Session(self.engine) as db:
                return db.exec(statement).one()
        except SQLAlchemyError as e:
            logger.error(f"Error counting tickets for vehicle {vehicle_reg_number}: {e}")
            raise PersistenceFailure(f"Error counting tickets for vehicle {vehicle_reg_number}: {e}")

    def save_ticket(self, ticket: TicketRecord) -> bool:
        new_ticket = Ticket(
            parking_number=ticket.parking_spot.id,
            vehicle_reg_number=ticket.vehicle_reg_number,
            price=ticket.price,
            in_time=ticket.in_time,
            out_time=ticket.out_time,
        )
        try:
            with Session(self.engine) as db:
                db.add(new_ticket)
                db.commit()
                db.refresh(new_ticket)
                ticket.id = new_ticket.id
                return True
        except SQLAlchemyError as e:
            logger.error(f"Error saving ticket for vehicle {ticket.vehicle_reg_number}: {e}")
            return False

    def update_ticket(self, ticket: TicketRecord) -> bool:
        if ticket.id is None:
            logger.error(f"Cannot update unsaved ticket for vehicle {ticket.vehicle_reg_number}")
            return False
        try:
            with Session(self.engine) as db:
                stored_ticket = db.get(Ticket, ticket.id)
                if stored_ticket is None:
                    logger.error(f"Ticket {ticket.id} not found")
                    return False

                stored_ticket.price = ticket.price
                stored_ticket.out_time = ticket.out_time
                db.add(stored_ticket)
                db.commit()
                return True
        except SQLAlchemyError as e:
            logger.error(f"Error updating ticket {ticket.id}: {e}")
            return False
