import logging
from datetime import datetime, timezone
from decimal import Decimal

from parking_system.controllers.spot_allocator import SpotAllocator
from parking_system.exceptions import (
    NoAvailableSpot,
    ParkingError,
    PersistenceFailure,
    VehicleAlreadyParked,
)
from parking_system.models.parking_models import VehicleType
from parking_system.schemas.parking_schemas import TicketRecord
from parking_system.utils.calculation import calculate_fare
from parking_system.utils.notifier import Notifier

logger = logging.getLogger(__name__)


def utc_now():
    return datetime.now(timezone.utc)


class ParkingController:
    def __init__(self, input_reader, spot_store, ticket_store, notifier: Notifier, fare_calculator=calculate_fare, clock=utc_now):
        self.input_reader = input_reader
        self.spot_store = spot_store
        self.ticket_store = ticket_store
        self.notifier = notifier
        self.fare_calculator = fare_calculator
        self.clock = clock
        self.spot_allocator = SpotAllocator(spot_store)

    def process_incoming_vehicle(self):
        try:
            vehicle_type = VehicleType.from_selection(self.input_reader.read_vehicle_type_selection())
            vehicle_reg_number = self.input_reader.read_vehicle_registration_number()

            if self.ticket_store.get_ticket(vehicle_reg_number) is not None:
                raise VehicleAlreadyParked(f"Vehicle {vehicle_reg_number} is already parked.")

            parking_spot = self.spot_allocator.allocate(vehicle_type)

            # ALLOT THIS PARKING SPACE AND MARK ITS AVAILABILITY AS FALSE
            if not self.spot_store.claim_spot(parking_spot):
                raise NoAvailableSpot(f"Parking spot {parking_spot.id} was taken before it could be claimed.")
            parking_spot.available = False

            if self.ticket_store.get_nb_ticket(vehicle_reg_number) > 0:
                self.notifier.returning_vehicle(vehicle_reg_number)

            ticket = TicketRecord(
                parking_spot=parking_spot,
                vehicle_reg_number=vehicle_reg_number,
                price=Decimal("0"),
                in_time=self.clock(),
                out_time=None,
            )
            if not self.ticket_store.save_ticket(ticket):
                raise PersistenceFailure(f"Unable to save ticket for vehicle {vehicle_reg_number}.")

            logger.info(f"Vehicle {vehicle_reg_number} parked in spot {parking_spot.id}, ticket {ticket.id}")
            self.notifier.ticket_issued(ticket)

        except ParkingError as e:
            logger.error(f"Unable to process incoming vehicle: {e}")
            self.notifier.operation_failed(f"Unable to process incoming vehicle. {e}")

        except Exception as e:
            logger.exception(f"Unexpected error while processing incoming vehicle: {e}")
            self.notifier.operation_failed("Unable to process incoming vehicle. Error occurred")

    def process_exiting_vehicle(self):
        try:
            vehicle_reg_number = self.input_reader.read_vehicle_registration_number()

            ticket = self.ticket_store.get_ticket(vehicle_reg_number)
            if ticket is None:
                raise PersistenceFailure(f"No open ticket found for vehicle {vehicle_reg_number}.")
            ticket.out_time = self.clock()

            # A PREVIOUS TICKET BESIDES THE ONE BEING CLOSED MAKES A REGULAR USER
            apply_discount = self.ticket_store.get_nb_ticket(vehicle_reg_number) > 1
            ticket.price = self.fare_calculator(
                ticket.in_time,
                ticket.out_time,
                ticket.parking_spot.vehicle_type,
                apply_discount,
            )

            ticket_updated = self.ticket_store.update_ticket(ticket)
            logger.info(f"Ticket update result for vehicle {vehicle_reg_number}: {ticket_updated}")

            if not ticket_updated:
                self.notifier.operation_failed("Unable to update ticket information. Error occurred")
                return

            parking_spot = ticket.parking_spot
            parking_spot.available = True
            if not self.spot_store.update_parking(parking_spot):
                logger.error(f"Ticket {ticket.id} closed but spot {parking_spot.id} could not be released")

            self.notifier.fare_due(ticket)

        except ParkingError as e:
            logger.error(f"Unable to process exiting vehicle: {e}")
            self.notifier.operation_failed(f"Unable to process exiting vehicle. {e}")

        except Exception as e:
            logger.exception(f"Unexpected error while processing exiting vehicle: {e}")
            self.notifier.operation_failed("Unable to process exiting vehicle. Error occurred")
