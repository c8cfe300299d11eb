from typing import Protocol, runtime_checkable

from parking_system.schemas.parking_schemas import TicketRecord
from parking_system.utils.calculation import format_time


@runtime_checkable
class Notifier(Protocol):
    def ticket_issued(self, ticket: TicketRecord) -> None: ...

    def returning_vehicle(self, vehicle_reg_number: str) -> None: ...

    def fare_due(self, ticket: TicketRecord) -> None: ...

    def operation_failed(self, message: str) -> None: ...


class ConsoleNotifier:
    def __init__(self, output=print):
        self.output = output

    def ticket_issued(self, ticket: TicketRecord):
        self.output("Generated Ticket and saved in DB")
        self.output(f"Please park your vehicle in spot number: {ticket.parking_spot.id}")
        self.output(f"Recorded in-time for vehicle number: {ticket.vehicle_reg_number} is: {format_time(ticket.in_time)}")

    def returning_vehicle(self, vehicle_reg_number: str):
        self.output(f"Welcome back {vehicle_reg_number}! As a regular user of our parking, you will get a 5% discount.")

    def fare_due(self, ticket: TicketRecord):
        self.output(f"Please pay the parking fare: {ticket.price}")
        self.output(f"Recorded out-time for vehicle number: {ticket.vehicle_reg_number} is: {format_time(ticket.out_time)}")

    def operation_failed(self, message: str):
        self.output(message)
