from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from parking_system.models.parking_models import VehicleType
from parking_system.schemas.parking_schemas import SpotDescriptor, TicketRecord
from parking_system.stores.parking_spot_store import ParkingSpotStore
from parking_system.stores.ticket_store import TicketStore

IN_TIME = datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def spot_store(engine):
    return ParkingSpotStore(engine)


@pytest.fixture
def ticket_store(engine):
    return TicketStore(engine)


def new_ticket(spot_id=1, vehicle_reg_number="ABCDEF", in_time=IN_TIME):
    return TicketRecord(
        parking_spot=SpotDescriptor(id=spot_id, vehicle_type=VehicleType.CAR, available=False),
        vehicle_reg_number=vehicle_reg_number,
        in_time=in_time,
    )


# PARKING SPOTS

@pytest.mark.parametrize("vehicle_type, expected_slot", [(VehicleType.CAR, 1), (VehicleType.BIKE, 4)])
def test_get_next_available_slot(spot_store, vehicle_type, expected_slot):
    assert spot_store.get_next_available_slot(vehicle_type) == expected_slot


def test_seeded_layout(spot_store):
    car_spots = [spot_store.get_spot(spot_id) for spot_id in (1, 2, 3)]
    bike_spots = [spot_store.get_spot(spot_id) for spot_id in (4, 5)]

    assert all(spot.vehicle_type == VehicleType.CAR and spot.available for spot in car_spots)
    assert all(spot.vehicle_type == VehicleType.BIKE and spot.available for spot in bike_spots)
    assert spot_store.get_spot(6) is None


def test_claim_spot_only_once(spot_store):
    parking_spot = SpotDescriptor(id=1, vehicle_type=VehicleType.CAR)

    assert spot_store.claim_spot(parking_spot) is True
    assert spot_store.claim_spot(parking_spot) is False
    assert spot_store.get_spot(1).available is False
    assert spot_store.get_next_available_slot(VehicleType.CAR) == 2


def test_no_slot_left(spot_store):
    for spot_id in (4, 5):
        assert spot_store.claim_spot(SpotDescriptor(id=spot_id, vehicle_type=VehicleType.BIKE))

    assert spot_store.get_next_available_slot(VehicleType.BIKE) == 0


def test_update_parking_releases_spot(spot_store):
    parking_spot = SpotDescriptor(id=2, vehicle_type=VehicleType.CAR)
    spot_store.claim_spot(parking_spot)

    parking_spot.available = True
    assert spot_store.update_parking(parking_spot) is True
    assert spot_store.get_spot(2).available is True


def test_update_unknown_spot(spot_store):
    assert spot_store.update_parking(SpotDescriptor(id=99, vehicle_type=VehicleType.CAR)) is False


# TICKETS

def test_save_and_get_ticket(ticket_store):
    ticket = new_ticket()

    assert ticket_store.save_ticket(ticket) is True
    assert ticket.id is not None

    stored = ticket_store.get_ticket("ABCDEF")
    assert stored.id == ticket.id
    assert stored.vehicle_reg_number == "ABCDEF"
    assert stored.price == Decimal("0")
    assert stored.out_time is None
    assert stored.in_time.replace(tzinfo=timezone.utc) == IN_TIME
    assert stored.parking_spot.id == 1
    assert stored.parking_spot.vehicle_type == VehicleType.CAR


def test_get_unknown_ticket(ticket_store):
    assert ticket_store.get_ticket("UNKNOWN") is None
    assert ticket_store.get_nb_ticket("UNKNOWN") == 0


def test_update_ticket_closes_it(ticket_store):
    ticket = new_ticket()
    ticket_store.save_ticket(ticket)

    ticket.out_time = IN_TIME + timedelta(hours=2)
    ticket.price = Decimal("3.00")
    assert ticket_store.update_ticket(ticket) is True

    # CLOSED TICKETS ARE NOT OPEN ANY MORE
    assert ticket_store.get_ticket("ABCDEF") is None

    closed = ticket_store.get_ticket("ABCDEF", open_only=False)
    assert closed.price == Decimal("3.00")
    assert closed.out_time.replace(tzinfo=timezone.utc) == IN_TIME + timedelta(hours=2)


def test_update_unsaved_ticket(ticket_store):
    assert ticket_store.update_ticket(new_ticket()) is False


def test_update_missing_ticket(ticket_store):
    ticket = new_ticket()
    ticket.id = 1234
    assert ticket_store.update_ticket(ticket) is False


def test_get_nb_ticket_counts_every_visit(ticket_store):
    for day in range(3):
        ticket = new_ticket(in_time=IN_TIME + timedelta(days=day))
        ticket_store.save_ticket(ticket)
    ticket_store.save_ticket(new_ticket(vehicle_reg_number="OTHER"))

    assert ticket_store.get_nb_ticket("ABCDEF") == 3
    assert ticket_store.get_nb_ticket("OTHER") == 1


def test_get_ticket_returns_latest(ticket_store):
    first = new_ticket(in_time=IN_TIME)
    latest = new_ticket(spot_id=2, in_time=IN_TIME + timedelta(days=1))
    ticket_store.save_ticket(first)
    ticket_store.save_ticket(latest)

    assert ticket_store.get_ticket("ABCDEF").id == latest.id
