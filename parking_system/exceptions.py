class ParkingError(Exception):
    pass


class InvalidVehicleType(ParkingError):
    pass


class InvalidRegistrationNumber(ParkingError):
    pass


class NoAvailableSpot(ParkingError):
    pass


class VehicleAlreadyParked(ParkingError):
    pass


class InvalidTimeRange(ParkingError):
    pass


class UnknownVehicleType(ParkingError):
    pass


class PersistenceFailure(ParkingError):
    pass
