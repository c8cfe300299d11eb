import logging

from parking_system.exceptions import InvalidRegistrationNumber
from parking_system.models.parking_models import REG_NUMBER_MAX_LENGTH

logger = logging.getLogger(__name__)


class InputReader:
    def __init__(self, input_func=input, output=print):
        self.input_func = input_func
        self.output = output

    def read_selection(self) -> int:
        try:
            return int(self.input_func().strip())
        except ValueError as e:
            logger.error(f"Error while reading user input from Shell: {e}")
            self.output("Error reading input. Please enter valid number for proceeding further")
            return -1

    def read_vehicle_type_selection(self) -> int:
        self.output("Please select vehicle type from menu")
        self.output("1 CAR")
        self.output("2 BIKE")
        return self.read_selection()

    def read_vehicle_registration_number(self) -> str:
        self.output("Please type the vehicle registration number and press enter key")
        vehicle_reg_number = self.input_func().strip().upper()
        if not vehicle_reg_number or len(vehicle_reg_number) > REG_NUMBER_MAX_LENGTH:
            logger.error(f"Error while reading user input from Shell: invalid registration number '{vehicle_reg_number}'")
            raise InvalidRegistrationNumber(
                f"Invalid input provided. Registration number must be 1 to {REG_NUMBER_MAX_LENGTH} characters."
            )
        return vehicle_reg_number
