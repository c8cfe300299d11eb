import logging

logger = logging.getLogger(__name__)

NEW_VEHICLE = 1
EXITING_VEHICLE = 2
SHUTDOWN = 3


class ParkingView:
    def __init__(self, controller, input_reader, output=print):
        self.controller = controller
        self.input_reader = input_reader
        self.output = output

    def show_menu(self):
        self.output("Please select an option. Simply enter the number to choose an action")
        self.output(f"{NEW_VEHICLE} New Vehicle Entering - Allocate Parking Space")
        self.output(f"{EXITING_VEHICLE} Vehicle Exiting - Generate Ticket Price")
        self.output(f"{SHUTDOWN} Shutdown System")

    def run(self):
        logger.info("App initialized!!!")
        self.output("Welcome to Parking System!")

        while True:
            self.show_menu()
            try:
                option = self.input_reader.read_selection()
            except EOFError:
                # END OF INPUT BEHAVES LIKE A SHUTDOWN
                option = SHUTDOWN

            if option == NEW_VEHICLE:
                self.controller.process_incoming_vehicle()
            elif option == EXITING_VEHICLE:
                self.controller.process_exiting_vehicle()
            elif option == SHUTDOWN:
                self.output("Exiting from the system!")
                break
            else:
                self.output("Unsupported option. Please enter a number corresponding to the provided menu")

        logger.info("App stopped")
