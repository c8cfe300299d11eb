import logging

from parking_system.config import Config
from parking_system.controllers.parking_controller import ParkingController
from parking_system.database import engine, init_db
from parking_system.stores.parking_spot_store import ParkingSpotStore
from parking_system.stores.ticket_store import TicketStore
from parking_system.utils.input_reader import InputReader
from parking_system.utils.notifier import ConsoleNotifier
from parking_system.views.parking_view import ParkingView

logger = logging.getLogger(__name__)


def build_view(db_engine, input_func=input, output=print):
    input_reader = InputReader(input_func=input_func, output=output)
    controller = ParkingController(
        input_reader=input_reader,
        spot_store=ParkingSpotStore(db_engine),
        ticket_store=TicketStore(db_engine),
        notifier=ConsoleNotifier(output=output),
    )
    return ParkingView(controller, input_reader, output=output)


def main():
    logging.basicConfig(level=Config.LOG_LEVEL)
    try:
        Config.get_timezone()
    except Exception as e:
        logger.error(f"Invalid PARKING_TIMEZONE '{Config.TIMEZONE}': {e}")
        raise

    try:
        init_db(engine)
        logger.info("Database Initialized Successfully")
    except Exception as e:
        logger.error(f"Failed to initialized the database {e}")
        raise

    build_view(engine).run()


if __name__ == "__main__":
    main()
