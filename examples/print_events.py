"""Example: print every event from a connected ReMOTE 25SL.

This example demonstrates:
- Hot-plug connection to the controller's three input ports
- Receiving decoded events through a queue on the main thread
"""

import logging
import queue

from remote25sl import Remote25SLController

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


def main():
    """Print decoded events until Ctrl+C."""
    events = queue.Queue()

    with Remote25SLController(event_queue=events):
        logger.info("Waiting for ReMOTE 25SL events (Ctrl+C to stop)")
        try:
            while True:
                port, event = events.get()
                print(f"{port.name}: {event}")
        except KeyboardInterrupt:
            logger.info("Stopping")


if __name__ == "__main__":
    main()
