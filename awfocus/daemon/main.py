import logging
import sys

from awfocus.core.errors import AwfocusError
from awfocus.daemon.service import FocusWatchService


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )

    try:
        service = FocusWatchService()
        service.run()
    except AwfocusError as e:
        logging.error(f"Cannot start focus watcher: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        logging.info("Interrupted by user.")

if __name__ == "__main__":
    main()
