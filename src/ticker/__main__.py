"""Demo: print 0..N-1, one number per interval.

Configured through TICKER_INTERVAL_SECONDS, TICKER_DEMO_COUNT and TICKER_LOG_LEVEL.
"""

import logging
import sys
import time

from .config import TickerSettings, get_settings
from .paced import PacedIterator

logger = logging.getLogger(__name__)


def run_demo(settings: TickerSettings) -> int:
    """Print the demo sequence to stdout and return how many values were printed."""
    logger.info(
        "Printing %d values, one every %.3fs",
        settings.demo_count,
        settings.interval_seconds,
    )

    started_at = time.monotonic()
    ticker = PacedIterator(range(settings.demo_count), settings.interval_seconds)
    for i in ticker:
        print(i, flush=True)

    logger.info(
        "Done: %d values in %.2fs", ticker.emitted, time.monotonic() - started_at
    )
    return ticker.emitted


def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    try:
        run_demo(settings)
    except KeyboardInterrupt:
        logger.info("Interrupted")


if __name__ == "__main__":
    main()
