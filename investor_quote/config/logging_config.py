# investor_quote/config/logging_config.py

"""Per-run log file for quote fetches.

One file per launch in ``logs/`` (``run_YYYYMMDD_HHMMSS.log``) records
the whole extraction trail at DEBUG:

* ``investor_quote.extractor``: each locator that failed to resolve,
  which tier produced the price, and a missing change value.
* ``investor_quote.page`` / ``investor_quote.browser``: navigation,
  screenshots, and browser start/teardown (including teardown errors
  after a crash).
* ``investor_quote.health`` / ``investor_quote.cli``: page check results
  and terminal ``PriceNotFound`` or Playwright failures with tracebacks.

Only WARNING and above reach stderr, keeping stdout clean for JSON.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from investor_quote.config.settings import Settings

# Reusable format strings --------------------------------------------------

_DETAILED_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | %(module)s:%(funcName)s:%(lineno)d | "
    "%(message)s"
)

_CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"

_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging() -> Path:
    """Initialise the root ``investor_quote`` logger for the current run.

    Returns:
        The :class:`~pathlib.Path` to the log file created for this run.
    """
    logs_dir: Path = Settings.LOGS_DIR
    logs_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = logs_dir / f"run_{timestamp}.log"

    root_logger = logging.getLogger("investor_quote")
    root_logger.setLevel(logging.DEBUG)

    # Prevent duplicate handlers on repeated calls (e.g. tests)
    if root_logger.handlers:
        return log_file

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(_DETAILED_FORMAT, datefmt=_DATE_FORMAT)
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(
        logging.Formatter(_CONSOLE_FORMAT, datefmt=_DATE_FORMAT)
    )

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    root_logger.info("Logging initialised, log file: %s", log_file)

    return log_file
