import logging
import os
import sys

FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"

log = logging.getLogger("moneytree")


def setup_logging(level=None) -> logging.Logger:
    """Configure the root handler once; later calls only adjust the level."""
    level = level or os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=level,
        format=FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    log.setLevel(level)
    # web3 and urllib3 are chatty at DEBUG
    logging.getLogger("web3").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    return log
