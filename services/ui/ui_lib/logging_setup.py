import logging, sys
from ui_lib.config import LOG_LEVEL

def setup_logging(level: str = LOG_LEVEL):
    logging.basicConfig(
        level=level,
        stream=sys.stdout,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
