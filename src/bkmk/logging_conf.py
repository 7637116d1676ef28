import logging
import sys

from bkmk.config import get_settings


def setup_logging() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(levelname)s %(message)s",
        stream=sys.stderr,
    )
