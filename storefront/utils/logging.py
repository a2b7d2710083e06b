# storefront/utils/logging.py
import logging
import sys

from storefront.utils.settings import LOG_LEVEL

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_root = logging.getLogger("storefront")

if not _root.handlers:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_FORMAT))
    _root.addHandler(handler)
    _root.setLevel(LOG_LEVEL.upper())


def get_logger(name: str) -> logging.Logger:
    # everything under "storefront" shares the one handler
    if not name.startswith("storefront"):
        name = f"storefront.{name}"
    return logging.getLogger(name)
