"""
Logging setup shared by the API process
"""
import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger once; later calls only adjust the level"""
    root = logging.getLogger()
    root.setLevel(level.upper())

    if any(getattr(handler, "_marketplace", False) for handler in root.handlers):
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._marketplace = True
    root.addHandler(handler)
