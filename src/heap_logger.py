import logging
import os

_FORMAT = "%(levelname)s %(asctime)s [%(name)s:%(lineno)d] %(message)s"
_DATE_FORMAT = "%H:%M:%S"

_root_logger = logging.getLogger("keyed_heap")
_default_handler = None


def _setup_logger() -> None:
    global _default_handler
    if _default_handler is not None:
        return
    _default_handler = logging.StreamHandler()
    _default_handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
    _root_logger.addHandler(_default_handler)
    _root_logger.setLevel(os.environ.get("HEAP_LOG_LEVEL", "WARNING").upper())
    _root_logger.propagate = False


def init_logger(name: str) -> logging.Logger:
    """Return a logger under the ``keyed_heap`` hierarchy.

    Level comes from ``HEAP_LOG_LEVEL`` (default ``WARNING``).
    """
    _setup_logger()
    if name != "keyed_heap" and not name.startswith("keyed_heap."):
        name = f"keyed_heap.{name}"
    return logging.getLogger(name)
