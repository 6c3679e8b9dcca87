"""
Logging setup for the service process.

Modules log through logging.getLogger(__name__); this installs the single
root handler those records end up in.
"""
import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Configure root logging once per process.

    Args:
        level: Log level name, e.g. "DEBUG" or "INFO"
    """
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
