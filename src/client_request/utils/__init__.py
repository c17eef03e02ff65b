"""Utils package."""

from client_request.utils.logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
