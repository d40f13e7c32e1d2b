from .error_handler import configure_error_handling
from .request_logger import configure_request_logging
from .request_metrics import configure_request_metrics
from .security_headers import configure_security_headers

__all__ = [
    "configure_error_handling",
    "configure_request_logging",
    "configure_request_metrics",
    "configure_security_headers",
]
