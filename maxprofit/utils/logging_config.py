import logging
import sys

from maxprofit.config.settings import get_settings

HANDLER_NAME = "maxprofit.console"


def setup_logging() -> logging.Logger:
    """Configure application-wide logging."""
    settings = get_settings()
    log_level = logging.DEBUG if settings.debug else logging.INFO

    # Create formatter
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Console handler, added once even if setup runs again
    console_handler = next((h for h in root_logger.handlers if h.get_name() == HANDLER_NAME), None)
    if console_handler is None:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.set_name(HANDLER_NAME)
        root_logger.addHandler(console_handler)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)

    # Quiet down noisy libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    return root_logger
