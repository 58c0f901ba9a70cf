import logging
import sys


def setup_logging(log_level=logging.WARNING, stream=None):
    """Install a single console handler on the root logger.

    Called by the command-line entry point only; library modules just
    create their own module-level loggers.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove all handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s: %(message)s"
    ))
    root_logger.addHandler(console_handler)
