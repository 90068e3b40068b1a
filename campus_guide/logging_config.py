"""
Logging setup for the command-line entry point.

Library modules only create loggers with logging.getLogger(__name__);
handlers are installed here, once, by the CLI.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "WARNING"):
    """Attach a single stream handler to the root logger."""
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_campus_guide", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._campus_guide = True
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))
