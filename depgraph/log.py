"""
Logging setup shared by the CLI and the API server.
"""

import logging


def setup_logging(name: str, level: str = "INFO") -> logging.Logger:
    """
    Configure process-wide logging.

    basicConfig is a no-op once the root logger has handlers, so the level
    is also set on the named logger.

    Args:
        name: Name of the returned logger.
        level: Log level string (e.g. 'INFO', 'DEBUG').

    Returns:
        Configured logger instance.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s  %(name)-30s  %(levelname)-7s  %(message)s",
    )
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return logger
