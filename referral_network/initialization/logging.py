"""
Initialization - Logging Module.

Module: logging.py
Configures loguru logger for the referral network.
Sets up log rotation and retention policies.
"""

from loguru import logger

from referral_network.config.settings import Settings, settings


def setup_logging(config: Settings | None = None) -> int:
    """
    Configure logger with file rotation.

    Args:
        config: Settings to read the sink options from (global by default)

    Returns:
        Handler id of the file sink
    """
    config = config or settings
    handler_id = logger.add(
        config.log_file,
        rotation=config.log_rotation,
        retention=config.log_retention,
        level=config.log_level,
        encoding="utf-8",
    )

    logger.info(
        "Logging configured",
        extra={"log_file": config.log_file, "level": config.log_level},
    )
    return handler_id
