"""cron-parser-cli - expand cron expressions into the values they match."""

from loguru import logger

__version__ = "0.1.0"

logger.disable("cron_parser")
