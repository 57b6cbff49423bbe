"""Chat Format - structured rendering of assistant chat replies."""

from loguru import logger

from chat_format.formatting.parser import format_reply, parse

__version__ = "0.1.0"

# Silent as a library; the CLI turns logging on via configure_logging()
logger.disable("chat_format")

__all__ = ["__version__", "format_reply", "parse"]
