import logging
import logging.config
import re
from pathlib import Path
from typing import Optional

# ANSI escape codes (colours, bold, ...)
ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;]*m")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


class StripAnsiFilter(logging.Filter):
    """Remove ANSI colour codes from a record so log files stay plain text."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        if isinstance(record.msg, str):
            record.msg = ANSI_ESCAPE_RE.sub("", record.msg)
        return True


def attach_strip_ansi_to_file_handlers() -> None:
    """
    Add StripAnsiFilter to every FileHandler of the root logger.

    Call after logging.config.fileConfig(...) so the handlers declared
    in logging.ini already exist.
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers:
        if isinstance(handler, logging.FileHandler):
            handler.addFilter(StripAnsiFilter())


def configure_logging(config_path: Path, level: str = "INFO") -> Optional[Path]:
    """
    Configure logging from an ini file, falling back to basicConfig.

    Returns the config file that was applied, or None for the fallback.
    """
    if config_path.exists():
        logging.config.fileConfig(config_path, disable_existing_loggers=False)
        attach_strip_ansi_to_file_handlers()
        return config_path

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )
    return None
