import os
import sys
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from loguru import logger

load_dotenv()

CONTEXT_FIELDS = [
    ("storage", "Storage"),
    ("file_id", "File"),
]


def _build_context(record) -> str:
    """Build context zone from extra fields bound via logger.bind(storage=..., file_id=...).

    Returns string like: ``Storage=uploads/cache • File=a/b/c.jpg``
    or empty string when nothing is bound.
    """
    extra = record["extra"]
    return " • ".join(f"{label}={extra[key]}" for key, label in CONTEXT_FIELDS if extra.get(key) is not None)


def _make_format(colored: bool):
    """Build a record formatter; the colored variant is used for the console sink."""
    if colored:
        head = "<green>{time:YY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{extra[module]}</cyan>"
        message = "<level>{message}</level>"
    else:
        head = "{time:YY-MM-DD HH:mm:ss} | {level: <8} | {extra[module]}"
        message = "{message}"

    def _format(record) -> str:
        ctx = _build_context(record)
        ctx_zone = f" | {ctx}" if ctx else ""
        return head + ctx_zone + " | " + message + "\n{exception}"

    return _format


def setup_logger(log_level: str | None = None, log_file: str | None = None) -> None:
    """Send storage logs to stderr and, when LOG_FILE is set, to a rotated file."""
    level = log_level or os.getenv("LOG_LEVEL", "INFO")
    log_file = log_file or os.getenv("LOG_FILE")

    logger.remove()
    logger.configure(extra={"module": "filesystem_storage", "storage": None, "file_id": None})
    logger.add(sys.stderr, format=_make_format(colored=True), level=level, colorize=True)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            format=_make_format(colored=False),
            level=level,
            rotation="10 MB",
            retention="7 days",
            compression="zip",
        )


def get_logger(module_name: str | None = None):
    """Get configured logger, optionally bound to a module name."""
    if module_name:
        return logger.bind(module=module_name)
    return logger


def format_details(**kwargs: Any) -> str:
    """Format key=value pairs joined with • for the details zone.

    Example: "Moved file | source=/tmp/x.jpg • destination=/srv/uploads/store/x.jpg"
    """
    return " • ".join(f"{k}={v}" for k, v in kwargs.items())


setup_logger()
