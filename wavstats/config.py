import logging
import os
import sys
from dataclasses import dataclass
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Callable, Final, Mapping

from dotenv import load_dotenv
from rich.logging import RichHandler

# Load environment variables from the project root .env (if present)
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

_WORKERS_ENV: Final = "WAVSTATS_WORKERS"


def _parse_positive_int(raw: str | None) -> int | None:
    if raw is None:
        return None
    try:
        value = int(raw)
    except ValueError:
        return None
    if value <= 0:
        return None
    return value


@dataclass(slots=True)
class ScanConfig:
    """Runtime options for a directory scan."""

    # None lets ThreadPoolExecutor pick its default pool size
    workers: int | None = None

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "ScanConfig":
        source = os.environ if env is None else env
        return cls(workers=_parse_positive_int(source.get(_WORKERS_ENV)))


# --- Logging Configuration ---
# runtime modules should use logging.getLogger(__name__) and env LOG_LEVEL
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_logging_configured = False


def _parse_level(value: str | None, default: int = logging.WARNING) -> int:
    if not value:
        return default
    name = value.strip().upper()
    level = getattr(logging, name, default)
    return level if isinstance(level, int) else default


def _build_console_handler(level: int, isatty: Callable[[], bool] | None = None) -> logging.Handler:
    """Return a console handler. Use Rich in TTY, plain stream otherwise."""
    tty_check = isatty or sys.stderr.isatty
    if tty_check():
        handler: logging.Handler = RichHandler(
            show_time=False,
            show_path=False,
            rich_tracebacks=True,
            show_level=True,
            log_time_format="[%X]",
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler(stream=sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.setLevel(level)
    return handler


def _build_file_handler(log_dir: Path, level: int, backup_count_env: str | None) -> logging.Handler:
    log_dir.mkdir(parents=True, exist_ok=True)
    try:
        backup_count = max(0, int((backup_count_env or "5").strip()))
    except (TypeError, ValueError):
        backup_count = 5
        logging.warning(
            "Invalid APP_LOG_BACKUP_COUNT=%r. Defaulting to 5.",
            backup_count_env,
        )

    file_handler = TimedRotatingFileHandler(
        filename=log_dir / "wavstats.log",
        when="midnight",
        backupCount=backup_count,
        encoding="utf-8",
        utc=True,
    )
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    file_handler.setLevel(level)
    return file_handler


def _setup_logging() -> None:
    """Configure the root logger once with console and optional file handler."""
    global _logging_configured
    if _logging_configured:
        return

    # WARNING by default: stdout and stderr carry the report itself
    level = _parse_level(os.getenv("LOG_LEVEL", "WARNING"))

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(_build_console_handler(level))

    # Optional file logging only when APP_LOG_DIR is set
    app_log_dir = os.getenv("APP_LOG_DIR")
    if app_log_dir:
        try:
            root.addHandler(_build_file_handler(Path(app_log_dir), level, os.getenv("APP_LOG_BACKUP_COUNT")))
        except (PermissionError, OSError) as e:
            logging.warning("Failed to configure file logging to '%s'. Error: %s", app_log_dir, e)

    # Forward warnings module messages to logging
    logging.captureWarnings(True)

    _logging_configured = True


def set_verbose(verbose: bool) -> None:
    """Switch the root logger and its handlers to DEBUG when verbose."""
    if not verbose:
        return
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for handler in root.handlers:
        handler.setLevel(logging.DEBUG)


# --- End Logging Configuration ---
_setup_logging()
