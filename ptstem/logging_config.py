"""Logging configuration with console and rotating file handlers"""
import glob
import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .config import Settings, get_settings


def setup_logging(
    log_file: str = "logs/ptstem.log",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    keep_sessions: int = 5,
) -> Path:
    """
    Configure logging with two destinations:
    - Console: Brief logs (INFO by default)
    - File: Detailed logs (DEBUG by default) with rotation

    Rotation policy:
    - New log file per session (timestamp-based naming)
    - Keep last `keep_sessions` log files (older ones removed on setup)
    - Auto-rotate when file reaches 10MB

    Args:
        log_file: Base path to log file
        console_level: Console logging level (INFO = brief)
        file_level: File logging level (DEBUG = verbose)
        keep_sessions: Number of session log files to retain, including the new one

    Returns:
        Path of the session log file
    """
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    # Cleanup old session logs, leaving room for the new one
    log_pattern = str(log_path.parent / f"{log_path.stem}_*.log")
    existing_logs = sorted(glob.glob(log_pattern), reverse=True)  # Newest first
    for old_log in existing_logs[max(keep_sessions - 1, 0):]:
        try:
            Path(old_log).unlink()
        except OSError:
            pass  # Another process may hold or have removed it

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    session_log = log_path.parent / f"{log_path.stem}_{timestamp}.log"

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture everything, filter in handlers
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))

    file_handler = RotatingFileHandler(
        session_log,
        mode='a',
        maxBytes=10*1024*1024,  # 10MB
        backupCount=10,
        encoding='utf-8'
    )
    file_handler.setLevel(file_level)
    file_handler.setFormatter(logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))

    root_logger.addHandler(console_handler)
    root_logger.addHandler(file_handler)

    # NLTK's downloader is chatty on INFO
    logging.getLogger("nltk").setLevel(logging.WARNING)

    logging.info(f"Logging configured: console={logging.getLevelName(console_level)}, file={session_log} ({logging.getLevelName(file_level)})")
    return session_log


def setup_logging_from_settings(settings: Optional[Settings] = None) -> Path:
    """Configure logging from PTSTEM_LOG_FILE / PTSTEM_LOG_LEVEL."""
    settings = settings or get_settings()
    return setup_logging(log_file=settings.log_file, console_level=settings.log_level)
