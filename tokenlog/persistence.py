"""Writing finished logs to disk.

A log is saved once, when the session ends, to a file named after the
time of the save. Failures are logged and reported to the caller as
None; nothing is raised back into the UI.
"""

from __future__ import annotations

import errno
import logging
import os
import tempfile
from datetime import datetime
from typing import Optional

from .constants import LoggerConstants
from .model import Document

logger = logging.getLogger(__name__)


def log_filename(now: Optional[datetime] = None) -> str:
    """Return the file name for a log saved at ``now``.

    For 2024-03-05 14:07:09 returns log-20240305-140709.txt

    Args:
        now: Time of the save. Defaults to the current local time.

    Returns:
        Bare file name, without directory.
    """
    if now is None:
        now = datetime.now()
    return now.strftime(LoggerConstants.LOG_FILENAME_FORMAT)


def ensure_log_dir(log_dir: str) -> bool:
    """Create the log directory if it does not exist.

    Returns:
        True if the directory exists afterwards.
    """
    try:
        os.makedirs(log_dir, exist_ok=True)
        return True
    except OSError as e:
        logger.warning(f"Could not create log directory {log_dir}: {e}")
        return False


def save_log(content: str, log_dir: str, now: Optional[datetime] = None) -> Optional[str]:
    """Write content to a timestamped log file atomically.

    Args:
        content: Plain text to save.
        log_dir: Directory for log files; created when absent.
        now: Time used for the file name.

    Returns:
        Path of the written file, or None if the save failed.
    """
    if not ensure_log_dir(log_dir):
        return None

    path = os.path.join(log_dir, log_filename(now))
    temp_filename = None
    try:
        # Write to temp file first, then rename for atomicity
        with tempfile.NamedTemporaryFile(
            mode='w',
            encoding='utf-8',
            dir=log_dir,
            suffix=LoggerConstants.ATOMIC_SAVE_SUFFIX,
            delete=False
        ) as temp_file:
            temp_filename = temp_file.name
            temp_file.write(content)
            temp_file.flush()
            os.fsync(temp_file.fileno())

        os.replace(temp_filename, path)
        logger.info(f"Saved log to {path}")
        return path

    except OSError as e:
        if e.errno == errno.ENOSPC:
            logger.warning(f"No space left on device saving {path}")
        else:
            logger.warning(f"Could not save log to {path}: {e}")
        if temp_filename is not None:
            try:
                os.remove(temp_filename)
            except OSError:
                pass
        return None


def save_document(document: Document, log_dir: str, now: Optional[datetime] = None) -> Optional[str]:
    """Flatten a document and save it with save_log."""
    return save_log(document.to_plain_text(), log_dir, now=now)
