# -*- coding: utf-8 -*-
"""
setup_checklist.logger

Standard logger for the checklist widget and its host app.
"""

from datetime import datetime
from typing import Optional

from loguru import logger as _logger
from setup_checklist.config import get_logs_dir


def define_log_level(logfile_level: str = "DEBUG", name: Optional[str] = None):
    """
    Configure Loguru logger.
    logfile_level: file log threshold
    name: optional prefix for log filename
    """
    logs_dir = get_logs_dir()
    logs_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d%H%M%S")
    log_name = f"{name}_{timestamp}" if name else timestamp
    log_path = logs_dir / f"{log_name}.log"

    # Remove all sinks; the TUI owns the terminal, so no console sink
    _logger.remove()

    _logger.add(
        log_path,
        level=logfile_level,
        backtrace=True,
        diagnose=True,
        enqueue=True,
        rotation="50 MB",
        retention="14 days",
    )

    return _logger


# Create global logger with defaults
logger = define_log_level()
