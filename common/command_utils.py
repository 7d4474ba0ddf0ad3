# common/command_utils.py
# -*- coding: utf-8 -*-
"""
Utilities for logging and for building the Windows command lines that the
plan's exec steps carry.
"""

import logging
from typing import List, Optional

module_logger = logging.getLogger(__name__)

POWERSHELL_EXE = "powershell.exe"


def log_dialer(
    message: str,
    level: str = "info",
    current_logger: Optional[logging.Logger] = None,
    exc_info: bool = False,
) -> None:
    """
    Logs a message at the named level.

    Args:
        message (str): The log message to be recorded.
        level (str): "debug", "info", "success", "warning", "error" or "critical".
            "success" and unknown levels are logged at info.
        current_logger (Optional[logging.Logger]): A logger instance to use. If not
            provided, the module-level logger is used.
        exc_info (bool): Include exception details in the log record.
    """
    effective_logger = current_logger if current_logger else module_logger

    if level == "warning":
        effective_logger.warning(message, exc_info=exc_info)
    elif level == "error":
        effective_logger.error(message, exc_info=exc_info)
    elif level == "critical":
        effective_logger.critical(message, exc_info=exc_info)
    elif level == "debug":
        effective_logger.debug(message, exc_info=exc_info)
    else:
        effective_logger.info(message, exc_info=exc_info)


def quote_powershell(value: str) -> str:
    """Quotes a value as a single-quoted PowerShell string literal."""
    return "'" + value.replace("'", "''") + "'"


def powershell_command(script: str) -> str:
    """
    Wraps a PowerShell script in a non-interactive powershell.exe invocation.

    Double quotes inside the script are escaped for the outer command line.
    """
    escaped = script.replace('"', '\\"')
    return (
        f'{POWERSHELL_EXE} -NoProfile -NonInteractive '
        f'-ExecutionPolicy Bypass -Command "{escaped}"'
    )


def join_windows_path(*parts: str) -> str:
    """Joins Windows path segments with single backslashes."""
    cleaned: List[str] = []
    for index, part in enumerate(parts):
        if not part:
            continue
        if index == 0:
            cleaned.append(part.rstrip("\\/"))
        else:
            cleaned.append(part.strip("\\/"))
    return "\\".join(cleaned)
