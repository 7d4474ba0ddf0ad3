# -*- coding: utf-8 -*-
from unittest.mock import Mock

import pytest

from common.command_utils import (
    join_windows_path,
    log_dialer,
    powershell_command,
    quote_powershell,
)


@pytest.mark.parametrize(
    "level, method",
    [
        ("debug", "debug"),
        ("info", "info"),
        ("success", "info"),
        ("warning", "warning"),
        ("error", "error"),
        ("critical", "critical"),
    ],
)
def test_log_dialer_dispatches_by_level(level, method):
    mock_logger = Mock()
    log_dialer("message", level, mock_logger)
    getattr(mock_logger, method).assert_called_once_with("message", exc_info=False)


def test_log_dialer_passes_exc_info():
    mock_logger = Mock()
    log_dialer("boom", "error", mock_logger, exc_info=True)
    mock_logger.error.assert_called_once_with("boom", exc_info=True)


def test_quote_powershell_doubles_single_quotes():
    assert quote_powershell("C:\\it's.iso") == "'C:\\it''s.iso'"


def test_powershell_command_escapes_double_quotes():
    command = powershell_command('Write-Output "hi"')
    assert command.startswith("powershell.exe -NoProfile -NonInteractive -ExecutionPolicy Bypass -Command ")
    assert command.endswith('"Write-Output \\"hi\\""')


@pytest.mark.parametrize(
    "parts, expected",
    [
        (("D:", "sources\\sxs"), "D:\\sources\\sxs"),
        (("D:\\", "\\prereqs\\sqlncli.msi"), "D:\\prereqs\\sqlncli.msi"),
        (("D:", "", "ODS"), "D:\\ODS"),
    ],
)
def test_join_windows_path(parts, expected):
    assert join_windows_path(*parts) == expected
