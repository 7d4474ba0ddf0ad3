# tests/conftest.py
import os

import pytest

from dialer.config_models import DialerSettings, InstallRequest
from dialer.planner import InstallPlanner


@pytest.fixture(autouse=True)
def clean_dialer_env(monkeypatch):
    """Keep DIALER_* variables from the developer's shell out of the tests."""
    for key in list(os.environ):
        if key.startswith("DIALER_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def settings():
    return DialerSettings()


@pytest.fixture
def planner(settings):
    return InstallPlanner(settings)


@pytest.fixture
def ods_request():
    return InstallRequest(
        operating_system="Windows",
        product="ODS",
        ensure="installed",
        version="5.2.1",
    )


@pytest.fixture
def ccs_request():
    return InstallRequest(
        operating_system="Windows",
        product="CCS",
        ensure="installed",
        version="5.2.1",
        ccs_server_name="SQL01\\DIALER",
    )
