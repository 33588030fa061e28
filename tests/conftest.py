from __future__ import annotations

import logging

import pytest

SAMPLE_TABLE = (
    "AABBCC;Acme Corp\n"
    "001A2B;Cisco Systems, Inc\n"
    "B827EB;Raspberry Pi Foundation\n"
    "DEAD00;\n"
    "AABBCC;Acme Duplicate\n"
)


@pytest.fixture
def table_file(tmp_path):
    """Small reference table in the IEEE_OUI.csv layout."""
    path = tmp_path / "IEEE_OUI.csv"
    path.write_text(SAMPLE_TABLE, encoding="utf-8")
    return path


@pytest.fixture
def home(tmp_path, monkeypatch):
    """Isolated HOME and working directory with no config files."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    work_dir = tmp_path / "work"
    work_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.chdir(work_dir)
    return home_dir


@pytest.fixture
def installed_table(home):
    """Reference table at the default location under HOME."""
    data_dir = home / ".local" / "share" / "oui"
    data_dir.mkdir(parents=True)
    path = data_dir / "IEEE_OUI.csv"
    path.write_text(SAMPLE_TABLE, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers bound to a previous test's captured stderr."""
    yield
    logger = logging.getLogger("oui")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
