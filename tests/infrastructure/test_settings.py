"""Tests for infrastructure settings."""

from unittest.mock import MagicMock

import pytest

from src.domain.models import Granularity
from src.infrastructure import settings as settings_module
from src.infrastructure.settings import ProformaSettings


@pytest.fixture
def fake_logger(monkeypatch) -> MagicMock:
    logger = MagicMock()
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: logger)
    for name in ("PROFORMA_GRANULARITY", "PROFORMA_PRORATION", "PROFORMA_YEAR"):
        monkeypatch.delenv(name, raising=False)
    return logger


def test_from_env_defaults(fake_logger) -> None:
    """Missing variables should yield the defaults."""
    settings = ProformaSettings.from_env()

    assert settings == ProformaSettings(
        granularity=Granularity.MONTH,
        proration="fractional",
        year=None,
    )
    fake_logger.warning.assert_not_called()


def test_from_env_reads_values(monkeypatch, fake_logger) -> None:
    """Valid variables should be parsed."""
    monkeypatch.setenv("PROFORMA_GRANULARITY", "Week")
    monkeypatch.setenv("PROFORMA_PRORATION", "BINARY")
    monkeypatch.setenv("PROFORMA_YEAR", " 2027 ")

    settings = ProformaSettings.from_env()

    assert settings.granularity is Granularity.WEEK
    assert settings.proration == "binary"
    assert settings.year == 2027


def test_from_env_falls_back_on_invalid_values(monkeypatch, fake_logger) -> None:
    """Invalid variables should be logged and replaced by defaults."""
    monkeypatch.setenv("PROFORMA_GRANULARITY", "quarter")
    monkeypatch.setenv("PROFORMA_PRORATION", "hourly")
    monkeypatch.setenv("PROFORMA_YEAR", "next")

    settings = ProformaSettings.from_env()

    assert settings == ProformaSettings()
    assert fake_logger.warning.call_count == 3


def test_from_env_rejects_out_of_range_year(monkeypatch, fake_logger) -> None:
    """Years the calendar cannot represent fall back to the current year."""
    monkeypatch.setenv("PROFORMA_YEAR", "0")

    assert ProformaSettings.from_env().year is None
    fake_logger.warning.assert_called_once()
