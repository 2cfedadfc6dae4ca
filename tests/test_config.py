"""
Tests for Settings.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from gpxroute.config import DEFAULT_PACE_MIN_PER_KM, Settings


class TestSettings:
    """Tests for environment-driven settings."""

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        for name in [
            "GPXROUTE_LOG_LEVEL",
            "GPXROUTE_OUTPUT_DIR",
            "GPXROUTE_JSON_INDENT",
            "GPXROUTE_PACE_MIN_PER_KM",
        ]:
            monkeypatch.delenv(name, raising=False)

    def test_defaults(self):
        s = Settings(_env_file=None)

        assert s.log_level == "WARNING"
        assert s.output_dir == Path(".")
        assert s.json_indent == 2
        assert s.pace_min_per_km == DEFAULT_PACE_MIN_PER_KM == 6.0

    def test_env_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv("GPXROUTE_PACE_MIN_PER_KM", "5.5")
        monkeypatch.setenv("GPXROUTE_OUTPUT_DIR", str(tmp_path))
        monkeypatch.setenv("gpxroute_log_level", "debug")

        s = Settings(_env_file=None)

        assert s.pace_min_per_km == 5.5
        assert s.output_dir == tmp_path
        assert s.log_level == "DEBUG"

    def test_unknown_log_level(self, monkeypatch):
        monkeypatch.setenv("GPXROUTE_LOG_LEVEL", "chatty")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    @pytest.mark.parametrize("pace", ["0", "-3"])
    def test_pace_must_be_positive(self, monkeypatch, pace):
        monkeypatch.setenv("GPXROUTE_PACE_MIN_PER_KM", pace)
        with pytest.raises(ValidationError):
            Settings(_env_file=None)
