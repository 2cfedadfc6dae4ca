"""
Tests for the gpxroute command.
"""

import json

import pytest
from click.testing import CliRunner

from gpxroute.cli import main


MORNING_RUN_GPX = """<?xml version="1.0" encoding="UTF-8"?>
<gpx version="1.1" creator="tests" xmlns="http://www.topografix.com/GPX/1/1">
  <trk>
    <name>Morning Run</name>
    <trkseg>
      <trkpt lat="0" lon="0"><ele>0</ele></trkpt>
      <trkpt lat="0" lon="1"><ele>100</ele></trkpt>
    </trkseg>
  </trk>
</gpx>
"""


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def gpx_file(tmp_path):
    path = tmp_path / "morning.gpx"
    path.write_text(MORNING_RUN_GPX, encoding="utf-8")
    return path


class TestConvertCommand:
    """End-to-end runs of the command."""

    def test_success(self, runner, gpx_file, tmp_path):
        out = tmp_path / "out"
        result = runner.invoke(main, [str(gpx_file), "--output-dir", str(out)])

        assert result.exit_code == 0, result.output
        assert "Files created:" in result.output
        assert "Distance:       111.19km" in result.output
        assert "Gain/Loss:      +100m / -0m" in result.output
        assert "Estimated time: 667 minutes" in result.output

        stats = json.loads((out / "morning-run-stats.json").read_text(encoding="utf-8"))
        assert stats["totalDistanceKm"] == 111.19
        assert (out / "morning-run-geojson.json").exists()
        assert (out / "morning-run-elevation.json").exists()

    def test_pace_option(self, runner, gpx_file, tmp_path):
        out = tmp_path / "out"
        result = runner.invoke(main, [str(gpx_file), "-o", str(out), "--pace", "5"])

        assert result.exit_code == 0, result.output
        stats = json.loads((out / "morning-run-stats.json").read_text(encoding="utf-8"))
        assert stats["estimatedDurationMinutes"] == 556

    def test_missing_argument_prints_usage(self, runner):
        result = runner.invoke(main, [])

        assert result.exit_code == 1
        assert "Usage:" in result.output

    def test_missing_file(self, runner, tmp_path):
        out = tmp_path / "out"
        result = runner.invoke(main, [str(tmp_path / "nope.gpx"), "-o", str(out)])

        assert result.exit_code == 1
        assert "Error processing GPX file" in result.output
        assert not out.exists()

    def test_invalid_track_writes_nothing(self, runner, tmp_path):
        path = tmp_path / "empty.gpx"
        path.write_text(
            MORNING_RUN_GPX.replace(
                '<trkpt lat="0" lon="1"><ele>100</ele></trkpt>',
                '<trkpt lat="0" lon="1"></trkpt>',
            ),
            encoding="utf-8",
        )
        out = tmp_path / "out"
        result = runner.invoke(main, [str(path), "-o", str(out)])

        assert result.exit_code == 1
        assert "has no elevation" in result.output
        assert not out.exists()

    def test_not_gpx(self, runner, tmp_path):
        path = tmp_path / "notes.gpx"
        path.write_text("just some notes", encoding="utf-8")
        result = runner.invoke(main, [str(path), "-o", str(tmp_path / "out")])

        assert result.exit_code == 1
        assert "Invalid GPX file" in result.output

    def test_directory_argument(self, runner, tmp_path):
        out = tmp_path / "out"
        result = runner.invoke(main, [str(tmp_path), "-o", str(out)])

        assert result.exit_code == 1
        assert "Error processing GPX file" in result.output
        assert not out.exists()
