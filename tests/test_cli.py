"""Tests for the harlog CLI."""

import tempfile
from pathlib import Path

import orjson
import pytest
from typer.testing import CliRunner

from harlog import __version__
from harlog.cli import app
from harlog.config import Settings

runner = CliRunner()

LOG = {
    "version": "1.2",
    "creator": {"name": "X", "version": "1"},
    "entries": [
        {
            "startedDateTime": "2009-04-16T12:07:23.596Z",
            "request": {"method": "GET", "url": "https://example.com/", "httpVersion": "HTTP/1.1"},
            "response": {
                "status": 200,
                "statusText": "OK",
                "httpVersion": "HTTP/1.1",
                "content": {"size": 0, "mimeType": "text/plain"},
                "redirectURL": "",
            },
            "cache": {"beforeRequest": None},
            "time": 99,
            "timings": {
                "blocked": -1,
                "dns": -1,
                "connect": -1,
                "send": 1,
                "wait": 2,
                "receive": 3,
                "ssl": -1,
            },
        }
    ],
}


def write_har(tmpdir: str, document: object, name: str = "in.har") -> Path:
    path = Path(tmpdir) / name
    path.write_bytes(orjson.dumps(document))
    return path


class TestCLI:
    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_validate_ok(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = write_har(tmpdir, {"log": LOG})
            result = runner.invoke(app, ["validate", str(path)])
            assert result.exit_code == 0
            assert "1 entries" in result.output

    def test_validate_invalid(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = write_har(tmpdir, {"log": {"version": "1.2", "entries": []}})
            result = runner.invoke(app, ["validate", str(path)])
            assert result.exit_code == 1

    def test_validate_missing_file(self) -> None:
        result = runner.invoke(app, ["validate", "no-such-file.har"])
        assert result.exit_code == 1

    def test_normalize_to_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = write_har(tmpdir, LOG)
            out = Path(tmpdir) / "out.har"
            result = runner.invoke(app, ["normalize", str(path), "-o", str(out), "--no-emit-time"])
            assert result.exit_code == 0
            data = orjson.loads(out.read_bytes())
            entry = data["log"]["entries"][0]
            assert "time" not in entry
            assert entry["cache"] == {"beforeRequest": None}
            assert entry["request"]["cookies"] == []
            assert entry["request"]["headersSize"] == -1

    def test_normalize_emit_time(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = write_har(tmpdir, LOG)
            out = Path(tmpdir) / "out.har"
            result = runner.invoke(app, ["normalize", str(path), "-o", str(out), "--emit-time"])
            assert result.exit_code == 0
            assert orjson.loads(out.read_bytes())["log"]["entries"][0]["time"] == 6

    def test_normalize_to_stdout(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = write_har(tmpdir, LOG)
            result = runner.invoke(app, ["normalize", str(path)])
            assert result.exit_code == 0
            assert orjson.loads(result.stdout)["log"]["creator"]["name"] == "X"

    def test_summary(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = write_har(tmpdir, {"log": LOG})
            result = runner.invoke(app, ["summary", str(path)])
            assert result.exit_code == 0
            assert "GET" in result.output
            assert "200" in result.output

    def test_normalize_uses_settings_loaded_once(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls = []

        def load() -> Settings:
            calls.append(1)
            return Settings(indent=False, emit_entry_time=True)

        monkeypatch.setattr(Settings, "load", load)
        with tempfile.TemporaryDirectory() as tmpdir:
            path = write_har(tmpdir, LOG)
            result = runner.invoke(app, ["normalize", str(path)])
            assert result.exit_code == 0
            assert orjson.loads(result.stdout)["log"]["entries"][0]["time"] == 6
        assert len(calls) == 1
