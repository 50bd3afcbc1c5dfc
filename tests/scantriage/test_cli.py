from __future__ import annotations

import pytest

from scantriage import cli


class FakeApp:
    """Stands in for TriageApp so no terminal is needed."""

    instances: list["FakeApp"] = []

    def __init__(self, store, show_details=False):
        self.store = store
        self.show_details = show_details
        self.ran = False
        FakeApp.instances.append(self)

    def run(self):
        self.ran = True


@pytest.fixture
def fake_app(monkeypatch):
    FakeApp.instances = []
    monkeypatch.setattr(cli, "TriageApp", FakeApp)
    return FakeApp


def test_runs_app_with_sorted_store(fake_app, grype_report_file):
    assert cli.main([str(grype_report_file), "--details"]) == 0

    (app,) = fake_app.instances
    assert app.ran
    assert app.show_details
    assert [m.package.name for m in app.store] == ["requests", "zlib"]


def test_missing_report_exits_with_error(fake_app, tmp_path, capsys):
    assert cli.main([str(tmp_path / "missing.json")]) == 1
    assert "Error: Report file does not exist" in capsys.readouterr().err
    assert fake_app.instances == []


def test_scan_option_uses_grype(fake_app, monkeypatch, grype_document):
    monkeypatch.setattr(cli, "scan", lambda target: grype_document)
    assert cli.main(["--scan", "alpine:3.18"]) == 0
    assert len(fake_app.instances[0].store) == 2


def test_requires_report_or_scan(fake_app):
    with pytest.raises(SystemExit) as excinfo:
        cli.main([])
    assert excinfo.value.code == 2


def test_rejects_report_and_scan_together(fake_app, grype_report_file):
    with pytest.raises(SystemExit):
        cli.main([str(grype_report_file), "--scan", "alpine"])


def test_undecodable_report_exits_with_error(fake_app, tmp_path, capsys):
    path = tmp_path / "report.json"
    path.write_bytes(b'{"matches": [], "x": "\xff\xfe"}')
    assert cli.main([str(path)]) == 1
    assert "Error: Unable to read report" in capsys.readouterr().err
    assert fake_app.instances == []


def test_malformed_match_exits_with_error(fake_app, tmp_path, capsys):
    path = tmp_path / "report.json"
    path.write_text('{"matches": ["oops"]}', encoding="utf-8")
    assert cli.main([str(path)]) == 1
    assert "Error: Grype report has an unexpected shape" in capsys.readouterr().err
