"""tests/scantriage/conftest.py

Common fixtures for the entire test suite.
"""

import json
from pathlib import Path

import pytest

from scantriage.app.table import TableModel
from scantriage.domain.match_store import MatchStore
from scantriage.domain.models import Match, Package, Vulnerability


def make_match(name: str, vuln_id: str, **package_fields) -> Match:
    """Build a match with sensible defaults for the fields a test does not care about."""
    return Match(
        package=Package(
            name=name,
            version=package_fields.pop("version", "1.0.0"),
            type=package_fields.pop("type", "python"),
            **package_fields,
        ),
        vulnerability=Vulnerability(
            id=vuln_id,
            severity="High",
            url=f"https://example.test/{vuln_id}",
            description=f"Description of {vuln_id}",
        ),
    )


def make_table(store: MatchStore, window_size: int) -> TableModel:
    """Table sized so that exactly window_size body rows are shown."""
    return TableModel.new(store).set_height(window_size + 1)


@pytest.fixture
def abc_store() -> MatchStore:
    """Three matches, already in sorted order."""
    return MatchStore.from_matches(
        [
            make_match("pkg-c", "CVE-3"),
            make_match("pkg-a", "CVE-1"),
            make_match("pkg-b", "CVE-2"),
        ]
    )


@pytest.fixture
def big_store() -> MatchStore:
    """Twenty matches named pkg-00 .. pkg-19."""
    return MatchStore.from_matches(
        make_match(f"pkg-{i:02d}", f"CVE-2024-{1000 + i}") for i in range(20)
    )


@pytest.fixture
def grype_document() -> dict:
    """A trimmed-down Grype JSON report."""
    return {
        "matches": [
            {
                "vulnerability": {
                    "id": "CVE-2023-0002",
                    "dataSource": "https://nvd.nist.gov/vuln/detail/CVE-2023-0002",
                    "severity": "Critical",
                    "description": "Heap overflow in zlib",
                },
                "artifact": {
                    "name": "zlib",
                    "version": "1.2.11",
                    "type": "apk",
                    "locations": [
                        {"path": "/lib/apk/db/installed", "layerID": "sha256:aaa"},
                    ],
                    "upstreams": [{"name": "zlib-src"}],
                },
            },
            {
                "vulnerability": {
                    "id": "GHSA-xxxx-yyyy-zzzz",
                    "dataSource": "https://github.com/advisories/GHSA-xxxx-yyyy-zzzz",
                    "severity": "Medium",
                },
                "artifact": {
                    "name": "requests",
                    "version": "2.25.0",
                    "type": "python",
                    "locations": [
                        {"path": "/app/requirements.txt"},
                        {"path": "/app/poetry.lock"},
                    ],
                },
            },
        ],
        "distro": {"name": "alpine", "version": "3.18"},
    }


@pytest.fixture
def grype_report_file(tmp_path: Path, grype_document: dict) -> Path:
    path = tmp_path / "report.json"
    path.write_text(json.dumps(grype_document), encoding="utf-8")
    return path


@pytest.fixture
def match_factory():
    return make_match


@pytest.fixture
def sized_table():
    return make_table
