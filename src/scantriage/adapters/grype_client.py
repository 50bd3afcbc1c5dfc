"""Grype adapter: load scan reports and normalize their matches."""

import json
import logging
import shutil
import subprocess
from pathlib import Path

from scantriage.domain.models import Match, NormalizedReport, Package, Vulnerability

logger = logging.getLogger(__name__)


class GrypeError(Exception):
    """Base exception for Grype-related errors."""

    pass


class GrypeNotFoundError(GrypeError):
    """Raised when Grype CLI is not found in PATH."""

    pass


def scan(target: str, timeout: int = 300) -> dict:
    """
    Run Grype against a target and return the JSON report as dict.

    Args:
        target: Anything Grype accepts as a source (image, dir:..., sbom:...)
        timeout: Seconds before the scan is abandoned

    Returns:
        Parsed Grype JSON document

    Raises:
        GrypeNotFoundError: If Grype CLI is not available
        GrypeError: For other Grype-related errors
    """
    grype_path = shutil.which("grype")
    if not grype_path:
        raise GrypeNotFoundError(
            "Grype CLI not found. Install from https://github.com/anchore/grype"
        )

    logger.info("Running grype against %s", target)
    try:
        result = subprocess.run(
            [grype_path, target, "-o", "json"],
            capture_output=True,
            text=True,
            timeout=timeout,
            check=True,
        )
    except subprocess.TimeoutExpired:
        raise GrypeError(f"Grype command timed out after {timeout} seconds")
    except subprocess.CalledProcessError as e:
        error_msg = e.stderr or e.stdout or "Unknown error"
        raise GrypeError(f"Grype command failed: {error_msg}")
    except FileNotFoundError:
        raise GrypeNotFoundError(
            "Grype CLI not found. Install from https://github.com/anchore/grype"
        )

    try:
        return json.loads(result.stdout)
    except json.JSONDecodeError as e:
        raise GrypeError(f"Failed to parse Grype JSON output: {e}")


def load_report(report_path: str | Path) -> NormalizedReport:
    """
    Read a Grype JSON report from disk and normalize it.

    Raises:
        GrypeError: If the file is missing or is not a Grype JSON document
    """
    path = Path(report_path)
    if not path.exists():
        raise GrypeError(f"Report file does not exist: {report_path}")

    if not path.is_file():
        raise GrypeError(f"Report path is not a file: {report_path}")

    try:
        with path.open(encoding="utf-8") as f:
            document = json.load(f)
    except json.JSONDecodeError as e:
        raise GrypeError(f"Unable to parse Grype JSON data: {e}")
    except UnicodeDecodeError as e:
        raise GrypeError(f"Unable to read report {report_path}: {e}")
    except OSError as e:
        raise GrypeError(f"Unable to read report {report_path}: {e}")

    report = parse_report(document)
    logger.info("Loaded %d matches from %s", len(report.matches), path)
    return report


def parse_report(document: dict) -> NormalizedReport:
    """Normalize a decoded Grype JSON document."""
    if not isinstance(document, dict):
        raise GrypeError("Grype report must be a JSON object")

    matches = document.get("matches", []) or []
    distro = document.get("distro", {}) or {}

    try:
        return NormalizedReport(
            matches=tuple(_normalize_match(m) for m in matches),
            distro=distro.get("name", "") or "",
        )
    except (AttributeError, TypeError) as e:
        raise GrypeError(f"Grype report has an unexpected shape: {e}")


def _normalize_match(match: dict) -> Match:
    artifact = match.get("artifact", {}) or {}
    vulnerability = match.get("vulnerability", {}) or {}

    return Match(
        package=Package(
            name=artifact.get("name", "") or "",
            version=artifact.get("version", "") or "",
            type=artifact.get("type", "") or "",
            origin_name=_origin_package_name(artifact),
            locations=_package_locations(artifact),
        ),
        vulnerability=Vulnerability(
            id=vulnerability.get("id", "") or "",
            severity=vulnerability.get("severity", "") or "",
            url=vulnerability.get("dataSource", "") or "",
            description=vulnerability.get("description", "") or "",
        ),
    )


def _origin_package_name(artifact: dict) -> str:
    upstreams = artifact.get("upstreams", []) or []
    if upstreams:
        return upstreams[0].get("name", "") or ""
    return ""


def _package_locations(artifact: dict) -> tuple[str, ...]:
    locations = artifact.get("locations", []) or []
    return tuple(loc.get("path", "") or "" for loc in locations)
