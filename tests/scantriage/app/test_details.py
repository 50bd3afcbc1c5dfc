from __future__ import annotations

from scantriage.app.details import DetailsModel


def test_renders_all_fields_in_order(match_factory):
    match = match_factory(
        "openssl",
        "CVE-2024-0001",
        version="3.0.1",
        type="deb",
        origin_name="openssl-src",
        locations=("/var/lib/dpkg/status",),
    )
    lines = [line.plain.rstrip() for line in DetailsModel(height=12, width=80).render(match)]

    assert lines[:10] == [
        "Package: openssl",
        "Version: 3.0.1",
        "Type: deb",
        "Origin: openssl-src",
        "Location: /var/lib/dpkg/status",
        "",
        "Vulnerability: CVE-2024-0001",
        "Severity: High",
        "URL: https://example.test/CVE-2024-0001",
        "Description: Description of CVE-2024-0001",
    ]
    assert lines[10:] == ["", ""]


def test_multiple_locations_get_one_line_each(match_factory):
    match = match_factory("pkg", "CVE-1", locations=("/a", "/b", "/c"))
    lines = [line.plain.rstrip() for line in DetailsModel(height=20, width=40).render(match)]
    assert lines[4] == "Locations: /a"
    assert lines[5].strip() == "/b"
    assert lines[6].strip() == "/c"
    assert lines[7] == ""


def test_no_location_renders_empty_field(match_factory):
    lines = [line.plain.rstrip() for line in DetailsModel(height=8, width=40).render(match_factory("pkg", "CVE-1"))]
    assert lines[4] == "Location:"


def test_output_is_clipped_and_padded_to_size(match_factory):
    details = DetailsModel(height=3, width=12)
    lines = details.render(match_factory("a-very-long-package-name", "CVE-1"))
    assert len(lines) == 3
    assert all(line.cell_len == 12 for line in lines)
    assert lines[0].plain == "Package: a-v"


def test_long_description_wraps_to_width(match_factory):
    match = match_factory("pkg", "CVE-1")
    words = " ".join(["overflow"] * 20)
    match = match.__class__(
        package=match.package,
        vulnerability=match.vulnerability.__class__(id="CVE-1", description=words),
    )
    lines = DetailsModel(height=30, width=30).render(match)
    text = [line.plain.rstrip() for line in lines]
    start = next(i for i, line in enumerate(text) if line.startswith("Description:"))
    body = [line for line in text[start:] if line]
    assert len(body) > 1
    assert " ".join(body).replace("Description: ", "") == words


def test_no_match_renders_blank_lines():
    lines = DetailsModel(height=4, width=10).render(None)
    assert [line.plain for line in lines] == [" " * 10] * 4


def test_zero_height_renders_nothing(match_factory):
    assert DetailsModel(height=0, width=80).render(match_factory("pkg", "CVE-1")) == []


def test_set_size_returns_new_model():
    details = DetailsModel()
    resized = details.set_height(5).set_width(20)
    assert (details.height, details.width) == (0, 0)
    assert (resized.height, resized.width) == (5, 20)
