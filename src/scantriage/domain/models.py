"""Domain models for vulnerability scan matches."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Package:
    """A package found by the scanner."""

    name: str
    version: str = ""
    type: str = ""
    origin_name: str = ""
    locations: tuple[str, ...] = ()


@dataclass(frozen=True)
class Vulnerability:
    """A vulnerability record attached to a match."""

    id: str
    severity: str = ""
    url: str = ""
    description: str = ""


@dataclass(frozen=True)
class Match:
    """One (package, vulnerability) pairing from a scan."""

    package: Package
    vulnerability: Vulnerability

    @property
    def sort_key(self) -> tuple[str, str]:
        return (self.package.name, self.vulnerability.id)

    def matches_expression(self, expr: str) -> bool:
        """
        Check whether expr is a substring of the package name or vulnerability ID.

        The comparison is case-sensitive. An empty expression matches nothing.
        """
        if not expr:
            return False
        return expr in self.package.name or expr in self.vulnerability.id


@dataclass(frozen=True)
class NormalizedReport:
    """Scanner output reduced to the fields the browser needs."""

    matches: tuple[Match, ...] = field(default_factory=tuple)
    distro: str = ""
