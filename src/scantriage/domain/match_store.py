"""Immutable, ordered store of scan matches."""

from typing import Iterable, Iterator

from scantriage.domain.models import Match


class MatchStore:
    """Matches sorted once by (package name, vulnerability ID).

    The store never changes after construction, so it is shared by reference
    between the table and the detail pane. An index into the store is the
    only handle other components keep for a match.
    """

    __slots__ = ("_matches",)

    def __init__(self, matches: tuple[Match, ...] = ()):
        self._matches = matches

    @classmethod
    def from_matches(cls, matches: Iterable[Match]) -> "MatchStore":
        """Build a store with a stable sort, so ties keep their input order."""
        return cls(tuple(sorted(matches, key=lambda m: m.sort_key)))

    def __len__(self) -> int:
        return len(self._matches)

    def __getitem__(self, index: int) -> Match:
        return self._matches[index]

    def __iter__(self) -> Iterator[Match]:
        return iter(self._matches)

    def __repr__(self) -> str:
        return f"MatchStore({len(self._matches)} matches)"

    @property
    def is_empty(self) -> bool:
        return not self._matches

    @property
    def last_index(self) -> int:
        """Index of the last match, -1 when empty."""
        return len(self._matches) - 1
