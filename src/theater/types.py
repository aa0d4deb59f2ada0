"""Immutable data contracts shared by pricing, statement and loading layers.

Every value here is built once before statement generation starts and is
never mutated afterwards, so a single catalog may be shared across threads.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from .errors import UnknownGenreError, UnknownPlayIdError


class Genre(Enum):
    """Play category selecting which pricing formula applies."""

    TRAGEDY = "tragedy"
    COMEDY = "comedy"

    @classmethod
    def from_label(cls, label: str) -> "Genre":
        """Resolve a textual genre label such as ``"comedy"``.

        Raises:
            UnknownGenreError: if the label names no known genre.
        """
        for member in cls:
            if member.value == label:
                return member
        raise UnknownGenreError(label)


@dataclass(frozen=True)
class Play:
    """A catalog entry. ``genre`` holds the raw label when it names no :class:`Genre`."""

    name: str
    genre: Genre | str


@dataclass(frozen=True)
class Performance:
    """One purchased performance of a play.

    Invariant:
    - ``audience`` is a positive integer.
    """

    play_id: str
    audience: int

    def __post_init__(self) -> None:
        if isinstance(self.audience, bool) or not isinstance(self.audience, int):
            actual = type(self.audience).__name__
            raise ValueError(f"Performance audience must be an int, got {actual}")
        if self.audience <= 0:
            raise ValueError(f"Performance audience must be positive, got {self.audience}")


@dataclass(frozen=True)
class Invoice:
    """A customer plus the performances they bought, in print order."""

    customer: str
    performances: tuple[Performance, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # frozen: normalise any iterable into an immutable tuple
        object.__setattr__(self, "performances", tuple(self.performances))


class PlayCatalog(Mapping[str, Play]):
    """Read-only mapping from play identifier to :class:`Play`."""

    __slots__ = ("_plays",)

    def __init__(self, plays: Mapping[str, Play] | Iterable[tuple[str, Play]] = ()):
        self._plays = MappingProxyType(dict(plays))

    def lookup(self, play_id: str) -> Play:
        """Return the play registered under ``play_id``.

        Raises:
            UnknownPlayIdError: if the identifier is absent.
        """
        try:
            return self._plays[play_id]
        except KeyError:
            raise UnknownPlayIdError(play_id) from None

    def __getitem__(self, play_id: str) -> Play:
        return self._plays[play_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._plays)

    def __len__(self) -> int:
        return len(self._plays)

    def __repr__(self) -> str:
        return f"PlayCatalog({dict(self._plays)!r})"
