"""Schedule data records."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Match:
    """One fixture as returned by a single fetch.

    ``date`` is the UTC kickoff in YYYY-MM-DD HH:MM:SS form. ``status`` is
    the provider's tag, passed through verbatim.
    """

    home_team: str
    away_team: str
    date: str
    status: str
    home_score: int = 0
    away_score: int = 0
    home_badge: str = ""
    away_badge: str = ""
    competition: str = ""

    @property
    def day(self) -> str:
        """Calendar-day prefix of the kickoff timestamp."""
        return self.date[:10]


@dataclass(frozen=True)
class DateTab:
    """A selectable day in the schedule view."""

    label: str
    date_string: str
