"""Data types for GitHub API responses."""

from dataclasses import dataclass
from typing import Any

DAYS_PER_WEEK = 7


@dataclass(frozen=True)
class Repository:
    """A user's repository, as listed on the dashboard.

    ``description`` and ``primary_language`` are None when GitHub has no
    value, which is distinct from an empty string.
    """

    id: int
    name: str
    description: str | None
    star_count: int
    primary_language: str | None
    web_url: str

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Repository":
        """Build from a /users/{username}/repos entry."""
        return cls(
            id=data["id"],
            name=data["name"],
            description=data.get("description"),
            star_count=data.get("stargazers_count") or 0,
            primary_language=data.get("language"),
            web_url=data["html_url"],
        )


@dataclass(frozen=True)
class CommitActivityWeek:
    """One week of the commit-activity series."""

    total_commits: int
    week_start: int  # Unix timestamp (seconds, UTC) of the start of the week
    daily_counts: tuple[int, ...]  # Sunday..Saturday, always 7 entries

    def __post_init__(self) -> None:
        if len(self.daily_counts) != DAYS_PER_WEEK:
            raise ValueError(
                f"Expected {DAYS_PER_WEEK} daily counts, got {len(self.daily_counts)}"
            )

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "CommitActivityWeek":
        """Build from a /stats/commit_activity entry ({total, week, days})."""
        return cls(
            total_commits=data["total"],
            week_start=data["week"],
            daily_counts=tuple(data["days"]),
        )
