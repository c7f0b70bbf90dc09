"""View state for the dashboard session.

DashboardState is an immutable snapshot. Only DashboardController builds
new snapshots, through its transition methods.
"""

from dataclasses import dataclass
from enum import Enum

from app.services.github.types import CommitActivityWeek, Repository


class SessionStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"
    LOADED = "loaded"


@dataclass(frozen=True)
class Notification:
    """A user-visible toast."""

    title: str
    description: str
    variant: str = "default"  # "default" or "destructive"

    @classmethod
    def error(cls, description: str, title: str = "Error") -> "Notification":
        return cls(title=title, description=description, variant="destructive")


@dataclass(frozen=True)
class DashboardState:
    """Snapshot of everything the dashboard displays."""

    username: str = ""
    repositories: tuple[Repository, ...] = ()
    selected_repository: str | None = None
    # Always belongs to selected_repository
    commit_activity: tuple[CommitActivityWeek, ...] = ()
    status: SessionStatus = SessionStatus.IDLE
    error_message: str | None = None
    notification: Notification | None = None
    # Id of the latest search or selection; older results are dropped
    request_id: int = 0

    @property
    def is_loading(self) -> bool:
        return self.status == SessionStatus.LOADING

    @property
    def repository_names(self) -> list[str]:
        return [repo.name for repo in self.repositories]
