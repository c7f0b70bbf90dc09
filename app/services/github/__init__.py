"""
GitHub service package.

Re-exports all public types and classes.
Usage: `from app.services.github import GitHubReadOperations, Repository`

Module structure:
- read_operations.py: Read-only API operations
- helpers.py: Rate limit handling and error utilities
- http_client.py: Shared httpx client
- types.py: Data types
- exceptions.py: Custom exceptions
"""

from app.services.github.exceptions import (
    GitHubAPIError,
    GitHubNotFound,
    GitHubRateLimited,
    GitHubTransportError,
)
from app.services.github.helpers import (
    RateLimitInfo,
    format_reset_time,
    handle_error_response,
)
from app.services.github.http_client import close_github_client, get_github_client
from app.services.github.read_operations import GitHubReadOperations
from app.services.github.types import CommitActivityWeek, Repository

__all__ = [
    # Operations
    "GitHubReadOperations",
    # HTTP client lifecycle
    "close_github_client",
    "get_github_client",
    # Utilities
    "format_reset_time",
    "handle_error_response",
    "RateLimitInfo",
    # Exceptions
    "GitHubAPIError",
    "GitHubNotFound",
    "GitHubRateLimited",
    "GitHubTransportError",
    # Types
    "CommitActivityWeek",
    "Repository",
]
