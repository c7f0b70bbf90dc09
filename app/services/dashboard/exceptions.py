"""Exceptions for the dashboard controller."""


class DashboardValidationError(ValueError):
    """User input rejected before any network call (empty username, unknown repository)."""

    def __init__(self, title: str, message: str):
        self.title = title
        self.message = message
        super().__init__(message)
