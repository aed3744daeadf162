class TechHubError(Exception):
    """Base class for errors raised by the service layer."""


class ConflictError(TechHubError):
    """A uniqueness rule was violated (duplicate slug, already-subscribed email)."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
