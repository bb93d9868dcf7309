"""
Domain-specific errors for the users bounded context.

The taxonomy is closed: every failure reported by a repository or a
use case is either a NotFoundError or an InternalError.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class DomainError(Exception):
    """Base error for all users domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class NotFoundError(DomainError):
    """Raised when the requested entity does not exist."""

    def __init__(self, entity: str, key: object) -> None:
        super().__init__(f"{entity} not found: {key}")
        self.entity = entity
        self.key = key


class InternalError(DomainError):
    """Raised for any other failure, including constraint violations.

    Duplicate usernames and storage connectivity problems both land
    here and are indistinguishable to the HTTP caller.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(f"Internal error: {reason}")
        self.reason = reason
