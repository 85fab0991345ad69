class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class IncompleteMarkingError(ValidationError):
    """Raised when a month does not have enough marked days to be super-saved."""

    def __init__(self, *, marked_days: int, required_days: int):
        self.marked_days = int(marked_days)
        self.required_days = int(required_days)
        super().__init__(
            f"You need to mark at least {self.required_days} days. "
            f"Currently marked: {self.marked_days} days."
        )

    @property
    def shortfall(self) -> int:
        return max(0, self.required_days - self.marked_days)


class AuthenticationError(DomainError):
    """Raised when the calling actor cannot be identified."""


class AuthorizationError(DomainError):
    """Raised when an actor lacks permission for an action."""


class PersistenceError(DomainError):
    """Raised when a write could not be committed; nothing was persisted."""
