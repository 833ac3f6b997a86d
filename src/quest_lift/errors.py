"""Error types raised by quest-lift services and repositories."""


class QuestLiftError(Exception):
    """Base class for all quest-lift errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(QuestLiftError):
    """Invalid input: missing profile fields, empty catalog, malformed days."""


class NotFoundError(QuestLiftError):
    """A referenced plan, day, reward or exercise does not exist."""


class ConflictError(QuestLiftError):
    """The operation collides with existing state.

    Raised for duplicate same-day completions, concurrent stats writes,
    plan limits and active-plan collisions. Callers may re-fetch and retry
    or choose a different action.
    """


class StateError(QuestLiftError):
    """The operation is not allowed in the current state (e.g. equipping an
    unowned reward)."""


class PersistenceError(QuestLiftError):
    """Transient storage failure. The transaction was rolled back."""
