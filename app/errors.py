"""Election errors - typed failures returned to the caller."""


class ElectionError(Exception):
    """Base class for all election operation failures."""

    default_message = "Election operation failed"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(ElectionError):
    """Election or contestant not found."""

    default_message = "Resource not found"


class AlreadyExistsError(ElectionError):
    """Election key already taken."""

    default_message = "Election already exists"


class InvalidStateError(ElectionError):
    """Lifecycle transition not allowed in the current state."""

    default_message = "Invalid election state"


class AlreadyVotedError(ElectionError):
    """Caller already voted in this election."""

    default_message = "Already voted in this election"


class ForbiddenError(ElectionError):
    """Caller is not the election creator."""

    default_message = "Only the election creator may do this"


class ValidationError(ElectionError):
    """Invalid input."""

    default_message = "Validation error"


class HostUnavailableError(ElectionError):
    """Caller identity or clock could not be obtained from the host."""

    default_message = "Host unavailable"


class IntegrityError(Exception):
    """Stored data violates a referential invariant."""
