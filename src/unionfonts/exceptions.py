"""Exception hierarchy for union-fonts."""


class UnionFontsError(Exception):
    """Base exception for all recoverable union-fonts errors."""

    pass


class BackendError(UnionFontsError):
    """Errors related to native toolkit backends."""

    pass


class BackendUnavailableError(BackendError):
    """A backend was requested whose toolkit cannot be imported."""

    def __init__(self, backend: str, reason: str) -> None:
        self.backend = backend
        self.reason = reason
        super().__init__(f"Font backend '{backend}' is not available: {reason}")


class FatalPreconditionError(BaseException):
    """A programmer error in static font configuration.

    Raised for out-of-range character variants, stylistic sets and numeric
    weights. Derives from BaseException so that ``except Exception`` blocks
    do not catch it; it is meant to stop the program, not to be handled.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
