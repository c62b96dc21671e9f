class DomainError(Exception):
    """Base class for all domain-level errors."""

    pass


class StoreUnavailable(DomainError):
    """The verification code store could not be reached or answered badly."""

    pass


class InvalidStaticCode(DomainError):
    """Submitted code does not match the code pinned for the phone number."""

    pass


class StaticCodeUnavailable(DomainError):
    """Verification could not be decided because the store failed."""

    pass
