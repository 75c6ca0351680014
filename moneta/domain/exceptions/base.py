class DomainException(Exception):
    """Base class for every error raised by the money domain."""

    pass
