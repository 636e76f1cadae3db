class RefdocsError(Exception):
    """Base exception for all refdocs errors."""

    def __init__(self, message: str = "") -> None:
        self.message = message
        super().__init__(message)


class InvalidRefFormatError(RefdocsError):
    """Raised when a ref lacks the ``refs/heads/`` or ``refs/tags/`` prefix expected by the caller."""


class RefResolutionError(RefdocsError):
    pass


class NoRefsAvailableError(RefResolutionError):
    """Raised when a query is resolved against an empty ref list."""


class NoValidVersionsError(RefResolutionError):
    """Raised when no tag in the ref list is a valid semver version."""


class NoLatestTagError(RefResolutionError):
    """Raised when no latest tag can be selected for range aliasing."""


class TarballFetchError(RefdocsError):
    """Raised when a repository archive cannot be downloaded."""


class TarballExtractError(RefdocsError):
    """Raised when a downloaded archive cannot be read."""
