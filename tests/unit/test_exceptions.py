import pytest

from refdocs.refs.exceptions import (
    InvalidRefFormatError,
    NoLatestTagError,
    NoRefsAvailableError,
    NoValidVersionsError,
    RefdocsError,
    RefResolutionError,
    TarballExtractError,
    TarballFetchError,
)


class TestExceptions:
    """Tests for the refdocs.refs.exceptions hierarchy."""

    def test_base_exception_message(self):
        exc = RefdocsError("something went wrong")
        assert exc.message == "something went wrong"
        assert str(exc) == "something went wrong"

    def test_base_exception_default_message(self):
        exc = RefdocsError()
        assert exc.message == ""

    @pytest.mark.parametrize(
        ("child_cls", "parent_cls"),
        [
            (InvalidRefFormatError, RefdocsError),
            (RefResolutionError, RefdocsError),
            (NoRefsAvailableError, RefResolutionError),
            (NoValidVersionsError, RefResolutionError),
            (NoLatestTagError, RefResolutionError),
            (TarballFetchError, RefdocsError),
            (TarballExtractError, RefdocsError),
        ],
    )
    def test_subclass_hierarchy(self, child_cls: type, parent_cls: type):
        """Each concrete exception is a subclass of its expected parent."""
        exc = child_cls("test")
        assert isinstance(exc, parent_cls)

    def test_invalid_ref_format_is_not_a_resolution_error(self):
        assert not issubclass(InvalidRefFormatError, RefResolutionError)

    def test_catching_parent_catches_child(self):
        msg = "no tags"
        with pytest.raises(RefResolutionError):
            raise NoLatestTagError(msg)
