import pytest

from refdocs._utils.string_utils import add_trailing_slash, remove_leading_slash, remove_trailing_slash


class TestStringUtils:
    @pytest.mark.parametrize(("path", "expected"), [("/foo/bar/", "/foo/bar"), ("/foo//", "/foo"), ("/", ""), ("foo", "foo")])
    def test_remove_trailing_slash(self, path: str, expected: str):
        assert remove_trailing_slash(path) == expected

    @pytest.mark.parametrize(("path", "expected"), [("/foo/bar", "foo/bar"), ("//foo", "foo"), ("foo", "foo")])
    def test_remove_leading_slash(self, path: str, expected: str):
        assert remove_leading_slash(path) == expected

    @pytest.mark.parametrize(("path", "expected"), [("/foo/bar", "/foo/bar/"), ("/foo/bar/", "/foo/bar/"), ("", "/")])
    def test_add_trailing_slash(self, path: str, expected: str):
        assert add_trailing_slash(path) == expected
