"""Rewrite links found in repository Markdown onto docs site routes.

Docs live in the repository as ``.md`` files that link to each other by
relative path, which works when browsing the repository. On the site, pages
have no ``.md`` extension and ``index.md`` pages are served at their directory
path, so the Markdown renderer calls :func:`resolve_href` for every link and
uses the returned href instead.
"""

import re
from urllib.parse import SplitResult, urljoin, urlsplit

from refdocs._utils.string_utils import add_trailing_slash, remove_leading_slash, remove_trailing_slash

_ABSOLUTE_URL_RE = re.compile(r"^((?:[a-z]+:)?//|mailto:|tel:)", re.IGNORECASE)
_MARKDOWN_EXTENSION_RE = re.compile(r"((/index)?\.md$|(/index)?\.md(#))")
_INDEX_PATH_RE = re.compile(r"(/index(\.md)?$|/index(\.md)?(#))")


def is_relative_url(href: str) -> bool:
    return _ABSOLUTE_URL_RE.match(href) is None


def clean_markdown_path(path: str) -> str:
    """Strip a trailing ``index.md`` or ``.md`` extension, keeping any ``#fragment``."""
    return _MARKDOWN_EXTENSION_RE.sub(lambda match: match.group(4) or "", path, count=1)


def is_index_path(path: str | None) -> bool:
    if not path:
        return False
    return _INDEX_PATH_RE.search(remove_leading_slash(remove_trailing_slash(path))) is not None


def resolve_url(from_url: str, to: str) -> SplitResult:
    """Resolve ``to`` against the absolute URL ``from_url``.

    Raises:
        ValueError: If ``from_url`` is not an absolute URL
    """
    base = urlsplit(from_url)
    if not base.scheme or not base.netloc:
        msg = "Failed to resolve URLs. The `from` argument is an invalid URL."
        raise ValueError(msg)
    resolved = urlsplit(urljoin(from_url, to))
    if not resolved.path:
        resolved = resolved._replace(path="/")
    return resolved


def get_current_url(base_url: str, link_origin_path: str | None = None) -> SplitResult:
    """Return the absolute URL of the page a link appears on.

    Args:
        base_url: The site URL, e.g. "https://example.com/"
        link_origin_path: The site path of the page, e.g. "/docs/guide.md"

    Raises:
        ValueError: If no ``link_origin_path`` is given
    """
    if not link_origin_path:
        msg = "Resolving the current URL depends on a source path when called from the server."
        raise ValueError(msg)

    base = urlsplit(base_url)
    to_path = clean_markdown_path(remove_leading_slash(remove_trailing_slash(link_origin_path)))
    return resolve_url(f"{base.scheme}://{base.netloc}", to_path)


def resolve_href(
    source_href: str,
    base_url: str,
    link_origin_path: str | None,
    preserve_links: bool = False,
) -> str:
    """Rewrite a Markdown link href into a site path.

    Absolute URLs, ``#`` and ``?`` links are returned untouched, as is every
    link when ``preserve_links`` is set.

    Args:
        source_href: The href as written in the Markdown source
        base_url: The site URL
        link_origin_path: The site path of the page containing the link
        preserve_links: Return every href unchanged

    Returns:
        The rewritten href: path, query and fragment of the resolved URL
    """
    if preserve_links or not is_relative_url(source_href) or source_href.startswith(("#", "?")):
        return source_href

    current_url = get_current_url(base_url, link_origin_path)
    href = clean_markdown_path(source_href)

    # Non-index pages have no trailing slash, so their links are one level up
    from_url = add_trailing_slash(f"{current_url.scheme}://{current_url.netloc}{current_url.path}")
    to = href if href.startswith("/") or is_index_path(link_origin_path) else f"../{href}"

    resolved = resolve_url(from_url, to)
    query = f"?{resolved.query}" if resolved.query else ""
    fragment = f"#{resolved.fragment}" if resolved.fragment else ""
    return f"{resolved.path}{query}{fragment}"
