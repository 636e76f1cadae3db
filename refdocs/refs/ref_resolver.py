# pyright: reportUnknownMemberType=false, reportUnknownVariableType=false, reportUnknownArgumentType=false
"""Map a version token from a docs URL onto a concrete ref.

The token is an exact branch or tag name (``main``, ``v6.0.1``) or a semver
range (``v6``, ``^6.1``, ``*``). Ranges matched by the newest tag are routed to
the latest branch so they serve the actively-developed docs.
"""

import logging
from collections.abc import Sequence

from refdocs.config.settings import DocsSettings
from refdocs.refs.exceptions import NoLatestTagError, NoRefsAvailableError
from refdocs.refs.git_ref import GitRef
from refdocs.refs.semver import (
    SemVerError,
    is_valid_version,
    parse_range,
    parse_version_tag,
    sort_versions_descending,
    version_satisfies,
)

logger = logging.getLogger(__name__)


def _find_exact(query: str, git_refs: Sequence[GitRef]) -> GitRef | None:
    matches = [git_ref for git_ref in git_refs if git_ref.name == query]
    if not matches:
        return None
    if is_valid_version(query):
        for git_ref in matches:
            if git_ref.is_tag:
                return git_ref
    return matches[0]


def resolve_ref(query: str, refs: Sequence[str], latest_branch_ref: str) -> str | None:
    """Resolve a version token against the known refs.

    Args:
        query: The token from the request, e.g. "v6", "v6.0.1" or "main".
        refs: Full refs, e.g. ["refs/heads/main", "refs/tags/v6.0.1"].
        latest_branch_ref: The ref returned when the query matches the newest tag.

    Returns:
        The full ref to fetch docs from, ``latest_branch_ref``, or None when
        nothing matches.

    Raises:
        NoRefsAvailableError: If ``refs`` is empty.
        InvalidRefFormatError: If a ref is neither a branch nor a tag ref.
        NoLatestTagError: If no tag is a valid semver version.
    """
    if not refs:
        msg = f"No refs available to resolve '{query}'"
        raise NoRefsAvailableError(msg)

    git_refs = [GitRef.parse(ref) for ref in refs]

    exact = _find_exact(query, git_refs)
    if exact is not None:
        logger.debug("Query '%s' is an exact %s name", query, exact.kind)
        return exact.full_ref

    version_tags = []
    for git_ref in git_refs:
        if not git_ref.is_tag:
            continue
        version = parse_version_tag(git_ref.name)
        if version is not None:
            version_tags.append((version, git_ref.name))

    if not version_tags:
        msg = f"No latest tag found to resolve '{query}'"
        raise NoLatestTagError(msg)

    try:
        version_range = parse_range(query)
    except SemVerError:
        logger.debug("Query '%s' is neither a known ref nor a semver range", query)
        return None

    ordered = sort_versions_descending(version_tags)
    latest_version, latest_tag = ordered[0]
    if version_satisfies(latest_version, version_range):
        logger.debug("Query '%s' matches latest tag '%s', aliasing to '%s'", query, latest_tag, latest_branch_ref)
        return latest_branch_ref

    for version, tag in ordered:
        if version_satisfies(version, version_range):
            logger.debug("Query '%s' resolved to tag '%s'", query, tag)
            return GitRef.tag(tag).full_ref

    logger.debug("No tag satisfies '%s'", query)
    return None


def resolve_ref_with_settings(query: str, refs: Sequence[str], settings: DocsSettings) -> str | None:
    """Resolve a version token, aliasing latest ranges to the configured branch.

    Args:
        query: The token from the request.
        refs: Full refs known for ``settings.repo``.
        settings: The docs settings carrying the latest branch.

    Returns:
        The full ref to fetch docs from, or None when nothing matches.
    """
    return resolve_ref(query, refs, settings.latest_branch_ref)
