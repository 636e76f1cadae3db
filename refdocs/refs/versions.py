# pyright: reportUnknownMemberType=false, reportUnknownVariableType=false, reportUnknownArgumentType=false
"""Version index for the docs site.

Groups released tags under display heads (``v6``, ``v0.4``, ``v0.0.3``) and
flags the newest one as latest.
"""

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict

from refdocs.refs.exceptions import InvalidRefFormatError, NoValidVersionsError
from refdocs.refs.git_ref import GitRef
from refdocs.refs.semver import coerce_version, parse_version_tag, sort_versions_descending


class VersionHead(BaseModel):
    """One released tag as shown in the version selector."""

    model_config = ConfigDict(frozen=True)

    head: str
    """Grouping label, like v2 or v0.4"""

    version: str
    """The tag name, like v2.1.1"""

    is_latest: bool = False
    """True only for the newest tag, whose docs are served from the latest branch"""


def head_for_name(name: str) -> str:
    """Compute the head of a bare branch or tag name.

    Names that do not coerce to a version (``main``) are their own head.

    Args:
        name: A bare name, e.g. "v1.2.3" or "main"

    Returns:
        The head label
    """
    version = coerce_version(name)
    if version is None:
        return name
    if version.major > 0:
        return f"v{version.major}"
    if version.minor > 0:
        return f"v0.{version.minor}"
    return f"v0.0.{version.patch}"


def version_head(ref: str) -> str:
    """Compute the head of a full branch or tag ref.

    Args:
        ref: A ref like "refs/tags/v0.4.2" or "refs/heads/main"

    Returns:
        The head label, e.g. "v0.4", or the bare branch name

    Raises:
        InvalidRefFormatError: If the ref is neither a branch nor a tag ref
    """
    return head_for_name(GitRef.parse(ref).name)


def get_versions(refs: Iterable[str]) -> list[VersionHead]:
    """Build the version index from a ref list.

    Only tag refs whose name is a valid semver version are kept; branches and
    unprefixed refs are skipped. Entries are ordered newest-first and the
    first one is flagged as latest.

    Args:
        refs: Full refs, e.g. ["refs/heads/main", "refs/tags/v1.0.0"]

    Returns:
        One VersionHead per valid tag

    Raises:
        NoValidVersionsError: If no ref is a valid semver tag
    """
    version_tags = []
    for ref in refs:
        try:
            git_ref = GitRef.parse(ref)
        except InvalidRefFormatError:
            continue
        if not git_ref.is_tag:
            continue
        version = parse_version_tag(git_ref.name)
        if version is not None:
            version_tags.append((version, git_ref.name))

    if not version_tags:
        msg = "No valid semver tags found in refs"
        raise NoValidVersionsError(msg)

    return [
        VersionHead(head=head_for_name(tag), version=tag, is_latest=index == 0)
        for index, (_version, tag) in enumerate(sort_versions_descending(version_tags))
    ]
