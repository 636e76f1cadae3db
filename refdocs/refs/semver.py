# pyright: reportUnknownMemberType=false, reportUnknownVariableType=false, reportUnknownParameterType=false, reportUnknownArgumentType=false
"""Thin typed wrapper around semantic_version for ref resolution.

Provides strict tag parsing, tolerant coercion for head grouping and npm range
matching that always includes prereleases.

Note: semantic_version has no type stubs, so Pyright unknown-type checks are
disabled at file level for this wrapper module.
"""

import operator
import re
from collections.abc import Iterable

from semantic_version import NpmSpec, Version  # type: ignore[import-untyped]
from semantic_version.base import AllOf, Always, AnyOf, Clause, Never, Range  # type: ignore[import-untyped]

# First MAJOR[.MINOR[.PATCH]] group not glued to other digits
_COERCE_RE = re.compile(r"(?:^|\D)(\d{1,16})(?:\.(\d{1,16}))?(?:\.(\d{1,16}))?(?:$|\D)")

_RANGE_OPERATORS = r"<=|>=|<|>|=|\^|~"
_RANGE_OPERATOR_SPACING_RE = re.compile(rf"({_RANGE_OPERATORS})\s+")
_OPERATOR_V_RE = re.compile(rf"^({_RANGE_OPERATORS})v")
_HYPHEN_RANGE_RE = re.compile(r"(\S+)\s+-\s+(\S+)")
_PARTIAL_PART = r"\d+|[xX*]"
_PARTIAL_BLOCK_RE = re.compile(
    rf"(?P<op>~|=)?v?(?P<major>{_PARTIAL_PART})(?:\.(?P<minor>{_PARTIAL_PART}))?(?:\.(?P<patch>{_PARTIAL_PART}))?"
)
_WILDCARDS = ("x", "X", "*")

_RANGE_COMPARATORS = {
    Range.OP_EQ: operator.eq,
    Range.OP_NEQ: operator.ne,
    Range.OP_GT: operator.gt,
    Range.OP_GTE: operator.ge,
    Range.OP_LT: operator.lt,
    Range.OP_LTE: operator.le,
}


class SemVerError(Exception):
    """Raised for semver parse failures."""


def parse_version(version_str: str) -> Version:
    """Parse a version string into a semantic_version.Version.

    Strips a leading 'v' prefix if present (common in git tags like v1.2.3).

    Args:
        version_str: The version string to parse (e.g. "1.2.3" or "v1.2.3").

    Returns:
        The parsed Version object.

    Raises:
        SemVerError: If the version string is not valid semver.
    """
    cleaned = version_str.strip().removeprefix("v")
    try:
        return Version(cleaned)
    except ValueError as exc:
        msg = f"Invalid semver version: {version_str!r}"
        raise SemVerError(msg) from exc


def parse_version_tag(tag: str) -> Version | None:
    """Parse a tag name into a Version, returning None if not a valid semver tag.

    Args:
        tag: The tag name, e.g. "v1.2.3" or "1.2.3-beta.1".

    Returns:
        The parsed Version, or None if the tag is not valid semver.
    """
    try:
        return parse_version(tag)
    except SemVerError:
        return None


def is_valid_version(tag: str) -> bool:
    return parse_version_tag(tag) is not None


def coerce_version(text: str) -> Version | None:
    """Extract the first recognizable version from arbitrary text.

    Unlike :func:`parse_version` this never requires the whole string to be a
    version: ``v0.0.1-beta.6`` coerces to ``0.0.1`` and ``release-7`` to
    ``7.0.0``. Prerelease and build metadata are dropped.

    Args:
        text: The text to scan.

    Returns:
        The coerced Version, or None if no digits were found.
    """
    match = _COERCE_RE.search(text)
    if match is None:
        return None
    major, minor, patch = match.groups()
    return Version(major=int(major), minor=int(minor or 0), patch=int(patch or 0))


def _strip_operator_v(block: str) -> str:
    return _OPERATOR_V_RE.sub(r"\1", block)


def _widen_partial_block(block: str) -> str:
    """Rewrite a partial, x-range or partial tilde block with a ``-0`` lower bound.

    ``6`` becomes ``>=6.0.0-0 <7.0.0`` and ``~6.1`` becomes ``>=6.1.0-0 <6.2.0``,
    so prereleases of the lower bound fall inside the family. Full versions,
    full tildes and operator blocks are returned unchanged.
    """
    match = _PARTIAL_BLOCK_RE.fullmatch(block)
    if match is None:
        return _strip_operator_v(block)
    major, minor, patch = match.group("major", "minor", "patch")
    if not _is_wildcard(patch):
        return _strip_operator_v(block)
    if _is_wildcard(major):
        return ">=0.0.0-0"
    if _is_wildcard(minor):
        return f">={major}.0.0-0 <{int(major) + 1}.0.0"
    return f">={major}.{minor}.0-0 <{major}.{int(minor) + 1}.0"


def _is_wildcard(part: str | None) -> bool:
    return part is None or part in _WILDCARDS


def _normalize_range_group(group: str) -> str:
    compact = _RANGE_OPERATOR_SPACING_RE.sub(r"\1", group.replace(",", " ")).strip()
    hyphen = _HYPHEN_RANGE_RE.fullmatch(compact)
    if hyphen is not None:
        low, high = hyphen.groups()
        return f"{low.removeprefix('v')} - {high.removeprefix('v')}"
    return " ".join(_widen_partial_block(block) for block in compact.split())


def parse_range(range_str: str) -> NpmSpec:
    """Parse an npm range into a semantic_version.NpmSpec.

    Supports the npm grammar handled by NpmSpec (``^``, ``~``, comparators,
    ``x``/``X``/``*`` wildcards, hyphen ranges and ``||`` unions) plus an
    optional leading 'v' after an operator (``^v1.2.0``), spaces between an
    operator and its version, and comma conjunctions.

    Bare partials, x-ranges and partial tildes start at the ``-0`` prerelease
    of their lower bound, so ``6`` covers ``6.0.0-beta.1``. Use
    :func:`version_satisfies` to match against the result.

    Args:
        range_str: The range string to parse.

    Returns:
        The parsed NpmSpec object.

    Raises:
        SemVerError: If the range string is not valid.
    """
    if not range_str.strip():
        msg = f"Invalid semver range: {range_str!r}"
        raise SemVerError(msg)

    normalized = " || ".join(_normalize_range_group(group) for group in range_str.split("||"))
    try:
        return NpmSpec(normalized)
    except ValueError as exc:
        msg = f"Invalid semver range: {range_str!r}"
        raise SemVerError(msg) from exc


def _range_matches(version: Version, version_range: Range) -> bool:
    target = version_range.target
    # <7.0.0 stops before 7.0.0-0
    if (
        version_range.operator == Range.OP_LT
        and version.prerelease
        and not target.prerelease
        and version.truncate() == target.truncate()
    ):
        return False
    compare = _RANGE_COMPARATORS[version_range.operator]
    result: bool = compare(version, target)
    return result


def _clause_matches(version: Version, clause: Clause) -> bool:
    if isinstance(clause, AnyOf):
        return any(_clause_matches(version, sub_clause) for sub_clause in clause.clauses)
    if isinstance(clause, AllOf):
        return all(_clause_matches(version, sub_clause) for sub_clause in clause.clauses)
    if isinstance(clause, Range):
        return _range_matches(version, clause)
    if isinstance(clause, Always):
        return True
    if isinstance(clause, Never):
        return False
    result: bool = clause.match(version)
    return result


def version_satisfies(version: Version, version_range: NpmSpec) -> bool:
    """Check whether a version satisfies a range, prereleases included.

    Each bound is compared by plain semver precedence, so a prerelease takes
    part in the match like any other version: ``6.2.0-beta.1`` and
    ``6.0.0-beta.1`` satisfy ``6``. An exclusive upper bound also excludes its
    own prereleases, so ``7.0.0-alpha`` does not satisfy ``6``.

    Args:
        version: The version to check.
        version_range: The range to check against.

    Returns:
        True if the version satisfies the range.
    """
    return _clause_matches(version, version_range.clause)


def sort_versions_descending(version_tags: Iterable[tuple[Version, str]]) -> list[tuple[Version, str]]:
    """Sort ``(Version, tag_name)`` pairs newest-first.

    Versions with equal precedence (``v1.0.0`` and ``1.0.0``) are ordered by
    tag name so the result never depends on input order.
    """
    return sorted(version_tags, key=lambda entry: (entry[0], entry[1]), reverse=True)
