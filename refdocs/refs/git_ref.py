from enum import StrEnum, unique

from pydantic import BaseModel, ConfigDict

from refdocs.refs.exceptions import InvalidRefFormatError

BRANCH_PREFIX = "refs/heads/"
TAG_PREFIX = "refs/tags/"


@unique
class RefKind(StrEnum):
    BRANCH = "branch"
    TAG = "tag"

    @property
    def prefix(self) -> str:
        return BRANCH_PREFIX if self is RefKind.BRANCH else TAG_PREFIX


class GitRef(BaseModel):
    """A branch or tag ref, classified once from its raw string.

    Branch ref: "refs/heads/main" -> kind=BRANCH, name="main"
    Tag ref: "refs/tags/v1.0.0" -> kind=TAG, name="v1.0.0"
    """

    model_config = ConfigDict(frozen=True)

    kind: RefKind
    name: str

    @property
    def is_branch(self) -> bool:
        return self.kind is RefKind.BRANCH

    @property
    def is_tag(self) -> bool:
        return self.kind is RefKind.TAG

    @property
    def full_ref(self) -> str:
        return f"{self.kind.prefix}{self.name}"

    @classmethod
    def branch(cls, name: str) -> "GitRef":
        return cls(kind=RefKind.BRANCH, name=name)

    @classmethod
    def tag(cls, name: str) -> "GitRef":
        return cls(kind=RefKind.TAG, name=name)

    @classmethod
    def parse(cls, raw: str) -> "GitRef":
        """Classify a raw ref by its anchored prefix.

        Args:
            raw: The raw ref string, e.g. "refs/heads/main"

        Returns:
            A GitRef with its kind and bare name

        Raises:
            InvalidRefFormatError: If the ref has neither prefix or an empty name
        """
        for kind in RefKind:
            if raw.startswith(kind.prefix):
                name = raw[len(kind.prefix) :]
                if not name:
                    msg = f"Ref '{raw}' has an empty {kind} name"
                    raise InvalidRefFormatError(msg)
                return cls(kind=kind, name=name)

        msg = f"Ref '{raw}' must start with '{BRANCH_PREFIX}' or '{TAG_PREFIX}'"
        raise InvalidRefFormatError(msg)


def branch_or_tag_name(ref: str) -> str:
    """Return the bare name of a branch or tag ref.

    Raises:
        InvalidRefFormatError: If the ref is neither a branch nor a tag ref
    """
    return GitRef.parse(ref).name


def branch_name(ref: str) -> str:
    """Return the bare name of a branch ref.

    Raises:
        InvalidRefFormatError: If the ref is not a branch ref
    """
    git_ref = GitRef.parse(ref)
    if not git_ref.is_branch:
        msg = f"Ref '{ref}' is not a branch ref"
        raise InvalidRefFormatError(msg)
    return git_ref.name


def tag_name(ref: str) -> str:
    """Return the bare name of a tag ref.

    Raises:
        InvalidRefFormatError: If the ref is not a tag ref
    """
    git_ref = GitRef.parse(ref)
    if not git_ref.is_tag:
        msg = f"Ref '{ref}' is not a tag ref"
        raise InvalidRefFormatError(msg)
    return git_ref.name
