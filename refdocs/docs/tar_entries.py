"""Collect docs files from a repository archive."""

import io
import posixpath
import re
import tarfile

from pydantic import BaseModel, ConfigDict

from refdocs.refs.exceptions import TarballExtractError

_ARCHIVE_ROOT_RE = re.compile(r"^[^/]+/?")


class DocFile(BaseModel):
    """A file extracted from an archive, with its path relative to the archive root."""

    model_config = ConfigDict(frozen=True)

    path: str
    content: str


def strip_archive_root(name: str) -> str:
    """Replace the top-level directory of an archive member name with ``/``.

    GitHub archives wrap everything in ``<repo>-<ref>/``, so
    ``react-router-main/docs/index.md`` becomes ``/docs/index.md``.
    """
    return _ARCHIVE_ROOT_RE.sub("/", name, count=1)


def find_matching_entries(archive: bytes, directory: str) -> list[DocFile]:
    """Read the regular files under ``directory`` from a tar archive.

    Args:
        archive: The archive bytes, plain or gzip-compressed.
        directory: Root-relative directory to keep, e.g. "/docs".

    Returns:
        The matching files in archive order, decoded as UTF-8.

    Raises:
        TarballExtractError: If the archive cannot be read.
    """
    entries: dict[str, DocFile] = {}
    try:
        with tarfile.open(fileobj=io.BytesIO(archive), mode="r:*") as tar:
            for member in tar:
                path = strip_archive_root(member.name)
                if not member.isfile() or not posixpath.dirname(path).startswith(directory):
                    continue
                extracted = tar.extractfile(member)
                if extracted is None:
                    continue
                content = extracted.read().decode("utf-8", errors="replace")
                entries[path] = DocFile(path=path, content=content)
    except tarfile.TarError as exc:
        msg = f"Failed to read archive entries under '{directory}': {exc}"
        raise TarballExtractError(msg) from exc

    return list(entries.values())
