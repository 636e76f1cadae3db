import io
import tarfile
from collections.abc import Callable, Sequence

import pytest

ArchiveFactory = Callable[..., bytes]


def _make_archive(files: dict[str, str], directories: Sequence[str] = (), compress: bool = False) -> bytes:
    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w:gz" if compress else "w") as tar:
        for name in directories:
            info = tarfile.TarInfo(name)
            info.type = tarfile.DIRTYPE
            tar.addfile(info)
        for name, content in files.items():
            data = content.encode("utf-8")
            info = tarfile.TarInfo(name)
            info.size = len(data)
            tar.addfile(info, io.BytesIO(data))
    return buffer.getvalue()


@pytest.fixture
def make_archive() -> ArchiveFactory:
    """Build an in-memory tar archive from ``{member_name: content}``."""
    return _make_archive
