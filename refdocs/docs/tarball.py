"""Download repository archives from GitHub for a resolved ref."""

import logging

import httpx

from refdocs.docs.tar_entries import DocFile, find_matching_entries
from refdocs.refs.exceptions import TarballFetchError

logger = logging.getLogger(__name__)


def archive_url(repo: str, ref: str) -> str:
    """Build the archive URL for a repository ref.

    Args:
        repo: Repository in ``owner/name`` form, e.g. ``remix-run/react-router``.
        ref: A full ref or bare name, e.g. ``refs/tags/v6.0.1``.

    Returns:
        The HTTPS URL of the ``.tar.gz`` archive.
    """
    return f"https://github.com/{repo}/archive/{ref}.tar.gz"


def _download(client: httpx.Client, repo: str, ref: str) -> bytes | None:
    url = archive_url(repo, ref)
    logger.debug("Fetching archive for %s from %s", repo, url)

    try:
        response = client.get(url, follow_redirects=True)
    except httpx.HTTPError as exc:
        msg = f"Failed to fetch archive for '{repo}' at '{ref}': {exc}"
        raise TarballFetchError(msg) from exc

    if response.status_code == httpx.codes.NOT_FOUND:
        return None

    if response.status_code != httpx.codes.OK:
        logger.error("Error fetching archive for %s@%s (status: %s)", repo, ref, response.status_code)
        logger.error(response.text)
        msg = f"Unexpected status {response.status_code} fetching archive for '{repo}' at '{ref}'"
        raise TarballFetchError(msg)

    return response.content


def fetch_repo_tarball(repo: str, ref: str, client: httpx.Client | None = None, timeout: float = 60) -> bytes | None:
    """Download the tar archive of a repository at a ref.

    Args:
        repo: Repository in ``owner/name`` form.
        ref: The ref to download, as returned by the ref resolver.
        client: HTTP client to use. A short-lived client is created when omitted.
        timeout: Request timeout in seconds for the short-lived client.

    Returns:
        The archive bytes as served (gzip-compressed for GitHub), or None if the repository or ref does not exist.

    Raises:
        TarballFetchError: If the request fails or returns an unexpected status.
    """
    if client is None:
        with httpx.Client(timeout=timeout) as owned_client:
            return _download(owned_client, repo, ref)
    return _download(client, repo, ref)


def fetch_docs(repo: str, ref: str, docs_path: str, client: httpx.Client | None = None) -> list[DocFile] | None:
    """Download a repository archive and collect the files under ``docs_path``.

    Returns:
        The docs files, or None if the repository or ref does not exist.

    Raises:
        TarballFetchError: If the download fails.
        TarballExtractError: If the archive cannot be read.
    """
    archive = fetch_repo_tarball(repo, ref, client=client)
    if archive is None:
        return None
    return find_matching_entries(archive, docs_path)
