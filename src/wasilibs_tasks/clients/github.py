import logging
import os
import time
from dataclasses import dataclass
from typing import Any

import httpx

from ..config.settings import GITHUB_API_URL, HTTP_TIMEOUT_SECONDS
from ..errors import NoReleasesError, ReleaseLookupError

logger = logging.getLogger(__name__)


def _github_token() -> str | None:
    return os.getenv("GH_TOKEN") or os.getenv("GITHUB_TOKEN") or None


@dataclass(frozen=True)
class Release:
    tag_name: str
    name: str = ""
    html_url: str = ""


class GitHubReleaseClient:
    def __init__(
        self,
        base_url: str = GITHUB_API_URL,
        token: str | None = None,
        timeout: float = HTTP_TIMEOUT_SECONDS,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._token = token if token is not None else _github_token()
        self._timeout = timeout

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    def latest_release(self, repository: str) -> Release:
        """Fetch the latest published release of `repository` (`owner/name`).

        Raises:
            NoReleasesError: The repository has no release (404 or empty body).
            ReleaseLookupError: Any other HTTP or network failure.
        """
        url = f"{self._base_url}/repos/{repository}/releases/latest"
        started_at = time.monotonic()
        try:
            with httpx.Client(timeout=self._timeout) as client:
                resp = client.get(url, headers=self._headers())
        except httpx.TimeoutException as exc:
            raise ReleaseLookupError(f"Request timed out after {self._timeout}s: {url}") from exc
        except httpx.RequestError as exc:
            raise ReleaseLookupError(f"Network error: {exc}") from exc
        latency_ms = int((time.monotonic() - started_at) * 1000)

        if resp.status_code == 404:
            logger.warning("No releases for %s (status=404, latency=%dms)", repository, latency_ms)
            raise NoReleasesError("could not find releases", status_code=404)
        if not resp.is_success:
            logger.error(
                "GitHub API error for %s (status=%d, latency=%dms): %s",
                repository,
                resp.status_code,
                latency_ms,
                resp.text[:200],
            )
            raise ReleaseLookupError(
                f"GET {url} failed with status {resp.status_code}", status_code=resp.status_code
            )

        try:
            data: Any = resp.json()
        except ValueError as exc:
            raise ReleaseLookupError(
                "GitHub API returned non-JSON response", status_code=resp.status_code
            ) from exc

        if not isinstance(data, dict) or not data.get("tag_name"):
            raise NoReleasesError("could not find releases", status_code=resp.status_code)

        logger.debug("GitHub API success for %s (latency=%dms)", repository, latency_ms)
        return Release(
            tag_name=str(data["tag_name"]),
            name=str(data.get("name") or ""),
            html_url=str(data.get("html_url") or ""),
        )
