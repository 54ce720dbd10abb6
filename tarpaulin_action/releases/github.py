"""GitHub releases API metadata source."""

import logging
from collections.abc import AsyncGenerator, Mapping
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote

import aiohttp
from pydantic import BaseModel, SecretStr
from yarl import URL

from tarpaulin_action.errors import MetadataFetchError, ReleaseNotFoundError
from tarpaulin_action.releases.source import MetadataSource

log = logging.getLogger(__name__)

DEFAULT_RELEASE_ENDPOINT = "https://api.github.com/repos/xd009642/tarpaulin/releases"


class GitHubReleaseSourceConfig(BaseModel):
    """Configuration for the GitHub releases source."""

    release_endpoint: str = DEFAULT_RELEASE_ENDPOINT
    token: SecretStr | None = None


@dataclass(frozen=True, kw_only=True)
class GitHubReleaseSource(MetadataSource):
    """Release metadata source backed by the GitHub REST API."""

    config: GitHubReleaseSourceConfig
    session: aiohttp.ClientSession = field(repr=False)

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: GitHubReleaseSourceConfig
    ) -> AsyncGenerator["GitHubReleaseSource", None]:
        """Create source with managed session lifecycle."""
        headers = {"Accept": "application/vnd.github+json"}
        if config.token is not None:
            headers["Authorization"] = f"Bearer {config.token.get_secret_value()}"

        async with aiohttp.ClientSession(headers=headers) as session:
            yield cls(config=config, session=session)

    async def get_latest_release(self) -> Mapping[str, Any]:
        """Fetch the most recent release."""
        return await self._get_release(self._release_url("latest"))

    async def get_release_by_tag(self, tag: str) -> Mapping[str, Any]:
        """Fetch the release with the exact given tag."""
        return await self._get_release(self._release_url("tags", tag), tag=tag)

    def _release_url(self, *segments: str) -> URL:
        # Tags may contain "#", "?" or "/" and must reach the API as one segment.
        path = "/".join(quote(segment, safe="") for segment in segments)
        endpoint = self.config.release_endpoint.rstrip("/")
        return URL(f"{endpoint}/{path}", encoded=True)

    async def _get_release(
        self, url: URL, tag: str | None = None
    ) -> Mapping[str, Any]:
        log.info("Fetching release metadata: url=%s", url)

        try:
            async with self.session.get(url) as response:
                if response.status == 404 and tag is not None:
                    raise ReleaseNotFoundError(tag)
                if response.status != 200:
                    text = await response.text()
                    raise MetadataFetchError(
                        f"Failed to fetch release metadata: {response.status} {text}"
                    )
                data = await response.json()
        except (aiohttp.ClientError, TimeoutError) as e:
            raise MetadataFetchError(
                f"Failed to fetch release metadata from {url}: {e}"
            ) from e
        except ValueError as e:
            raise MetadataFetchError(
                f"Release metadata from {url} is not valid JSON: {e}"
            ) from e

        if not isinstance(data, Mapping):
            raise MetadataFetchError(
                f"Release metadata from {url} is not a JSON object"
            )

        return data
