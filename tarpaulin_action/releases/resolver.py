"""Selection of the tarpaulin release asset to download."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from tarpaulin_action.errors import MetadataFetchError, NoMatchingAssetError
from tarpaulin_action.models.platform import PlatformId
from tarpaulin_action.models.release import ReleaseAsset, ReleaseMetadata
from tarpaulin_action.models.selector import (
    LatestRelease,
    TaggedRelease,
    VersionSelector,
)
from tarpaulin_action.releases.source import MetadataSource

log = logging.getLogger(__name__)

# Media type GitHub reports for the .tar.gz release archives.
ARCHIVE_MEDIA_TYPE = "application/x-gtar"


@dataclass(frozen=True, kw_only=True)
class ReleaseResolver:
    """Resolves a version selector to a binary archive download URL."""

    source: MetadataSource

    async def resolve(self, selector: VersionSelector, platform: PlatformId) -> str:
        """Find the download URL of the release archive for a platform.

        Makes exactly one registry query. When several assets match, the
        first one in registry order is used.

        Args:
            selector: Release to resolve
            platform: Platform the binaries must be built for

        Returns:
            Download URL of the matching asset, unchanged

        Raises:
            ReleaseNotFoundError: If the requested tag does not exist
            MetadataFetchError: If the metadata cannot be fetched, is
                malformed, or lists no assets
            NoMatchingAssetError: If no asset matches the platform and
                archive format

        """
        release = await self._fetch_release(selector)

        candidates = [
            asset for asset in release.assets if is_candidate(asset, platform)
        ]
        if not candidates:
            log.error(
                "No asset matched: selector=%s platform=%s assets=%d",
                selector,
                platform.signature,
                len(release.assets),
            )
            raise NoMatchingAssetError(selector)

        if len(candidates) > 1:
            log.warning(
                "%d assets matched for %s, using the first one",
                len(candidates),
                platform.signature,
            )

        asset = candidates[0]
        log.info("Resolved tarpaulin %s to %s", selector, asset.download_url)
        return asset.download_url

    async def _fetch_release(self, selector: VersionSelector) -> ReleaseMetadata:
        match selector:
            case LatestRelease():
                log.info("Querying latest tarpaulin release")
                payload = await self.source.get_latest_release()
            case TaggedRelease(tag=tag):
                log.info("Querying tarpaulin release by tag: %s", tag)
                payload = await self.source.get_release_by_tag(tag)

        return parse_release(payload, selector)


def parse_release(
    payload: Mapping[str, Any], selector: VersionSelector
) -> ReleaseMetadata:
    """Validate a raw release payload, requiring a non-empty asset list."""
    try:
        release = ReleaseMetadata.model_validate(payload)
    except ValidationError as e:
        raise MetadataFetchError(
            f"Malformed release metadata for {selector}: {e}"
        ) from e

    if not release.assets:
        raise MetadataFetchError(f"Release {selector} has no assets")

    return release


def is_candidate(asset: ReleaseAsset, platform: PlatformId) -> bool:
    """Check that an asset is a tarball built for the given platform."""
    return (
        asset.media_type == ARCHIVE_MEDIA_TYPE
        and platform.signature in asset.download_url
    )
