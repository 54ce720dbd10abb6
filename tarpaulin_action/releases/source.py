"""Abstract base class for release metadata sources."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, kw_only=True)
class MetadataSource(ABC):
    """Abstract registry of published tarpaulin releases.

    Implementations return the raw decoded release payload. Validation of
    its shape is left to the resolver so every source is held to the same
    rules.
    """

    @abstractmethod
    async def get_latest_release(self) -> Mapping[str, Any]:
        """Fetch the most recent release.

        Raises:
            MetadataFetchError: If the registry query fails

        """

    @abstractmethod
    async def get_release_by_tag(self, tag: str) -> Mapping[str, Any]:
        """Fetch the release with the exact given tag.

        Args:
            tag: Git tag of the release (e.g., "0.27.3")

        Raises:
            ReleaseNotFoundError: If no release has this tag
            MetadataFetchError: If the registry query fails

        """
