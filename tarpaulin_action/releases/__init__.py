"""Release metadata sources and asset resolution."""

from tarpaulin_action.releases.github import (
    GitHubReleaseSource,
    GitHubReleaseSourceConfig,
)
from tarpaulin_action.releases.resolver import ReleaseResolver
from tarpaulin_action.releases.source import MetadataSource

__all__ = [
    "GitHubReleaseSource",
    "GitHubReleaseSourceConfig",
    "MetadataSource",
    "ReleaseResolver",
]
