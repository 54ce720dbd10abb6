"""Pydantic models for GitHub release API responses."""

from collections.abc import Sequence

from pydantic import Field

from tarpaulin_action.models.base import Model


class ReleaseAsset(Model):
    """A downloadable artifact attached to a release."""

    name: str | None = None
    media_type: str = Field(..., alias="content_type")
    download_url: str = Field(..., alias="browser_download_url")


class ReleaseMetadata(Model):
    """A published release and its assets."""

    tag_name: str | None = None
    assets: Sequence[ReleaseAsset]
