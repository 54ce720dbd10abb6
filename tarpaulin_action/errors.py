"""Errors raised while resolving the tarpaulin configuration."""

from tarpaulin_action.models.selector import VersionSelector


class TarpaulinActionError(Exception):
    """Base class for all configuration failures."""


class MetadataFetchError(TarpaulinActionError):
    """Raised when release metadata cannot be fetched or is invalid."""


class ReleaseNotFoundError(MetadataFetchError):
    """Raised when the registry has no release for the requested tag."""

    def __init__(self, tag: str) -> None:
        super().__init__(f"No tarpaulin release found for tag '{tag}'")
        self.tag = tag


class NoMatchingAssetError(TarpaulinActionError):
    """Raised when no asset matches the platform and archive format."""

    def __init__(self, selector: VersionSelector) -> None:
        super().__init__(
            "Couldn't find a tarpaulin release tarball containing binaries "
            f"for {selector}"
        )
        self.selector = selector


class OptionsParseError(TarpaulinActionError):
    """Raised when the extra options string is not valid shell syntax."""

    def __init__(self, opts: str, reason: str) -> None:
        super().__init__(f"Invalid tarpaulin options {opts!r}: {reason}")
        self.opts = opts
