"""Selection of which tarpaulin release to resolve."""

from dataclasses import dataclass

LATEST = "latest"


@dataclass(frozen=True, kw_only=True)
class LatestRelease:
    """The most recent published release."""

    def __str__(self) -> str:
        return LATEST


@dataclass(frozen=True, kw_only=True)
class TaggedRelease:
    """A release identified by its exact git tag."""

    tag: str

    def __str__(self) -> str:
        return self.tag


type VersionSelector = LatestRelease | TaggedRelease


def parse_version_selector(requested_version: str) -> VersionSelector:
    """Parse a requested version into a selector.

    ``latest`` selects the most recent release. An empty value is what an
    unset action input produces, so it is treated the same way. Anything
    else is used verbatim as a tag.
    """
    if requested_version in {"", LATEST}:
        return LatestRelease()
    return TaggedRelease(tag=requested_version)
