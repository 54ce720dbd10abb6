"""Assembly of the tarpaulin run configuration from action inputs."""

import logging
import shlex
from collections.abc import Sequence
from dataclasses import dataclass

from tarpaulin_action.errors import OptionsParseError
from tarpaulin_action.models.config import DEFAULT_OUTPUT_TYPE, RunConfiguration
from tarpaulin_action.models.inputs import ActionInputs
from tarpaulin_action.models.platform import LINUX_X86_64_GNU, PlatformId
from tarpaulin_action.models.selector import parse_version_selector
from tarpaulin_action.releases.resolver import ReleaseResolver

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class ConfigBuilder:
    """Builds the run configuration for a single action invocation."""

    resolver: ReleaseResolver
    platform: PlatformId = LINUX_X86_64_GNU

    async def build(self, inputs: ActionInputs) -> RunConfiguration:
        """Resolve the download URL and apply defaults to the inputs.

        Raises:
            MetadataFetchError: If release metadata cannot be fetched
            NoMatchingAssetError: If the release has no usable tarball
            OptionsParseError: If ``opts`` is not valid shell syntax

        """
        additional_options = split_options(inputs.opts)
        selector = parse_version_selector(inputs.requested_version)
        download_url = await self.resolver.resolve(selector, self.platform)

        config = RunConfiguration(
            additional_options=additional_options,
            download_url=download_url,
            type=inputs.run_type or None,
            timeout=inputs.timeout or None,
            out_type=inputs.out_type or DEFAULT_OUTPUT_TYPE,
        )
        log.info(
            "Built configuration: type=%s timeout=%s out_type=%s options=%s",
            config.type,
            config.timeout,
            config.out_type,
            config.additional_options,
        )
        return config


def split_options(opts: str | None) -> Sequence[str]:
    """Split an options string into arguments like a POSIX shell would.

    Quotes and backslash escapes are honored. ``#`` is not a comment.
    """
    if opts is None:
        return ()

    try:
        return tuple(shlex.split(opts, comments=False, posix=True))
    except ValueError as e:
        raise OptionsParseError(opts, str(e)) from e
