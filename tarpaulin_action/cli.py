"""CLI entry point for the tarpaulin configuration resolver."""

import argparse
import asyncio
import logging
import os
import sys

from pydantic import ValidationError

from tarpaulin_action.builder import ConfigBuilder
from tarpaulin_action.errors import TarpaulinActionError
from tarpaulin_action.models.config import RunConfiguration
from tarpaulin_action.models.inputs import ActionInputs
from tarpaulin_action.releases.github import GitHubReleaseSource
from tarpaulin_action.releases.resolver import ReleaseResolver
from tarpaulin_action.settings import ActionSettings


def empty_to_none(value: str | None) -> str | None:
    """Treat an empty action input as unset."""
    return value or None


async def resolve_configuration(
    inputs: ActionInputs, settings: ActionSettings
) -> RunConfiguration:
    """Build the run configuration against the GitHub releases API."""
    async with GitHubReleaseSource.from_config(settings.source_config()) as source:
        builder = ConfigBuilder(resolver=ReleaseResolver(source=source))
        return await builder.build(inputs)


async def run(
    requested_version: str,
    settings: ActionSettings,
    run_type: str | None = None,
    timeout: str | None = None,
    out_type: str | None = None,
    opts: str | None = None,
) -> int:
    """Resolve the configuration, print it as JSON and return exit code."""
    log = logging.getLogger("tarpaulin_action")

    try:
        inputs = ActionInputs(
            requested_version=requested_version,
            run_type=empty_to_none(run_type),
            timeout=empty_to_none(timeout),
            out_type=empty_to_none(out_type),
            opts=empty_to_none(opts),
        )
    except ValidationError as e:
        log.error("Invalid action inputs: %s", e)
        return 1

    log.info(
        "Resolving tarpaulin %s from %s",
        inputs.requested_version,
        settings.release_endpoint,
    )

    try:
        config = await resolve_configuration(inputs, settings)
    except TarpaulinActionError as e:
        log.error("Failed to resolve tarpaulin configuration: %s", e)
        return 1

    print(config.model_dump_json(by_alias=True, indent=2))
    return 0


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Resolve the configuration needed to run cargo-tarpaulin"
    )
    parser.add_argument(
        "--version",
        dest="requested_version",
        default="latest",
        help="Tarpaulin release tag to install, or 'latest'",
    )
    parser.add_argument(
        "--run-type",
        default=None,
        help="Type of tests to run (e.g. Tests, Doctests)",
    )
    parser.add_argument(
        "--timeout",
        default=None,
        help="Seconds a test may run without response before timing out",
    )
    parser.add_argument(
        "--out-type",
        default=None,
        help="Coverage report format (Json, Toml, Stdout, Xml, Html, Lcov)",
    )
    parser.add_argument(
        "--args",
        dest="opts",
        default=None,
        help="Extra command line options passed to tarpaulin",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    exit_code = asyncio.run(
        run(
            requested_version=args.requested_version,
            settings=ActionSettings.from_env(os.environ),
            run_type=args.run_type,
            timeout=args.timeout,
            out_type=args.out_type,
            opts=args.opts,
        )
    )
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
