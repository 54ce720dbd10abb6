"""Tests for CLI module."""

import json
import logging
from unittest.mock import AsyncMock, patch

import pytest

from tarpaulin_action.cli import empty_to_none, run
from tarpaulin_action.errors import MetadataFetchError, ReleaseNotFoundError
from tarpaulin_action.models.config import RunConfiguration
from tarpaulin_action.models.inputs import ActionInputs
from tarpaulin_action.settings import ActionSettings

DOWNLOAD_URL = "https://example.test/cargo-tarpaulin-x86_64-unknown-linux-gnu.tar.gz"


@pytest.mark.parametrize(
    ("value", "expected"),
    [(None, None), ("", None), ("120", "120")],
)
def test_empty_to_none(value: str | None, expected: str | None) -> None:
    """Empty inputs are treated as unset."""
    assert empty_to_none(value) == expected


async def test_run_prints_configuration(capsys: pytest.CaptureFixture[str]) -> None:
    """Prints the resolved configuration as camelCase JSON."""
    config = RunConfiguration(
        additional_options=("--skip-clean",),
        download_url=DOWNLOAD_URL,
        type="Doctests",
        out_type="Lcov",
    )

    with patch(
        "tarpaulin_action.cli.resolve_configuration",
        new=AsyncMock(return_value=config),
    ) as resolve_mock:
        exit_code = await run(
            requested_version="0.27.3",
            settings=ActionSettings(),
            run_type="Doctests",
            timeout="",
            out_type="Lcov",
            opts="--skip-clean",
        )

    assert exit_code == 0
    output = json.loads(capsys.readouterr().out)
    assert output["downloadUrl"] == DOWNLOAD_URL
    assert output["additionalOptions"] == ["--skip-clean"]
    assert output["outType"] == "Lcov"

    inputs = resolve_mock.call_args.args[0]
    assert inputs == ActionInputs(
        requested_version="0.27.3",
        run_type="Doctests",
        timeout=None,
        out_type="Lcov",
        opts="--skip-clean",
    )


@pytest.mark.parametrize(
    "error",
    [ReleaseNotFoundError("9.9.9"), MetadataFetchError("boom")],
)
async def test_run_returns_error_on_failure(
    error: Exception,
    capsys: pytest.CaptureFixture[str],
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Returns 1 and prints nothing when resolution fails."""
    with (
        patch(
            "tarpaulin_action.cli.resolve_configuration",
            new=AsyncMock(side_effect=error),
        ),
        caplog.at_level(logging.ERROR),
    ):
        exit_code = await run(requested_version="9.9.9", settings=ActionSettings())

    assert exit_code == 1
    assert capsys.readouterr().out == ""
    assert "Failed to resolve tarpaulin configuration" in caplog.text


async def test_run_rejects_unknown_output_type(
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Returns 1 for an output type tarpaulin does not support."""
    with (
        patch(
            "tarpaulin_action.cli.resolve_configuration", new=AsyncMock()
        ) as resolve_mock,
        caplog.at_level(logging.ERROR),
    ):
        exit_code = await run(
            requested_version="latest", settings=ActionSettings(), out_type="Pdf"
        )

    assert exit_code == 1
    assert "Invalid action inputs" in caplog.text
    resolve_mock.assert_not_called()
