"""Inputs supplied to the action."""

from pydantic import Field

from tarpaulin_action.models.base import Model
from tarpaulin_action.models.config import OutputType
from tarpaulin_action.models.selector import LATEST


class ActionInputs(Model):
    """Raw action parameters, before defaults are applied."""

    requested_version: str = Field(
        default=LATEST, description="Release tag to install, or 'latest'"
    )
    run_type: str | None = Field(
        default=None, description="Kind of tests to run (e.g. 'Doctests')"
    )
    timeout: str | None = Field(
        default=None, description="Per-test timeout in seconds"
    )
    out_type: OutputType | None = Field(
        default=None, description="Coverage report format"
    )
    opts: str | None = Field(
        default=None, description="Extra command line options for tarpaulin"
    )
