"""The resolved configuration used to run tarpaulin."""

from typing import Literal

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from tarpaulin_action.models.base import Model

type OutputType = Literal["Json", "Toml", "Stdout", "Xml", "Html", "Lcov"]

DEFAULT_OUTPUT_TYPE: OutputType = "Xml"


class RunConfiguration(Model):
    """Fully resolved configuration for a tarpaulin run.

    Serialized with camelCase keys (``additionalOptions``, ``downloadUrl``,
    ``outType``) for consumption by the step that runs the tool.
    """

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    additional_options: tuple[str, ...] = Field(
        default=(), description="Extra arguments appended to the tarpaulin command"
    )
    download_url: str = Field(
        ..., description="URL of the tarball containing the tarpaulin binaries"
    )
    type: str | None = Field(
        default=None,
        description="Kind of tests to run, None runs doctests and normal tests",
    )
    timeout: str | None = Field(
        default=None, description="Time a test may run without responding"
    )
    out_type: OutputType = Field(
        default=DEFAULT_OUTPUT_TYPE, description="Coverage report format"
    )
