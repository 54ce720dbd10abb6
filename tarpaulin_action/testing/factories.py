"""Test factories for generating test data."""

from polyfactory.factories.pydantic_factory import ModelFactory

from tarpaulin_action.models.inputs import ActionInputs


class ActionInputsFactory(ModelFactory[ActionInputs]):
    """Factory for ActionInputs."""

    requested_version = "latest"
    out_type = None
    opts = None
