"""Process-level settings read from the environment."""

from collections.abc import Mapping

from pydantic import BaseModel, SecretStr

from tarpaulin_action.releases.github import (
    DEFAULT_RELEASE_ENDPOINT,
    GitHubReleaseSourceConfig,
)

RELEASE_ENDPOINT_VAR = "GITHUB_RELEASE_ENDPOINT"
TOKEN_VAR = "GITHUB_TOKEN"


class ActionSettings(BaseModel):
    """Settings captured once at startup and passed down explicitly."""

    release_endpoint: str = DEFAULT_RELEASE_ENDPOINT
    token: SecretStr | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> "ActionSettings":
        """Read settings from environment variables, ignoring empty values."""
        values: dict[str, str] = {}
        if endpoint := environ.get(RELEASE_ENDPOINT_VAR):
            values["release_endpoint"] = endpoint
        if token := environ.get(TOKEN_VAR):
            values["token"] = token
        return cls.model_validate(values)

    def source_config(self) -> GitHubReleaseSourceConfig:
        """Configuration for the GitHub release metadata source."""
        return GitHubReleaseSourceConfig(
            release_endpoint=self.release_endpoint, token=self.token
        )
