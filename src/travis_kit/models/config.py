"""Configuration models for travis-kit."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator


class TravisConfig(BaseModel):
    """The ``travis`` namespace of a travis-kit config file.

    ``None`` means "not configured" so that a configured empty list can be
    told apart from a missing key. Instances are immutable; layering returns
    a new value.
    """

    model_config = ConfigDict(frozen=True, extra="allow", coerce_numbers_to_str=True)

    before_script: list[str] | None = Field(
        default=None, description="Commands run before the test script on travis-ci"
    )
    after_script: list[str] | None = Field(
        default=None, description="Commands run after the test script on travis-ci"
    )
    script: str | None = Field(default=None, description="The test script run on travis-ci")
    token: str | None = Field(default=None, description="Your travis-ci token")
    versions: list[str] | None = Field(
        default=None, description="Interpreter versions used to run your tests"
    )
    notifications: dict[str, Any] | None = Field(
        default=None, description="travis-ci notifications, merged over the email defaults"
    )
    language: str | None = Field(default=None, description="travis-ci language tag")
    before: list[str] | None = Field(
        default=None, description="Commands run by 'travis-kit before-hook'"
    )
    checks: list[str] | None = Field(
        default=None, description="Commands run by 'travis-kit run-checks'"
    )

    @field_validator("versions", mode="before")
    @classmethod
    def reject_float_versions(cls, value: Any) -> Any:
        """Reject unquoted versions that YAML read as floats.

        ``3.10`` is the float 3.1, so the version the user meant is already lost.
        """
        if isinstance(value, list):
            floats = [item for item in value if isinstance(item, float)]
            if floats:
                raise ValueError(
                    f"versions {floats} were read as numbers; quote them, for example '3.10'"
                )
        return value

    def configured(self) -> dict[str, Any]:
        """Return only the keys that were explicitly configured."""
        return self.model_dump(exclude_none=True)

    def layered(self, *overrides: "TravisConfig") -> "TravisConfig":
        """Return a new config with each override's configured keys on top.

        Later overrides win. Neither ``self`` nor the overrides are modified.
        """
        data = self.configured()
        for override in overrides:
            data.update(override.configured())
        return TravisConfig(**data)

    @classmethod
    def from_mapping(cls, data: Any) -> "TravisConfig":
        """Build a config from the raw ``travis`` section of a config file."""
        if not isinstance(data, dict):
            return cls()
        return cls.model_validate(data)

    @classmethod
    def load(cls, config_path: Path, namespace: str = "travis") -> "TravisConfig":
        """Load the ``namespace`` section of a YAML config file.

        A missing or empty file yields an empty config.
        """
        if not config_path.exists():
            return cls()

        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
            if not isinstance(data, dict):
                return cls()
            return cls.from_mapping(data.get(namespace))


class ResolvedConfig(BaseModel):
    """Configuration after defaults, config files and probes are applied."""

    model_config = ConfigDict(frozen=True)

    before_script: list[str] = Field(default_factory=list)
    after_script: list[str] = Field(default_factory=list)
    script: str | None = None
    language: str
    notifications: dict[str, Any] = Field(default_factory=dict)
    versions: list[str] = Field(default_factory=list)
    token: str | None = None
