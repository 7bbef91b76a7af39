"""Presentation configuration model.

Maps semantic severities to concrete badge styling tokens. The tokens are
opaque to the engine (theme class names, CSS variables, terminal colors);
swapping the theme means swapping this config, never the severity tables.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from marketplace_flow.core.domain.presentation import color_category
from marketplace_flow.core.domain.types import SEVERITIES, Severity


class BadgeStyle(BaseModel):
    """Styling tokens for one severity."""

    token: str = Field(..., min_length=1)
    icon: str | None = Field(default=None, min_length=1)

    model_config = ConfigDict(extra="forbid", frozen=True)


class PresentationConfig(BaseModel):
    """Structured-only presentation configuration."""

    theme: str = Field(..., min_length=1)
    styles: dict[Severity, BadgeStyle]

    model_config = ConfigDict(extra="forbid")

    @classmethod
    def from_json_obj(cls, config_obj: dict[str, Any]) -> PresentationConfig:
        """Create a PresentationConfig instance from a JSON-compatible object."""
        return cls.model_validate(config_obj)

    @classmethod
    def default(cls) -> PresentationConfig:
        return cls(
            theme="default",
            styles={severity: BadgeStyle(token=f"badge-{severity.value}") for severity in SEVERITIES},
        )

    @model_validator(mode="after")
    def validate_coverage(self) -> PresentationConfig:
        """Every severity must have a style."""
        missing = [severity.value for severity in SEVERITIES if severity not in self.styles]
        if missing:
            raise ValueError(f"styles missing for severities: {', '.join(missing)}")
        return self

    def style_for_severity(self, severity: Severity | str) -> BadgeStyle:
        return self.styles[Severity(severity)]

    def style_for(self, state: str | None) -> BadgeStyle:
        """Return the badge style for a bare state name."""
        return self.styles[color_category(state)]
