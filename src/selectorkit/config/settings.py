"""Builder configuration using Pydantic Settings.

Usage:
    from selectorkit.config import BuilderSettings

    # Load from environment variables (SELECTORKIT_*)
    settings = BuilderSettings()

    # Or override with explicit values
    settings = BuilderSettings(combinator_policy="error")
"""

from __future__ import annotations

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

CombinatorPolicy = Literal["allow", "warn", "error"]


class BuilderSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for SelectorBuilder.

    Attributes:
        combinator_policy: What ``combine`` does with a combinator outside
            ``known_combinators``: accept it silently, warn, or raise.
        known_combinators: Combinator tokens accepted without complaint.

    Environment Variables:
        SELECTORKIT_COMBINATOR_POLICY
        SELECTORKIT_KNOWN_COMBINATORS (JSON list)
    """

    model_config = SettingsConfigDict(
        env_prefix="SELECTORKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    combinator_policy: CombinatorPolicy = "allow"
    known_combinators: tuple[str, ...] = (" ", "+", "~", ">")

    @field_validator("known_combinators")
    @classmethod
    def _require_combinators(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("known_combinators must not be empty")
        return value
