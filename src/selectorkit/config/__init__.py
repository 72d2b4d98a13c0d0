"""Configuration module using Pydantic Settings.

Usage:
    from selectorkit.config import BuilderSettings

    settings = BuilderSettings(combinator_policy="warn")
"""

from selectorkit.config.settings import BuilderSettings, CombinatorPolicy

__all__ = [
    "BuilderSettings",
    "CombinatorPolicy",
]
