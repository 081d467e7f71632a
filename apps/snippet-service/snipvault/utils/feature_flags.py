"""Feature flag helpers for the client application."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Literal, TypedDict, cast


FeatureFlagKey = Literal[
    "edit_mode",
    "syntax_highlighting",
    "empty_state_illustration",
]


class FeatureFlagValues(TypedDict):
    edit_mode: bool
    syntax_highlighting: bool
    empty_state_illustration: bool


@dataclass(frozen=True)
class FeatureFlagDefinition:
    env_var: str
    default: bool


_FEATURE_FLAG_DEFINITIONS: Dict[FeatureFlagKey, FeatureFlagDefinition] = {
    "edit_mode": FeatureFlagDefinition("SNIPVAULT_FEATURE_EDIT_MODE", True),
    "syntax_highlighting": FeatureFlagDefinition("SNIPVAULT_FEATURE_SYNTAX_HIGHLIGHTING", True),
    "empty_state_illustration": FeatureFlagDefinition("SNIPVAULT_FEATURE_EMPTY_STATE_ILLUSTRATION", True),
}


def _normalize_bool(value: str | None, default: bool = True) -> bool:
    """Return normalized boolean from environment-style value."""
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"", "0", "false", "no", "off"}:
        return False
    if normalized in {"1", "true", "yes", "on"}:
        return True
    return default


@lru_cache(maxsize=None)
def get_feature_flags() -> FeatureFlagValues:
    """Return the cached feature flag state sourced from the environment."""
    values: Dict[FeatureFlagKey, bool] = {}
    for key, definition in _FEATURE_FLAG_DEFINITIONS.items():
        values[key] = _normalize_bool(os.getenv(definition.env_var), default=definition.default)
    return cast(FeatureFlagValues, values)


def is_feature_enabled(flag: FeatureFlagKey) -> bool:
    """Return whether the supplied feature flag evaluates to true."""
    return get_feature_flags()[flag]


def refresh_feature_flag_cache() -> None:
    """Invalidate cached feature flag values (useful for tests)."""
    get_feature_flags.cache_clear()
