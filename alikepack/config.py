"""Runtime configuration for comparison depth and report defaults."""

from __future__ import annotations

from collections.abc import Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace
import os
from typing import Any, Iterator

from alikepack.core.types import (
    DEFAULT_MAX_DEPTH,
    FORMATTINGS,
    VERBOSITIES,
    Formatting,
    Verbosity,
)

MAX_DEPTH_ENV_VAR = "ALIKEKIT_MAX_DEPTH"
RENDER_DEPTH_ENV_VAR = "ALIKEKIT_RENDER_DEPTH"
FORMATTING_ENV_VAR = "ALIKEKIT_FORMATTING"
VERBOSITY_ENV_VAR = "ALIKEKIT_VERBOSITY"

_ENV_VARS: tuple[str, ...] = (
    MAX_DEPTH_ENV_VAR,
    RENDER_DEPTH_ENV_VAR,
    FORMATTING_ENV_VAR,
    VERBOSITY_ENV_VAR,
)


class ConfigError(ValueError):
    """Raised when AlikeKit configuration is invalid."""


@dataclass(frozen=True, slots=True)
class AlikeConfig:
    """Depth limits and default report style."""

    max_depth: int = DEFAULT_MAX_DEPTH
    render_depth: int = DEFAULT_MAX_DEPTH
    formatting: Formatting = "PLAIN"
    verbosity: Verbosity = "QUIET"

    def __post_init__(self) -> None:
        for name in ("max_depth", "render_depth"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{name} must be an integer")
            if value < 0:
                raise ConfigError(f"{name} must be >= 0")
        if self.formatting not in FORMATTINGS:
            raise ConfigError(
                f"Unsupported formatting: {self.formatting}. "
                f"Supported values: {', '.join(FORMATTINGS)}."
            )
        if self.verbosity not in VERBOSITIES:
            raise ConfigError(
                f"Unsupported verbosity: {self.verbosity}. "
                f"Supported values: {', '.join(VERBOSITIES)}."
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AlikeConfig:
        """Build a config from ``ALIKEKIT_*`` environment variables."""
        env = os.environ if environ is None else environ
        overrides: dict[str, Any] = {}

        for name, env_var in (
            ("max_depth", MAX_DEPTH_ENV_VAR),
            ("render_depth", RENDER_DEPTH_ENV_VAR),
        ):
            raw = env.get(env_var, "").strip()
            if not raw:
                continue
            try:
                overrides[name] = int(raw)
            except ValueError as error:
                raise ConfigError(f"{env_var} must be an integer, got {raw!r}") from error

        formatting = env.get(FORMATTING_ENV_VAR, "").strip()
        if formatting:
            overrides["formatting"] = formatting.upper()
        verbosity = env.get(VERBOSITY_ENV_VAR, "").strip()
        if verbosity:
            overrides["verbosity"] = verbosity.upper()

        return cls(**overrides)

    def to_dict(self) -> dict[str, Any]:
        return {
            "max_depth": self.max_depth,
            "render_depth": self.render_depth,
            "formatting": self.formatting,
            "verbosity": self.verbosity,
        }


_ACTIVE_CONFIG: ContextVar[AlikeConfig | None] = ContextVar(
    "alikepack_active_config",
    default=None,
)
_ENV_CACHE: tuple[tuple[str, ...], AlikeConfig] | None = None


def get_active_config() -> AlikeConfig:
    """Resolve active config from context override or environment."""
    config = _ACTIVE_CONFIG.get()
    if config is not None:
        return config

    global _ENV_CACHE
    key = tuple(os.getenv(env_var, "") for env_var in _ENV_VARS)
    if _ENV_CACHE is not None and _ENV_CACHE[0] == key:
        return _ENV_CACHE[1]

    loaded = AlikeConfig.from_env()
    _ENV_CACHE = (key, loaded)
    return loaded


@contextmanager
def use_config(config: AlikeConfig | None = None, **overrides: Any) -> Iterator[AlikeConfig]:
    """Activate a config for current context, optionally overriding fields."""
    resolved = config if config is not None else get_active_config()
    if overrides:
        try:
            resolved = replace(resolved, **overrides)
        except TypeError as error:
            raise ConfigError(f"Unknown config field: {error}") from error
    token = _ACTIVE_CONFIG.set(resolved)
    try:
        yield resolved
    finally:
        _ACTIVE_CONFIG.reset(token)


def reset_config_cache() -> None:
    """Clear cached env config (for tests)."""
    global _ENV_CACHE
    _ENV_CACHE = None
