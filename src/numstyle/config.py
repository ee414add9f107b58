"""Formatter configuration.

Configuration is layered, later sources overriding earlier ones:

    defaults
       |
       +---> YAML file   (top-level ``numstyle:`` mapping, or a bare mapping)
       |
       +---> environment (NUMSTYLE_DEFAULT_CURRENCY, NUMSTYLE_LOCALE,
       |                  NUMSTYLE_LOG_FALLBACKS)
       v
    FormatterConfig (frozen)

Usage:
    >>> from numstyle.config import load_config
    >>> config = load_config("numstyle.yaml")
    >>> config.default_currency
    'EUR'
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping

import yaml

from numstyle.errors import ConfigError

logger = logging.getLogger(__name__)

ENV_PREFIX = "NUMSTYLE_"
SUPPORTED_LOCALES = ("en_US",)

_CURRENCY_PATTERN = re.compile(r"^[A-Za-z]{3}$")
_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class FormatterConfig:
    """Formatter settings.

    Attributes:
        default_currency: ISO 4217 code used when a call passes none.
        locale: Output locale. Only en_US is supported.
        log_fallbacks: Log unrecognized style tags at DEBUG.
    """

    default_currency: str = "USD"
    locale: str = "en_US"
    log_fallbacks: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.default_currency, str) or not _CURRENCY_PATTERN.match(
            self.default_currency
        ):
            raise ConfigError(
                f"expected a three-letter ISO 4217 code, got {self.default_currency!r}",
                key="default_currency",
            )
        object.__setattr__(self, "default_currency", self.default_currency.upper())
        if self.locale not in SUPPORTED_LOCALES:
            raise ConfigError(
                f"unsupported locale {self.locale!r}. Available: {', '.join(SUPPORTED_LOCALES)}",
                key="locale",
            )
        if not isinstance(self.log_fallbacks, bool):
            raise ConfigError("expected a boolean", key="log_fallbacks")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FormatterConfig":
        """Create from a mapping, rejecting unknown keys."""
        return cls().merge(data)

    def merge(self, data: Mapping[str, Any]) -> "FormatterConfig":
        """Return a copy with the given keys overridden."""
        known = {f.name for f in fields(self)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"unknown keys: {', '.join(unknown)}")
        return replace(self, **dict(data))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


def parse_bool(value: str, key: str) -> bool:
    """Parse a boolean environment value."""
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigError(f"expected a boolean, got {value!r}", key=key)


def load_file(path: str | Path) -> dict[str, Any]:
    """Load settings from a YAML file.

    Args:
        path: Path to the YAML file.

    Returns:
        Settings mapping (the ``numstyle`` section when present).

    Raises:
        ConfigError: If the file is missing, unparsable or not a mapping.
    """
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"cannot read config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"expected a mapping in {path}")
    section = data.get("numstyle", data)
    if not isinstance(section, dict):
        raise ConfigError(f"expected a mapping under 'numstyle' in {path}")
    return section


def load_env(env: Mapping[str, str] | None = None) -> dict[str, Any]:
    """Collect settings from NUMSTYLE_* environment variables."""
    env = os.environ if env is None else env
    settings: dict[str, Any] = {}

    currency = env.get(f"{ENV_PREFIX}DEFAULT_CURRENCY")
    if currency:
        settings["default_currency"] = currency.strip()
    locale = env.get(f"{ENV_PREFIX}LOCALE")
    if locale:
        settings["locale"] = locale.strip()
    log_fallbacks = env.get(f"{ENV_PREFIX}LOG_FALLBACKS")
    if log_fallbacks:
        settings["log_fallbacks"] = parse_bool(log_fallbacks, "log_fallbacks")
    return settings


def load_config(
    path: str | Path | None = None,
    env: Mapping[str, str] | None = None,
) -> FormatterConfig:
    """Load configuration from defaults, an optional file and the environment.

    Args:
        path: Optional YAML file.
        env: Environment mapping (defaults to os.environ).

    Returns:
        Validated FormatterConfig.
    """
    config = FormatterConfig()
    if path is not None:
        config = config.merge(load_file(path))
        logger.debug("Loaded formatter config from %s", path)
    overrides = load_env(env)
    if overrides:
        config = config.merge(overrides)
        logger.debug("Applied environment overrides: %s", sorted(overrides))
    return config
