# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Configuration loading.

Settings live in the ``[signals]`` table of a TOML file:

    [signals]
    log_level = "DEBUG"
    debug_all = false

    [signals.debug]
    "#signals" = true
    "#stacktrace" = false
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from . import log

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class SignalsConfig:
    """Logging and tracing settings.

    Args:
        log_level: Level name for the ``shell_signals`` logger.
        debug_all: Trace every topic not explicitly muted.
        debug_topics: Per-topic tracing switches as (topic, enabled) pairs.
    """

    log_level: str = "WARNING"
    debug_all: bool = False
    debug_topics: tuple[tuple[str, bool], ...] = (("#signals", True), ("#stacktrace", True))

    @property
    def debug_filter(self) -> dict[str, bool]:
        return dict(self.debug_topics)


def validate_config(data: dict[str, Any]) -> list[str]:
    """Validate parsed TOML data. Returns list of errors (empty if valid)."""
    errors = []
    section = data.get("signals")
    if section is None:
        return ["missing [signals] section"]
    if not isinstance(section, dict):
        return ["signals: expected a table"]

    level = section.get("log_level", "WARNING")
    if not isinstance(level, str) or level.upper() not in _LEVELS:
        errors.append(f"signals.log_level: unknown level {level!r}")

    if not isinstance(section.get("debug_all", False), bool):
        errors.append("signals.debug_all: expected a boolean")

    topics = section.get("debug", {})
    if not isinstance(topics, dict):
        errors.append("signals.debug: expected a table")
    else:
        for topic, enabled in topics.items():
            if not isinstance(enabled, bool):
                errors.append(f"signals.debug.{topic}: expected a boolean")

    return errors


def parse_config(text: str) -> SignalsConfig:
    """Parse TOML text into a config.

    Raises:
        ValueError: If the text is not valid TOML or fails validation.
    """
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"invalid TOML: {e}") from e

    errors = validate_config(data)
    if errors:
        raise ValueError("; ".join(errors))

    section = data["signals"]
    defaults = SignalsConfig()
    return SignalsConfig(
        log_level=section.get("log_level", defaults.log_level).upper(),
        debug_all=section.get("debug_all", defaults.debug_all),
        debug_topics=tuple({**defaults.debug_filter, **section.get("debug", {})}.items()),
    )


def load_config(path: str | Path) -> SignalsConfig:
    """Load config from a TOML file."""
    return parse_config(Path(path).read_text())


def apply_config(config: SignalsConfig) -> None:
    """Set the package log level and debug topics."""
    logging.getLogger("shell_signals").setLevel(getattr(logging, config.log_level.upper()))
    log.configure(debug_all=config.debug_all, debug_filter=config.debug_filter)
