# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Topic-filtered debug tracing.

Example:
    from shell_signals import log

    log.configure(debug_filter={"#signals": True})
    log.debug("#signals", "connected", handler)  # Logged
    log.debug("#layout", "ignored")              # Dropped
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

_log = logging.getLogger("shell_signals.debug")

_debug_all = False
_debug_filter: dict[str, bool] = {"#signals": True, "#stacktrace": True}


def configure(debug_all: bool | None = None, debug_filter: Mapping[str, bool] | None = None) -> None:
    """Update which topics are traced. Omitted arguments keep their value."""
    global _debug_all, _debug_filter
    if debug_all is not None:
        _debug_all = debug_all
    if debug_filter is not None:
        _debug_filter = dict(debug_filter)


def is_enabled(topic: str) -> bool:
    # An explicit False mutes the topic even with debug_all on
    enabled = _debug_filter.get(topic)
    if enabled is False:
        return False
    return _debug_all or enabled is True


def debug(topic: str, *args: object) -> None:
    if is_enabled(topic) and _log.isEnabledFor(logging.DEBUG):
        _log.debug(" | ".join(str(arg) for arg in (topic, *args)))


def warn(*args: object) -> None:
    _log.warning(" ".join(str(arg) for arg in args))
