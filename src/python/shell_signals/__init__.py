# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Lifecycle tracking for event handler registrations.

This module provides:

- A registry that remembers every handler it connects and releases each
  exactly once, individually or in bulk
- One-shot handlers that disconnect themselves before running
- Adapters for connect/disconnect and subscribe/unsubscribe style emitters
- Per-owner scopes for tearing down everything a plugin connected

Usage:
    from shell_signals import SubscriptionRegistry, Emitter

    window = Emitter("window")
    signals = SubscriptionRegistry()
    signals.connect(window, "focus", on_focus)
    signals.connect_once(window, "close", on_close)

    # On teardown
    signals.destroy()
"""

from .config import SignalsConfig, apply_config, load_config, parse_config, validate_config
from .emitter import Emitter
from .handlers import dynamic_handler
from .owners import OwnerRegistry
from .registry import SubscriptionRegistry
from .sources import ConnectAdapter, EventSource, SubscribeAdapter, as_event_source

__all__ = [
    # Registry
    "SubscriptionRegistry",
    "OwnerRegistry",
    # Sources
    "EventSource",
    "ConnectAdapter",
    "SubscribeAdapter",
    "as_event_source",
    "Emitter",
    # Handlers
    "dynamic_handler",
    # Config
    "SignalsConfig",
    "apply_config",
    "load_config",
    "parse_config",
    "validate_config",
]
