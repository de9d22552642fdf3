# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Registry for tracking subscriptions by owner."""

from __future__ import annotations

import logging

from .registry import SubscriptionRegistry

logger = logging.getLogger(__name__)


class OwnerRegistry:
    """Tracks one subscription registry per owner for cleanup on unload."""

    def __init__(self) -> None:
        self._scopes: dict[str, SubscriptionRegistry] = {}

    def scope(self, owner: str) -> SubscriptionRegistry:
        """Return the owner's registry, creating it if needed."""
        registry = self._scopes.get(owner)
        if registry is None:
            registry = self._scopes[owner] = SubscriptionRegistry()
        return registry

    def owners(self) -> list[str]:
        """Owners that still have tracked subscriptions."""
        return [owner for owner, registry in self._scopes.items() if len(registry)]

    def release(self, owner: str) -> int:
        """Release every subscription of an owner. Returns count.

        If a source fails to release, the error propagates and the owner keeps
        the subscriptions that were not released yet.
        """
        registry = self._scopes.get(owner)
        if registry is None:
            return 0
        count = registry.destroy()
        del self._scopes[owner]
        logger.debug("Released %d subscription(s) for %s", count, owner)
        return count

    def release_all(self) -> int:
        """Release every owner's subscriptions. Returns count."""
        count = 0
        for owner in list(self._scopes):
            try:
                count += self.release(owner)
            except Exception as e:
                logger.error("Error releasing subscriptions for %s: %s", owner, e)
        return count

    def __contains__(self, owner: str) -> bool:
        return owner in self._scopes
