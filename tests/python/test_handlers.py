# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Tests for late-bound handlers."""

import types

import pytest

from shell_signals import dynamic_handler


class TestDynamicHandler:
    """Tests for dynamic_handler()."""

    def test_forwards_arguments(self):
        owner = types.SimpleNamespace(on_focus=lambda *args, **kwargs: (args, kwargs))
        handler = dynamic_handler("on_focus", owner)
        assert handler(1, 2, flag=True) == ((1, 2), {"flag": True})

    def test_picks_up_redefinition(self, registry, emitter):
        """Replacing the function takes effect without reconnecting."""
        seen = []
        owner = types.SimpleNamespace(on_focus=lambda: seen.append("old"))
        registry.connect(emitter, "focus", dynamic_handler("on_focus", owner))

        emitter.emit("focus")
        owner.on_focus = lambda: seen.append("new")
        emitter.emit("focus")

        assert seen == ["old", "new"]

    def test_missing_attribute_raises_at_call(self):
        """Lookup happens when called, not when created."""
        handler = dynamic_handler("missing", types.SimpleNamespace())
        with pytest.raises(AttributeError):
            handler()

    def test_name(self):
        handler = dynamic_handler("on_focus", object())
        assert handler.__name__ == "dynamic_on_focus"
