# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Handler helpers."""

from __future__ import annotations

from typing import Any, Callable


def dynamic_handler(name: str, owner: Any) -> Callable[..., Any]:
    """Return a handler that looks up ``owner.<name>`` each time it is called.

    Redefining the function on ``owner`` (for example after a module reload)
    takes effect without reconnecting the handler.

    Args:
        name: Attribute name of the target function.
        owner: Object or module holding the function.
    """

    def handler(*args: Any, **kwargs: Any) -> Any:
        return getattr(owner, name)(*args, **kwargs)

    handler.__name__ = f"dynamic_{name}"
    handler.__qualname__ = handler.__name__
    return handler
