# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Shared fixtures for shell_signals tests."""

import logging

import pytest

from shell_signals import Emitter, SubscriptionRegistry, log


class RecordingSource:
    """Event source that records every register/release call.

    Releasing a handle that is not live raises KeyError, so a double release
    fails the test that caused it.
    """

    def __init__(self, fail_release_on=()):
        self.handlers = {}
        self.registered = []
        self.released = []
        self.fail_release_on = set(fail_release_on)
        self._next_id = 100

    def register(self, event_name, handler):
        handle = self._next_id
        self._next_id += 1
        self.handlers[handle] = (event_name, handler)
        self.registered.append(handle)
        return handle

    def release(self, handle):
        if handle in self.fail_release_on:
            raise RuntimeError(f"cannot release {handle}")
        del self.handlers[handle]
        self.released.append(handle)

    def fire(self, event_name, *args):
        results = []
        for handle, (name, handler) in list(self.handlers.items()):
            if name == event_name:
                results.append(handler(*args))
        return results


@pytest.fixture
def registry():
    return SubscriptionRegistry()


@pytest.fixture
def source():
    return RecordingSource()


@pytest.fixture
def emitter():
    return Emitter("test")


@pytest.fixture
def restore_logging():
    """Restore debug topics and package log level after a test changes them."""
    debug_all = log._debug_all
    debug_filter = dict(log._debug_filter)
    pkg_logger = logging.getLogger("shell_signals")
    level = pkg_logger.level

    yield

    log.configure(debug_all=debug_all, debug_filter=debug_filter)
    pkg_logger.setLevel(level)
