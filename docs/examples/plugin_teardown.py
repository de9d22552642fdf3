"""Plugin that tears down every handler it connected on unload.

The host owns one OwnerRegistry and calls on_load()/on_unload() around the
plugin's lifetime.
"""

import sys

from shell_signals import Emitter, OwnerRegistry, dynamic_handler

OWNER = "focus_tracker"

window = Emitter("window")
owners = OwnerRegistry()


def on_focus(win):
    print(f"focused {win!r}")


def on_first_close(win):
    print(f"closed {win!r}, not watching again")


def on_load():
    signals = owners.scope(OWNER)
    # Late-bound so a reloaded on_focus is picked up without reconnecting
    signals.connect(window, "focus", dynamic_handler("on_focus", sys.modules[__name__]))
    signals.connect_once(window, "close", on_first_close)


def on_unload():
    owners.release(OWNER)


if __name__ == "__main__":
    on_load()
    window.emit("focus", window)
    window.emit("close", window)
    window.emit("close", window)
    on_unload()
    assert window.handler_count() == 0
