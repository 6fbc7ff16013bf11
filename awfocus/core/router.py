from __future__ import annotations

import logging
from typing import Any, Sequence

from gi.repository import GObject

from awfocus.core.errors import UnsupportedHostError
from awfocus.core.metadata import extract_window_info
from awfocus.core.notifier import Notifier
from awfocus.core.tracker import SubscriptionTracker

logger = logging.getLogger(__name__)


def select_activation_signal(workspace: Any, names: Sequence[str]) -> str:
    """
    Returns the first of `names` that the workspace's GType defines.
    Older hosts only provide the legacy name, newer ones provide both.
    """
    if isinstance(workspace, GObject.Object):
        for name in names:
            if GObject.signal_lookup(name, type(workspace)):
                return name
    raise UnsupportedHostError(f"Workspace exposes none of: {', '.join(names)}")


class FocusEventRouter:
    def __init__(self, notifier: Notifier, tracker: SubscriptionTracker | None = None) -> None:
        self.notifier = notifier
        self.tracker = tracker if tracker is not None else SubscriptionTracker()

    def attach(self, workspace: Any, signal_names: Sequence[str]) -> str:
        name = select_activation_signal(workspace, signal_names)
        workspace.connect(name, self._on_activated)
        logger.info(f"Listening for focus changes on '{name}'")
        return name

    def on_window_activated(self, window: Any) -> None:
        # No window focused, e.g. the desktop is shown.
        if window is None:
            return

        # Registered only once the watch is in place, so a failed connect
        # is retried on the next focus change.
        if self.tracker.is_new(window.internal_id):
            self._watch_caption(window)
            self.tracker.mark_seen(window.internal_id)

        self.send(window)

    def send(self, window: Any) -> None:
        self.notifier.notify(extract_window_info(window))

    def _on_activated(self, _workspace: Any, window: Any) -> None:
        self.on_window_activated(window)

    def _watch_caption(self, window: Any) -> None:
        def on_caption_changed(*_args: Any) -> None:
            if window.active:
                self.send(window)

        window.connect("caption-changed", on_caption_changed)
        logger.debug(f"Watching caption of window {window.internal_id} ({len(self.tracker) + 1} tracked)")
