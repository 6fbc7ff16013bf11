from __future__ import annotations

import logging
import signal
from typing import Any, Callable

import gi
gi.require_version('Gtk', '3.0')

from gi.repository import GLib, Gtk

from awfocus.core.config import ConfigManager
from awfocus.core.dbus import DBusTransport
from awfocus.core.notifier import Notifier, Transport
from awfocus.core.router import FocusEventRouter
from awfocus.core.window import WnckWorkspace

logger = logging.getLogger(__name__)


class FocusWatchService:
    def __init__(
        self,
        workspace_factory: Callable[[], Any] = WnckWorkspace.create,
        transport: Transport | None = None,
    ) -> None:
        self.config_manager = ConfigManager()
        self.config = self.config_manager.load()

        self.transport = transport if transport is not None else DBusTransport()
        self.notifier = Notifier(self.transport, self.config.target)
        self.router = FocusEventRouter(self.notifier)

        self._workspace_factory = workspace_factory
        self.workspace: Any = None

    def start(self) -> None:
        """
        Connects the router to the host. Raises if the host is unusable,
        so a broken environment fails here and not silently later.
        """
        logger.info("Starting focus watcher...")
        self.workspace = self._workspace_factory()
        self.router.attach(self.workspace, self.config.activation_signals)

    def run(self) -> None:
        self.start()

        for sig in (signal.SIGINT, signal.SIGTERM):
            GLib.unix_signal_add(GLib.PRIORITY_DEFAULT, sig, self._on_signal)

        try:
            Gtk.main()
        finally:
            logger.info("Service shutdown complete.")

    def stop(self) -> None:
        logger.info("Stopping service...")
        Gtk.main_quit()

    def _on_signal(self) -> bool:
        self.stop()
        return GLib.SOURCE_REMOVE
