from __future__ import annotations

import logging
from typing import Any, Callable

import gi
gi.require_version('Gio', '2.0')

from gi.repository import Gio, GLib

from awfocus.core.config import NotifyTarget

logger = logging.getLogger(__name__)


def _session_bus() -> Gio.DBusConnection:
    connection = Gio.bus_get_sync(Gio.BusType.SESSION, None)
    # The shared connection raises SIGTERM when the bus goes away by default.
    connection.set_exit_on_close(False)
    return connection


class DBusTransport:
    """
    Fire-and-forget method calls on the session bus.

    Messages carry NO_REPLY_EXPECTED, so nothing is awaited. If the bus is
    unreachable the message is dropped and the connection is requested
    again on the next call.
    """

    def __init__(self, connection_factory: Callable[[], Any] | None = None) -> None:
        self._connection_factory = connection_factory or _session_bus
        self._connection: Any = None

    def build_message(self, target: NotifyTarget, args: tuple[str, str, str]) -> Gio.DBusMessage:
        message = Gio.DBusMessage.new_method_call(
            target.bus_name,
            target.object_path,
            target.interface,
            target.method,
        )
        message.set_body(GLib.Variant("(sss)", args))
        message.set_flags(Gio.DBusMessageFlags.NO_REPLY_EXPECTED)
        return message

    def call(self, target: NotifyTarget, args: tuple[str, str, str]) -> None:
        message = self.build_message(target, args)
        try:
            connection = self._get_connection()
            connection.send_message(message, Gio.DBusSendMessageFlags.NONE)
        except GLib.Error as e:
            logger.debug(f"Dropped {target.method} notification: {e.message}")
            self._connection = None

    def _get_connection(self) -> Any:
        if self._connection is not None and self._connection.is_closed():
            self._connection = None
        if self._connection is None:
            self._connection = self._connection_factory()
        return self._connection
