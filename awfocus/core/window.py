from __future__ import annotations

import logging
from typing import Any

from gi.repository import GObject

from awfocus.core.errors import HostUnavailableError

logger = logging.getLogger(__name__)


def _load_wnck() -> Any:
    try:
        import gi
        gi.require_version('Gtk', '3.0')
        gi.require_version('Wnck', '3.0')
        from gi.repository import Wnck
    except (ImportError, ValueError) as exc:
        raise HostUnavailableError("libwnck 3.0 introspection data is not installed") from exc
    return Wnck


class WnckWindow(GObject.Object):
    """
    Read-only view of a Wnck.Window with the attributes the router expects.
    Re-emits Wnck's name-changed as caption-changed.
    """

    __gsignals__ = {
        'caption-changed': (GObject.SignalFlags.RUN_FIRST, None, ()),
    }

    def __init__(self, wnck_window: Any) -> None:
        GObject.Object.__init__(self)
        self._wnck_window = wnck_window
        self.internal_id = wnck_window.get_xid()
        wnck_window.connect("name-changed", self._on_name_changed)

    @property
    def caption(self) -> str | None:
        # get_name() falls back to a placeholder for unnamed windows
        if not self._wnck_window.has_name():
            return None
        return self._wnck_window.get_name()

    @property
    def resource_class(self) -> str | None:
        return self._wnck_window.get_class_group_name()

    @property
    def resource_name(self) -> str | None:
        return self._wnck_window.get_class_instance_name()

    @property
    def active(self) -> bool:
        return bool(self._wnck_window.is_active())

    def _on_name_changed(self, *_args: Any) -> None:
        self.emit('caption-changed')


class WnckWorkspace(GObject.Object):
    """
    Focus-change source backed by Wnck.Screen.

    Emits `window-activated` with a WnckWindow, or None when nothing has
    focus. Works on X11 only; Wnck has no screen under a pure Wayland session.
    """

    __gsignals__ = {
        'window-activated': (GObject.SignalFlags.RUN_FIRST, None, (GObject.TYPE_PYOBJECT,)),
    }

    def __init__(self, screen: Any) -> None:
        GObject.Object.__init__(self)
        self._screen = screen
        self._windows: dict[int, WnckWindow] = {}

        screen.connect("active-window-changed", self._on_active_window_changed)
        screen.connect("window-closed", self._on_window_closed)

    @classmethod
    def create(cls) -> WnckWorkspace:
        Wnck = _load_wnck()
        screen = Wnck.Screen.get_default()
        if screen is None:
            raise HostUnavailableError("No X11 screen available (Wayland session without XWayland?)")
        screen.force_update()
        logger.info("Wnck screen initialized")
        return cls(screen)

    def wrap(self, wnck_window: Any) -> WnckWindow:
        xid = wnck_window.get_xid()
        window = self._windows.get(xid)
        if window is None:
            window = WnckWindow(wnck_window)
            self._windows[xid] = window
        return window

    def _on_active_window_changed(self, screen: Any, _previous: Any = None) -> None:
        active = screen.get_active_window()
        self.emit('window-activated', self.wrap(active) if active is not None else None)

    def _on_window_closed(self, _screen: Any, wnck_window: Any) -> None:
        self._windows.pop(wnck_window.get_xid(), None)
