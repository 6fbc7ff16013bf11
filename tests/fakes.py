from __future__ import annotations

from gi.repository import GObject


class FakeWindow(GObject.Object):
    __gsignals__ = {
        'caption-changed': (GObject.SignalFlags.RUN_FIRST, None, ()),
    }

    def __init__(self, internal_id, caption=None, resource_class=None, resource_name=None, active=False):
        GObject.Object.__init__(self)
        self.internal_id = internal_id
        self.caption = caption
        self.resource_class = resource_class
        self.resource_name = resource_name
        self.active = active
        self.connections = 0

    def connect(self, name, handler, *args):
        self.connections += 1
        return super().connect(name, handler, *args)

    def set_caption(self, caption):
        self.caption = caption
        self.emit('caption-changed')


class FakeWorkspace(GObject.Object):
    __gsignals__ = {
        'window-activated': (GObject.SignalFlags.RUN_FIRST, None, (GObject.TYPE_PYOBJECT,)),
    }

    def activate(self, window):
        self.emit('window-activated', window)


class LegacyWorkspace(GObject.Object):
    __gsignals__ = {
        'client-activated': (GObject.SignalFlags.RUN_FIRST, None, (GObject.TYPE_PYOBJECT,)),
    }

    def activate(self, window):
        self.emit('client-activated', window)


class DualWorkspace(GObject.Object):
    __gsignals__ = {
        'window-activated': (GObject.SignalFlags.RUN_FIRST, None, (GObject.TYPE_PYOBJECT,)),
        'client-activated': (GObject.SignalFlags.RUN_FIRST, None, (GObject.TYPE_PYOBJECT,)),
    }

    def activate(self, window):
        self.emit('window-activated', window)
        self.emit('client-activated', window)
