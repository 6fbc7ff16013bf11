import logging

import pytest

pytest.importorskip("gi")

try:
    from awfocus.daemon import main as main_module
except (ImportError, ValueError):
    pytest.skip("Gtk 3.0 introspection data not available", allow_module_level=True)

from awfocus.core.errors import HostUnavailableError


class NoHostService:
    def run(self):
        raise HostUnavailableError("No X11 screen available")


class InterruptedService:
    def run(self):
        raise KeyboardInterrupt


def test_startup_error_exits_with_status_1(monkeypatch, caplog):
    monkeypatch.setattr(main_module, "FocusWatchService", NoHostService)

    with caplog.at_level(logging.ERROR):
        with pytest.raises(SystemExit) as exc_info:
            main_module.main()

    assert exc_info.value.code == 1
    assert "No X11 screen available" in caplog.text


def test_keyboard_interrupt_exits_cleanly(monkeypatch, caplog):
    monkeypatch.setattr(main_module, "FocusWatchService", InterruptedService)

    with caplog.at_level(logging.INFO):
        main_module.main()

    assert "Interrupted by user." in caplog.text
