from __future__ import annotations

import logging
from typing import Protocol

from awfocus.core.config import NotifyTarget
from awfocus.core.metadata import WindowInfo

logger = logging.getLogger(__name__)


class Transport(Protocol):
    def call(self, target: NotifyTarget, args: tuple[str, str, str]) -> None: ...


class Notifier:
    def __init__(self, transport: Transport, target: NotifyTarget) -> None:
        self.transport = transport
        self.target = target

    def notify(self, info: WindowInfo) -> None:
        # One-way: the transport neither returns a reply nor raises.
        logger.debug(
            f"Active window class: \"{info.resource_class}\", name: \"{info.resource_name}\", caption: \"{info.caption}\""
        )
        self.transport.call(self.target, info.as_args())
