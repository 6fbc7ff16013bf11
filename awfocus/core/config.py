from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NotifyTarget:
    bus_name: str
    object_path: str
    interface: str
    method: str


@dataclass(frozen=True)
class Config:
    target: NotifyTarget
    # Newest first; the first one the workspace exposes wins.
    activation_signals: tuple[str, ...]


class ConfigManager:
    def get_default(self) -> Config:
        return Config(
            target=NotifyTarget(
                bus_name="com._2e3s.Awatcher",
                object_path="/com/_2e3s/Awatcher",
                interface="com._2e3s.Awatcher",
                method="NotifyActiveWindow",
            ),
            activation_signals=("window-activated", "client-activated"),
        )

    def load(self) -> Config:
        config = self.get_default()
        logger.debug(f"Using notification target {config.target.bus_name}{config.target.object_path}")
        return config
