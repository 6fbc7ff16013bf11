from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class WindowInfo:
    caption: str
    resource_class: str
    resource_name: str

    def as_args(self) -> tuple[str, str, str]:
        return (self.caption, self.resource_class, self.resource_name)


def extract_window_info(window: Any) -> WindowInfo:
    """
    Reads caption, resource class and resource name from a window.
    Missing or None attributes become empty strings.
    """
    caption = getattr(window, "caption", None)
    resource_class = getattr(window, "resource_class", None)
    resource_name = getattr(window, "resource_name", None)

    return WindowInfo(
        caption=caption if caption is not None else "",
        resource_class=str(resource_class) if resource_class is not None else "",
        resource_name=str(resource_name) if resource_name is not None else "",
    )
