from __future__ import annotations

from typing import Hashable


class SubscriptionTracker:
    """
    Remembers which windows already have a caption watch.

    Entries are never removed: a window id is registered once for the
    lifetime of the process.
    """

    def __init__(self) -> None:
        self._seen: dict[Hashable, bool] = {}

    def is_new(self, window_id: Hashable) -> bool:
        return window_id not in self._seen

    def mark_seen(self, window_id: Hashable) -> None:
        self._seen[window_id] = True

    def register_if_absent(self, window_id: Hashable) -> bool:
        """
        Returns True the first time window_id is seen, False afterwards.
        """
        if not self.is_new(window_id):
            return False
        self.mark_seen(window_id)
        return True

    def __contains__(self, window_id: object) -> bool:
        return window_id in self._seen

    def __len__(self) -> int:
        return len(self._seen)
