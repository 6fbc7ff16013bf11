from __future__ import annotations


class AwfocusError(Exception):
    pass


class UnsupportedHostError(AwfocusError):
    """The workspace exposes none of the known focus-change signals."""


class HostUnavailableError(AwfocusError):
    """The windowing host could not be reached at startup."""
