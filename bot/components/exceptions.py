"""
Custom exception classes for component discovery and dispatch.

Only load failures are fatal; every other irregularity is logged and skipped.
"""
import pathlib


class ComponentError(Exception):
    """Base class for all exceptions raised by the component system."""

    pass


class ComponentLoadError(ComponentError):
    """Raised when a handler module cannot be imported or exports no callable `default`."""

    def __init__(self, path: pathlib.Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load component module {path}: {reason}")
