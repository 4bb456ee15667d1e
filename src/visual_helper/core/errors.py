"""Exceptions raised by the visual helper core layer."""


class VisualHelperError(Exception):
    """Base exception for visual helper errors."""

    pass


class CaptureError(VisualHelperError):
    """Raised when no capture method could produce an image."""

    pass


class SnapshotError(VisualHelperError):
    """Raised when a document snapshot cannot be read or has no page."""

    pass
