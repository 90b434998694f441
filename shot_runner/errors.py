"""Per-URL failures.

Every failure carries the url it happened on and the exception that caused
it. The report shown to the operator does not distinguish between them, the
type only matters for verbose logging and for callers using the library.
"""

from typing import Optional


class ShotError(Exception):
    reason = "screenshot failed"

    def __init__(self, url: str, cause: Optional[BaseException] = None):
        self.url = url
        self.cause = cause
        message = f"{self.reason}: {url}"
        if cause is not None:
            message = f"{message} ({type(cause).__name__}: {cause})"
        super().__init__(message)


class InvalidUrl(ShotError):
    reason = "invalid url"


class SessionFailed(ShotError):
    reason = "could not launch browser"


class NavigationFailed(ShotError):
    reason = "navigation failed"


class CaptureTimeout(NavigationFailed):
    reason = "timed out"


class CaptureFailed(ShotError):
    reason = "capture failed"


class WriteFailed(ShotError):
    reason = "could not write screenshot"
