"""Exceptions raised by chromium_cookies."""


class CookieExtractionError(Exception):
    """Base exception for cookie extraction errors."""
    pass


class UnsupportedBrowserError(CookieExtractionError, ValueError):
    """Raised when the requested browser id is not known."""
    pass


class UnsupportedPlatformError(CookieExtractionError):
    """Raised when running anywhere but macOS."""
    pass


class CookieDatabaseNotFoundError(CookieExtractionError, FileNotFoundError):
    """Raised when no Cookies database exists for the browser/profile."""
    pass


class CookieDatabaseError(CookieExtractionError):
    """Raised when the copied Cookies database is used incorrectly."""
    pass
