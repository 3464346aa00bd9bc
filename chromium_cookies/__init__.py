"""
Read and decrypt cookies from a Chromium-family browser on macOS.

    from chromium_cookies import get_chromium_cookies

    for cookie in get_chromium_cookies("chrome", "Default", "github.com"):
        print(cookie.name, cookie.value)
"""

from .crypto import decrypt_cookie_value, derive_key
from .domains import generate_domain_matchers, is_domain_match, normalize_domain
from .errors import (
    CookieDatabaseError,
    CookieDatabaseNotFoundError,
    CookieExtractionError,
    UnsupportedBrowserError,
    UnsupportedPlatformError,
)
from .extract import ExtractionStats, get_chromium_cookies
from .records import Cookie, StoredRecord, transform_cookie_row

__version__ = "0.1.0"

__all__ = [
    "Cookie",
    "CookieDatabaseError",
    "CookieDatabaseNotFoundError",
    "CookieExtractionError",
    "ExtractionStats",
    "StoredRecord",
    "UnsupportedBrowserError",
    "UnsupportedPlatformError",
    "decrypt_cookie_value",
    "derive_key",
    "generate_domain_matchers",
    "get_chromium_cookies",
    "is_domain_match",
    "normalize_domain",
    "transform_cookie_row",
]
