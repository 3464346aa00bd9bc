"""Read, filter and decrypt the cookies of one browser profile."""

from __future__ import annotations

import platform
import sqlite3
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional

from .browsers import get_browser_config, resolve_cookie_db_path
from .crypto import derive_key
from .domains import build_matcher_set
from .errors import CookieDatabaseError, UnsupportedPlatformError
from .keychain import get_safe_storage_password
from .log import get_logger
from .records import Cookie, transform_cookie_row
from .store import CookieDatabase

LOGGER = get_logger("extract")

PasswordFetcher = Callable[[str, str], Optional[bytes]]


@dataclass
class ExtractionStats:
    """Row counts for one extraction run."""

    rows_read: int = 0
    filtered_out: int = 0
    dropped: int = 0
    emitted: int = 0


def get_chromium_cookies(
    browser_id: str = "chrome",
    profile_name: str = "Default",
    domain_filter: Optional[str] = None,
    fetch_password: Optional[PasswordFetcher] = None,
    home: Optional[Path] = None,
    stats: Optional[ExtractionStats] = None,
) -> List[Cookie]:
    """
    Return the cookies of a browser profile, optionally for one domain.

    Args:
        browser_id: "chrome" or "chromium"
        profile_name: Profile directory name, e.g. "Default" or "Profile 1"
        domain_filter: Domain or URL; parent-domain cookies are included
        fetch_password: Called with (account, service); defaults to the Keychain
        home: Home directory to look under, defaults to the current user's
        stats: Filled with row counts when given

    Raises:
        UnsupportedPlatformError: not running on macOS
        UnsupportedBrowserError: unknown browser_id
        CookieDatabaseNotFoundError: no Cookies database for the profile
        CookieDatabaseError: the database could not be copied or read
    """
    if platform.system() != "Darwin":
        raise UnsupportedPlatformError("This function is designed for macOS only.")

    browser_config = get_browser_config(browser_id)
    matchers = build_matcher_set(domain_filter)
    cookie_db_path = resolve_cookie_db_path(browser_config, profile_name, home)

    if fetch_password is None:
        fetch_password = get_safe_storage_password
    password = fetch_password(browser_config.keyring_account, browser_config.keyring_service)
    if password is None:
        LOGGER.warning("No %s password available, encrypted cookies will be skipped",
                       browser_config.keyring_service)
    key = derive_key(password) if password is not None else None

    if stats is None:
        stats = ExtractionStats()

    cookies = []
    try:
        with CookieDatabase(cookie_db_path) as db:
            rows = db.query_cookies()
    except (OSError, sqlite3.Error) as e:
        raise CookieDatabaseError(f"Could not read {cookie_db_path}: {e}") from e

    for row in rows:
        stats.rows_read += 1
        # Case-insensitive, like is_domain_match
        if matchers is not None and row.host_key.lower() not in matchers:
            stats.filtered_out += 1
            continue
        cookie = transform_cookie_row(row, key)
        if cookie is None:
            stats.dropped += 1
            continue
        cookies.append(cookie)

    stats.emitted = len(cookies)
    LOGGER.debug(
        "Read %d rows from %s: %d filtered out, %d undecryptable, %d returned",
        stats.rows_read, cookie_db_path, stats.filtered_out, stats.dropped, stats.emitted,
    )
    return cookies
