"""Where each supported Chromium browser keeps its data on macOS."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .errors import CookieDatabaseNotFoundError, UnsupportedBrowserError
from .log import get_logger

LOGGER = get_logger("browsers")


@dataclass(frozen=True)
class BrowserConfig:
    id: str
    name: str
    macos_base_dir: str
    keyring_account: str
    keyring_service: str
    supports_profiles: bool


CHROMIUM_BROWSERS = (
    BrowserConfig(
        id="chrome",
        name="Google Chrome",
        macos_base_dir="Google/Chrome",
        keyring_account="Chrome",
        keyring_service="Chrome Safe Storage",
        supports_profiles=True,
    ),
    BrowserConfig(
        id="chromium",
        name="Chromium",
        macos_base_dir="Chromium",
        keyring_account="Chromium",
        keyring_service="Chromium Safe Storage",
        supports_profiles=True,
    ),
)

SUPPORTED_BROWSERS = tuple(b.id for b in CHROMIUM_BROWSERS)


def get_browser_config(browser_id: str) -> BrowserConfig:
    for config in CHROMIUM_BROWSERS:
        if config.id == browser_id:
            return config
    raise UnsupportedBrowserError(
        f"Unsupported browser: {browser_id}. Supported: {', '.join(SUPPORTED_BROWSERS)}"
    )


def get_browser_base_path(config: BrowserConfig, home: Optional[Path] = None) -> Path:
    home = home if home is not None else Path.home()
    return home / "Library" / "Application Support" / config.macos_base_dir


def get_cookie_db_path(base_path: Path, profile_name: str, supports_profiles: bool) -> Path:
    if supports_profiles and profile_name:
        return base_path / profile_name / "Cookies"
    return base_path / "Cookies"


def resolve_cookie_db_path(config: BrowserConfig, profile_name: str, home: Optional[Path] = None) -> Path:
    """
    Find the Cookies database for a browser profile.

    Falls back to a Cookies file directly under the browser directory when
    the profile has none.
    """
    base_path = get_browser_base_path(config, home)
    db_path = get_cookie_db_path(base_path, profile_name, config.supports_profiles)
    if db_path.exists():
        return db_path

    if config.supports_profiles and profile_name:
        root_path = get_cookie_db_path(base_path, "", False)
        if root_path.exists():
            LOGGER.debug("No Cookies in profile %r, using %s", profile_name, root_path)
            return root_path
        raise CookieDatabaseNotFoundError(
            f"Cookies database not found for {config.name} (Profile: {profile_name})"
        )

    raise CookieDatabaseNotFoundError(f"Cookies database not found at {db_path}")
