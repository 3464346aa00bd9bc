"""Read-only access to a private copy of a Chromium Cookies database."""

from __future__ import annotations

import os
import shutil
import sqlite3
import tempfile
from pathlib import Path
from typing import List, Optional, Union

from .errors import CookieDatabaseError
from .log import get_logger
from .records import StoredRecord

LOGGER = get_logger("store")

COOKIES_QUERY = """
    SELECT host_key, name, value, encrypted_value, path,
           expires_utc, is_secure, is_httponly
    FROM cookies
"""


def _decode_text(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


class CookieDatabase:
    """
    A Cookies database copied to a temporary directory.

    The browser keeps its database locked while running, so we work on a
    copy and delete it on close.
    """

    def __init__(self, original_path: Union[str, Path], temp_dir: Optional[Union[str, Path]] = None):
        if temp_dir is None:
            temp_dir = tempfile.mkdtemp(prefix="chromium-cookies-")
        self.temp_dir = Path(temp_dir)
        self.temp_path = self.temp_dir / "Cookies.sqlite"
        self.conn: Optional[sqlite3.Connection] = None
        try:
            shutil.copy2(original_path, self.temp_path)
        except OSError:
            self.close()
            raise

    def open(self) -> None:
        uri = self.temp_path.resolve().as_uri() + "?mode=ro"
        self.conn = sqlite3.connect(uri, uri=True)
        # Malformed text in a single row must not abort the whole read
        self.conn.text_factory = _decode_text

    def query_cookies(self) -> List[StoredRecord]:
        if self.conn is None:
            raise CookieDatabaseError("Database not opened")
        cursor = self.conn.execute(COOKIES_QUERY)
        return [StoredRecord(*row) for row in cursor.fetchall()]

    def close(self) -> None:
        if self.conn is not None:
            self.conn.close()
            self.conn = None

        # Clean up temporary files
        try:
            if self.temp_path.exists():
                os.unlink(self.temp_path)
            if self.temp_dir.exists():
                os.rmdir(self.temp_dir)
        except OSError as e:
            LOGGER.debug("Cleanup error: %s", e)

    def __enter__(self) -> "CookieDatabase":
        try:
            self.open()
        except sqlite3.Error:
            self.close()
            raise
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
