"""Cookie rows as stored by Chromium and as returned to callers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .config import CHROME_EPOCH_DIFF_SECONDS, MICROSECONDS_PER_SECOND
from .crypto import decrypt_cookie_value


@dataclass(frozen=True)
class StoredRecord:
    """One row of the ``cookies`` table."""

    host_key: str
    name: str
    value: Optional[str]
    encrypted_value: Optional[bytes]
    path: str
    expires_utc: int
    is_secure: int
    is_httponly: int


@dataclass(frozen=True)
class Cookie:
    name: str
    value: str
    domain: str
    path: str
    expires: Optional[int]
    secure: bool
    http_only: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "value": self.value,
            "domain": self.domain,
            "path": self.path,
            "expires": self.expires,
            "secure": self.secure,
            "httpOnly": self.http_only,
        }


def chrome_time_to_unix(expires_utc: int) -> Optional[int]:
    """Convert a Chrome timestamp to Unix seconds; None for session cookies."""
    if expires_utc <= 0:
        return None
    return expires_utc // MICROSECONDS_PER_SECOND - CHROME_EPOCH_DIFF_SECONDS


def transform_cookie_row(record: StoredRecord, key: Optional[bytes]) -> Optional[Cookie]:
    """
    Turn a stored row into a Cookie.

    A plaintext value always wins over the encrypted one. Rows that are
    encrypted but cannot be decrypted (no key, unknown version, bad data)
    return None.
    """
    value = record.value or ""

    if not value and record.encrypted_value:
        if key is None:
            return None
        decrypted = decrypt_cookie_value(record.encrypted_value, key, record.host_key)
        if decrypted is None:
            return None
        value = decrypted

    return Cookie(
        name=record.name,
        value=value,
        domain=record.host_key,
        path=record.path,
        expires=chrome_time_to_unix(record.expires_utc),
        secure=bool(record.is_secure),
        http_only=bool(record.is_httponly),
    )
