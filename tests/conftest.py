import hashlib
import sqlite3
from pathlib import Path

import pytest
from Crypto.Cipher import AES
from Crypto.Util.Padding import pad

TEST_KEY = b"1234567890123456"
IV = b" " * 16

COOKIES_SCHEMA = """
    CREATE TABLE cookies (
        creation_utc INTEGER NOT NULL DEFAULT 0,
        host_key TEXT NOT NULL,
        name TEXT NOT NULL,
        value TEXT,
        encrypted_value BLOB,
        path TEXT NOT NULL DEFAULT '/',
        expires_utc INTEGER NOT NULL DEFAULT 0,
        is_secure INTEGER NOT NULL DEFAULT 0,
        is_httponly INTEGER NOT NULL DEFAULT 0,
        samesite INTEGER NOT NULL DEFAULT -1
    )
"""


def aes_encrypt(data: bytes, key: bytes = TEST_KEY) -> bytes:
    """Encrypt already padded data the way Chromium does and add the v10 tag."""
    return b"v10" + AES.new(key, AES.MODE_CBC, iv=IV).encrypt(data)


@pytest.fixture
def key() -> bytes:
    return TEST_KEY


@pytest.fixture
def encrypt_v10():
    """
    Build a v10 encrypted value.

    ``host_key`` adds the SHA-256 prefix of modern Chromium; ``dummy_hash``
    adds 32 zero bytes instead, as a hash that never matches.
    """

    def _encrypt(plaintext: str, key: bytes = TEST_KEY, host_key=None, dummy_hash=False) -> bytes:
        data = plaintext.encode("utf-8")
        if host_key is not None:
            data = hashlib.sha256(host_key.encode("utf-8")).digest() + data
        elif dummy_hash:
            data = b"\x00" * 32 + data
        return aes_encrypt(pad(data, 16), key)

    return _encrypt


@pytest.fixture
def make_cookies_db():
    """Create a Chromium-like Cookies database holding the given rows."""

    def _make(path: Path, rows) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(path)
        with conn:
            conn.execute(COOKIES_SCHEMA)
            for row in rows:
                conn.execute(
                    """
                    INSERT INTO cookies (host_key, name, value, encrypted_value, path,
                                         expires_utc, is_secure, is_httponly)
                    VALUES (:host_key, :name, :value, :encrypted_value, :path,
                            :expires_utc, :is_secure, :is_httponly)
                    """,
                    {
                        "value": None,
                        "encrypted_value": None,
                        "path": "/",
                        "expires_utc": 0,
                        "is_secure": 0,
                        "is_httponly": 0,
                        **row,
                    },
                )
        conn.close()
        return path

    return _make


@pytest.fixture
def encrypt_raw():
    """Encrypt data without adding any padding."""
    return aes_encrypt
