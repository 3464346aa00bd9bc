"""
Fixed constants used by Chromium's macOS cookie encryption.

These are properties of the browser's on-disk format, not settings. The only
runtime knob is the log level, read from ``CHROMIUM_COOKIES_LOG_LEVEL``.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

LOG_LEVEL_ENV = "CHROMIUM_COOKIES_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

# Chrome stores times as microseconds since 1601-01-01 UTC
CHROME_EPOCH_DIFF_SECONDS = 11644473600
MICROSECONDS_PER_SECOND = 1000000


@dataclass(frozen=True)
class CryptoConstants:
    """Parameters for PBKDF2 key derivation and AES-128-CBC decryption."""

    salt: bytes = b"saltysalt"
    iterations: int = 1003
    key_length: int = 16
    iv: bytes = b" " * 16  # 16 spaces
    version_prefix: bytes = b"v10"
    hash_prefix_length: int = 32
    max_padding: int = 16


CHROME_CRYPTO = CryptoConstants()


def log_level_from_env(default: str = DEFAULT_LOG_LEVEL) -> str:
    """Read the log level name, falling back to ``default`` if it is unknown."""
    level = os.environ.get(LOG_LEVEL_ENV, default).upper()
    if not isinstance(logging.getLevelName(level), int):
        return default
    return level
