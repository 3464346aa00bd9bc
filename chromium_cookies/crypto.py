"""
Key derivation and cookie value decryption for Chromium on macOS.

Chromium encrypts cookie values with AES-128-CBC. The key is derived from
the "Safe Storage" keychain password with PBKDF2-SHA1, and encrypted values
carry a ``v10`` prefix. Newer versions additionally prefix the plaintext
with the SHA-256 of the cookie's host key
(https://crrev.com/c/5792044).
"""

from __future__ import annotations

import hashlib
from typing import Optional

from Crypto.Cipher import AES
from Crypto.Hash import SHA1
from Crypto.Protocol.KDF import PBKDF2

from .config import CHROME_CRYPTO, CryptoConstants
from .log import get_logger

LOGGER = get_logger("crypto")


def derive_key(secret: bytes, constants: CryptoConstants = CHROME_CRYPTO) -> bytes:
    """Derive the 16-byte AES key from the Safe Storage password."""
    return PBKDF2(
        secret,
        constants.salt,
        dkLen=constants.key_length,
        count=constants.iterations,
        hmac_hash_module=SHA1,
    )


def strip_padding(data: bytes, max_padding: int = CHROME_CRYPTO.max_padding) -> bytes:
    """
    Remove PKCS#7-style padding.

    Only the last byte is inspected. A value of 0 or above ``max_padding``
    is not padding, and the data is returned untouched.
    """
    if not data:
        return data
    padding = data[-1]
    if 0 < padding <= max_padding:
        return data[:-padding]
    return data


def strip_domain_hash(data: bytes, host_key: str, prefix_length: int = CHROME_CRYPTO.hash_prefix_length) -> bytes:
    """Drop the SHA-256(host_key) prefix if present, else return data as is."""
    if len(data) < prefix_length:
        return data
    expected = hashlib.sha256(host_key.encode("utf-8")).digest()
    if data[:prefix_length] == expected:
        return data[prefix_length:]
    # Older format without hash, or a hash for another host
    return data


def decrypt_cookie_value(
    payload: Optional[bytes],
    key: bytes,
    host_key: str,
    constants: CryptoConstants = CHROME_CRYPTO,
) -> Optional[str]:
    """
    Decrypt a ``v10`` cookie value.

    Returns None for empty payloads, other format versions and anything the
    cipher rejects. Invalid UTF-8 in the result is replaced with U+FFFD.
    """
    if not payload:
        return None

    prefix = constants.version_prefix
    if payload[:len(prefix)] != prefix:
        LOGGER.debug("Skipping value with unsupported version %r", bytes(payload[:len(prefix)]))
        return None

    ciphertext = payload[len(prefix):]
    try:
        if not ciphertext:
            raise ValueError("No ciphertext after version prefix")
        cipher = AES.new(key, AES.MODE_CBC, iv=constants.iv)
        decrypted = cipher.decrypt(ciphertext)
    except ValueError as e:
        LOGGER.debug("Decryption failed: %s", e)
        return None

    plaintext = strip_padding(decrypted, constants.max_padding)
    plaintext = strip_domain_hash(plaintext, host_key, constants.hash_prefix_length)
    return plaintext.decode("utf-8", errors="replace")
