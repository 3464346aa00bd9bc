"""Read the browser's Safe Storage password from the macOS Keychain."""

from __future__ import annotations

import subprocess
from typing import Callable, Optional

from .log import get_logger

LOGGER = get_logger("keychain")

SECURITY_BIN = "/usr/bin/security"
ITEM_NOT_FOUND = "could not be found in the keychain"


def get_safe_storage_password(
    account: str,
    service: str,
    run: Callable[..., subprocess.CompletedProcess] = subprocess.run,
) -> Optional[bytes]:
    """
    Return the keychain password as bytes, or None if it is unavailable.

    Encrypted cookies are skipped when this returns None.
    """
    cmd = [SECURITY_BIN, "find-generic-password", "-w", "-a", account, "-s", service]
    try:
        result = run(cmd, capture_output=True, text=True, check=True)
    except subprocess.CalledProcessError as e:
        stderr = e.stderr or ""
        if ITEM_NOT_FOUND in stderr:
            LOGGER.debug("Keychain item not found for %s", service)
        else:
            LOGGER.debug("Keychain error: %s", stderr.strip() or e)
        return None
    except OSError as e:
        LOGGER.debug("Could not run %s: %s", SECURITY_BIN, e)
        return None

    return result.stdout.strip().encode("utf-8")
