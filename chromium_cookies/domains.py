"""Domain normalization and host_key matching."""

from __future__ import annotations

import re
from typing import List, Optional, Set

from .log import get_logger

LOGGER = get_logger("domains")

_SCHEME_RE = re.compile(r"^https?://")


def normalize_domain(domain: str) -> Optional[str]:
    """
    Canonicalize a user supplied domain or URL.

    ``"HTTPS://WWW.Example.com/"`` becomes ``"example.com"``. Returns None
    when what is left has no dot (``localhost``). Ports are kept.
    """
    cleaned = domain.lower().strip()
    cleaned = _SCHEME_RE.sub("", cleaned)
    if cleaned.endswith("/"):
        cleaned = cleaned[:-1]
    if cleaned.startswith("www."):
        cleaned = cleaned[4:]
    return cleaned if "." in cleaned else None


def is_domain_match(host_key: str, normalized_domain: str) -> bool:
    key = host_key.lower()
    return key == normalized_domain or key == "." + normalized_domain


def generate_domain_matchers(domain: str) -> List[str]:
    """
    List the host_key values whose cookies apply to ``domain``.

    For console.anthropic.com that is the domain itself, .console.anthropic.com
    and .anthropic.com. A bare TLD such as .com is never included.
    """
    matchers = [domain, "." + domain]

    parts = domain.split(".")
    for i in range(1, len(parts)):
        parent = ".".join(parts[i:])
        if "." in parent:
            matchers.append("." + parent)

    return matchers


def build_matcher_set(domain_filter: Optional[str]) -> Optional[Set[str]]:
    """
    Build the host_key set for a filter, or None to keep every row.

    An invalid filter is logged and treated like no filter at all.
    """
    if not domain_filter:
        return None

    normalized = normalize_domain(domain_filter)
    if normalized is None:
        LOGGER.warning("Invalid domain filter %r, returning all cookies", domain_filter)
        return None

    return set(generate_domain_matchers(normalized))
