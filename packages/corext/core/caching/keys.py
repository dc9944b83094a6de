"""Cache key derivation from descriptor URLs.

Two strategies are available:
- ``sha256``: SHA256 hex digest of the URL external form (default)
- ``legacy``: decimal 32-bit string hash of the URL external form, as used by
  older cache directories. Distinct URLs can share a legacy key.
"""

import hashlib
from urllib.parse import urlsplit

from corext.core.config.models import KeyStrategy

CACHE_FILE_EXTENSION = ".xed"


def external_form(url: str) -> str:
    """
    Canonical external string form of a URL.

    Example:
        >>> external_form(" file:///opt/app/lib/core.jar ")
        'file:///opt/app/lib/core.jar'
    """
    return urlsplit(url.strip()).geturl()


def legacy_hash_key(url: str) -> str:
    """
    Decimal 32-bit signed string hash of the URL external form.

    Computed over UTF-16 code units with multiplier 31, so values match
    file names written by the legacy cache layout. Unpaired surrogates count
    as single code units.

    Example:
        >>> legacy_hash_key("Aa") == legacy_hash_key("BB")
        True
    """
    data = external_form(url).encode("utf-16-be", "surrogatepass")
    h = 0
    for i in range(0, len(data), 2):
        h = (31 * h + int.from_bytes(data[i : i + 2], "big")) & 0xFFFFFFFF
    if h & 0x80000000:
        h -= 1 << 32
    return str(h)


def sha256_key(url: str) -> str:
    """SHA256 hex digest (64 chars) of the URL external form."""
    return hashlib.sha256(external_form(url).encode("utf-8", "surrogatepass")).hexdigest()


_STRATEGIES = {
    "sha256": sha256_key,
    "legacy": legacy_hash_key,
}


def derive_key(url: str, strategy: KeyStrategy = "sha256") -> str:
    """
    Derive the cache key for a descriptor URL.

    Raises:
        ValueError: If strategy is unknown
    """
    try:
        key_fn = _STRATEGIES[strategy]
    except KeyError:
        raise ValueError(f"Unknown cache key strategy: {strategy!r}") from None
    return key_fn(url)


def cache_file_name(url: str, strategy: KeyStrategy = "sha256") -> str:
    """File name of the cache entry for a descriptor URL."""
    return derive_key(url, strategy) + CACHE_FILE_EXTENSION
