"""
Platform detection for streaming and social links.

Each URL is checked against PLATFORM_PATTERNS in order and assigned to the
first platform whose host substring it contains.
"""

from typing import Dict, Iterable, Optional, Tuple

# (host substring, CatalogEntry field) in match priority order
PLATFORM_PATTERNS: Tuple[Tuple[str, str], ...] = (
    ("spotify.com", "spotify"),
    ("music.apple.com", "apple"),
    ("tiktok.com", "tiktok"),
    ("instagram.com", "instagram"),
    ("amazon.com", "amazon"),
)


def classify_platform(url: str) -> Optional[str]:
    """Return the catalog field name for a URL, or None if no platform matches."""
    for pattern, field_name in PLATFORM_PATTERNS:
        if pattern in url:
            return field_name
    return None


def classify_platforms(urls: Iterable[str]) -> Dict[str, str]:
    """
    Map platform field names to URLs.

    Unrecognised URLs are dropped. When several URLs belong to the same
    platform the last one wins.
    """
    platforms: Dict[str, str] = {}
    for url in urls:
        field_name = classify_platform(url)
        if field_name is not None:
            platforms[field_name] = url
    return platforms
