"""HTML sanitizing for user-authored program descriptions."""

import bleach
from bleach.css_sanitizer import CSSSanitizer

from src.core.config import settings

_css_sanitizer = CSSSanitizer(allowed_css_properties=settings.ALLOWED_CSS_PROPERTIES)


def sanitize_description(html: str) -> str:
    """Strip tags, attributes, styles and link protocols outside the allow-lists."""
    return bleach.clean(
        html,
        tags=settings.ALLOWED_TAGS,
        attributes=settings.ALLOWED_ATTRIBUTES,
        protocols=settings.ALLOWED_PROTOCOLS,
        css_sanitizer=_css_sanitizer,
        strip=True,
        strip_comments=True
    )
