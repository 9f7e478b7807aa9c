"""HTML stripper — removes tag-like substrings before validation."""

import re
from typing import Optional

import structlog

from fieldtypes.config import get_settings

logger = structlog.get_logger()

# Anything between angle brackets, one tag at a time
TAG_PATTERN = re.compile(r"<[^>]+>")


def strip_html(value: str, allow_basic_html: Optional[bool] = None) -> str:
    """Remove every `<...>` tag from value.

    Entities are left untouched. `allow_basic_html` defaults to the
    ALLOW_BASIC_HTML setting; no safe-tag allowlist exists yet, so the
    flag currently strips exactly like the default path.
    """
    if allow_basic_html is None:
        allow_basic_html = get_settings().ALLOW_BASIC_HTML

    if allow_basic_html:
        # TODO: preserve a safe tag subset once an allowlist is agreed
        logger.warning("basic_html_allowlist_unavailable", fallback="strip_all")

    return TAG_PATTERN.sub("", value)
