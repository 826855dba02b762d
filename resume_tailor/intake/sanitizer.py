"""Best-effort HTML to plain text conversion for scraped job postings.

A handful of regular expressions, not a DOM parser. Malformed markup
degrades to literal text.
"""

from __future__ import annotations

import re

_SCRIPT_RE = re.compile(r"<script[^>]*>[\s\S]*?</script>", re.IGNORECASE)
_STYLE_RE = re.compile(r"<style[^>]*>[\s\S]*?</style>", re.IGNORECASE)
_TAG_RE = re.compile(r"<[^>]+>")
_WHITESPACE_RE = re.compile(r"\s+")

# Applied in sequence, so "&amp;lt;" decodes all the way to "<".
_ENTITIES = (
    ("&nbsp;", " "),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
)


def sanitize_html(markup: str) -> str:
    """Convert markup into collapsed, entity-decoded plain text.

    Scripts and styles are dropped with their contents, every other tag becomes
    a single space so adjacent elements don't run together, a fixed set of
    named entities is decoded, and whitespace is collapsed and trimmed.

    Args:
        markup: Raw HTML (or any text).

    Returns:
        Plain text suitable for use as model input.
    """
    if not markup:
        return ""

    text = _SCRIPT_RE.sub("", markup)
    text = _STYLE_RE.sub("", text)
    text = _TAG_RE.sub(" ", text)
    for entity, replacement in _ENTITIES:
        text = text.replace(entity, replacement)
    text = _WHITESPACE_RE.sub(" ", text)
    return text.strip()
