"""
FILE DESCRIPTION: Tag predicates and classification of CSP-relevant tags.
KEY FUNCTIONS/CLASSES: is_script_tag, is_style_tag, is_css_link, matches_csp_tag, classify
"""

from bs4 import Tag

from csp_headers.models import Classification, TagKind

JAVASCRIPT_MIME_TYPES = {
    "text/ecmascript",
    "text/javascript",
    "text/jscript",
    "text/livescript",
    "text/x-ecmascript",
    "text/x-javascript",
    "application/ecmascript",
    "application/javascript",
    "application/x-ecmascript",
    "application/x-javascript",
    "module",
}

CSS_MIME_TYPE = "text/css"


def _attr(tag, name):
    """Returns a trimmed, lowercased attribute value, or None when absent."""
    value = tag.get(name)
    if value is None:
        return None
    if isinstance(value, list):
        value = " ".join(value)
    return value.strip().lower()


def is_script_tag(tag):
    """<script> carrying JavaScript (no type, or a JavaScript MIME type / language)."""
    if not isinstance(tag, Tag) or tag.name != "script":
        return False
    script_type = _attr(tag, "type")
    if script_type is not None:
        return script_type == "" or script_type in JAVASCRIPT_MIME_TYPES
    language = _attr(tag, "language")
    if language is not None:
        return language == "" or f"text/{language}" in JAVASCRIPT_MIME_TYPES
    return True


def is_style_tag(tag):
    if not isinstance(tag, Tag) or tag.name != "style":
        return False
    style_type = _attr(tag, "type")
    return not style_type or style_type == CSS_MIME_TYPE


def is_css_link(tag):
    if not isinstance(tag, Tag) or tag.name != "link":
        return False
    rel = tag.get("rel") or []
    if isinstance(rel, str):
        rel = rel.split()
    if "stylesheet" not in (r.lower() for r in rel):
        return False
    link_type = _attr(tag, "type")
    return not link_type or link_type == CSS_MIME_TYPE


def matches_csp_tag(tag):
    """Predicate set used when walking a page: script, style or stylesheet link."""
    return is_script_tag(tag) or is_style_tag(tag) or is_css_link(tag)


def classify(tag):
    """
    Maps one matched tag to a Classification.

    Precedence:
    1. script/style without src (and not a link) -> inline, hashable
    2. src present -> external, token is the literal src
    3. stylesheet link -> external style, token is the literal href
    4. anything else -> IGNORE
    An empty src counts as absent.
    """
    src = tag.get("src")
    is_link = tag.name == "link"

    if not src and not is_link:
        if tag.name == "script":
            return Classification(TagKind.INLINE_SCRIPT)
        if tag.name == "style":
            return Classification(TagKind.INLINE_STYLE)
        return Classification(TagKind.IGNORE)

    if src:
        if tag.name == "script":
            return Classification(TagKind.EXTERNAL_SCRIPT, src)
        return Classification(TagKind.EXTERNAL_STYLE, src)

    href = tag.get("href")
    if is_link and href:
        return Classification(TagKind.EXTERNAL_STYLE, href)

    return Classification(TagKind.IGNORE)
