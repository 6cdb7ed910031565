#To hash inline script/style content for CSP source lists
# Input: parsed page tree
# Output: HashLists of 'sha256-...' tokens and external sources

import base64
import hashlib

from bs4 import NavigableString

from csp_headers.classifier import classify, matches_csp_tag
from csp_headers.errors import HashError
from csp_headers.models import HashLists, TagKind


def hash_inline_content(content):
  sha = hashlib.sha256()
  sha.update(content.encode("utf-8"))
  # CSP hash sources are the base64 digest, not hex
  return f"'sha256-{base64.b64encode(sha.digest()).decode('ascii')}'"


def _first_child_text(tag, path=None):
    # Only the first child is hashed; later children are not concatenated
    if not tag.contents:
        raise HashError(f"Inline <{tag.name}> tag has no content to hash", path=path)
    first = tag.contents[0]
    if not isinstance(first, NavigableString):
        raise HashError(f"Inline <{tag.name}> tag does not start with text content", path=path)
    return str(first)


def collect_hashes(tree, path=None):
    """
    Walks `tree` in document order and builds the page's HashLists.
    The tree is only read, never modified.
    """
    script = []
    style = []

    for tag in tree.find_all(matches_csp_tag):
        result = classify(tag)
        if result.kind is TagKind.INLINE_SCRIPT:
            script.append(hash_inline_content(_first_child_text(tag, path)))
        elif result.kind is TagKind.INLINE_STYLE:
            style.append(hash_inline_content(_first_child_text(tag, path)))
        elif result.kind is TagKind.EXTERNAL_SCRIPT:
            script.append(result.source)
        elif result.kind is TagKind.EXTERNAL_STYLE:
            style.append(result.source)

    return HashLists(script=tuple(script), style=tuple(style))
