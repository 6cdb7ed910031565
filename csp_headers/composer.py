"""
Composes the header-rules record for one page.

Record layout:
    <route>
        [Report-To: {...}]
        Content-Security-Policy: <directives>
"""

import os
import re
from pathlib import Path

from csp_headers.models import HeaderBlock, PageRecord, PolicyConfig
from csp_headers.report import REPORT_GROUP

CLOUDFRONT_SOURCE = "https://*.cloudfront.net"
INDENT = "    "

_LEADING_INDEX = re.compile(r"^/index\.html")


def page_route(path: str, root: str) -> str:
    """
    URL path for a page file: root prefix stripped, posix separators,
    and a leading `/index.html` rewritten to `/`.
    """
    relative = Path(os.path.abspath(path)).relative_to(os.path.abspath(root))
    route = "/" + relative.as_posix()
    return _LEADING_INDEX.sub("/", route, count=1)


def _directive(name, *sources):
    return " ".join([name, *sources])


def build_policy(record: PageRecord, config: PolicyConfig) -> str:
    hashes = record.hash_lists

    default_sources = ["'self'"]
    if config.allow_cloudfront_source:
        default_sources.append(CLOUDFRONT_SOURCE)

    style_sources = ["'self'", "'unsafe-inline'"]
    if not config.unsafe_inline_styles:
        style_sources.extend(hashes.style)

    directives = [
        _directive("default-src", *default_sources),
        _directive("object-src", "'none'"),
        _directive("script-src", "'self'", "'strict-dynamic'", "'unsafe-inline'", *hashes.script),
        _directive("style-src", *style_sources),
    ]
    if config.report_url:
        directives.append(_directive("report-to", REPORT_GROUP))
        directives.append(_directive("report-uri", config.report_url))

    return "; ".join(directives) + ";"


def compose_header(record: PageRecord, root: str, report_to: str, config: PolicyConfig) -> HeaderBlock:
    route = page_route(record.path, root)
    lines = [route]
    if report_to:
        lines.append(INDENT + report_to)
    lines.append(f"{INDENT}Content-Security-Policy: {build_policy(record, config)}")
    return HeaderBlock(route=route, text="\n".join(lines) + "\n")
