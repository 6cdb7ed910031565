from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional, Tuple

from csp_headers import core
from csp_headers.errors import ConfigError


class TagKind(Enum):
    INLINE_SCRIPT = "INLINE_SCRIPT"
    INLINE_STYLE = "INLINE_STYLE"
    EXTERNAL_SCRIPT = "EXTERNAL_SCRIPT"
    EXTERNAL_STYLE = "EXTERNAL_STYLE"
    IGNORE = "IGNORE"


@dataclass(frozen=True)
class Classification:
    """
    Result of classifying one matched tag.
    `source` holds the literal src/href value for external kinds.
    """
    kind: TagKind
    source: Optional[str] = None


@dataclass(frozen=True)
class HashLists:
    """
    Per-page CSP source tokens in document order.
    INVARIANT: tokens are never deduplicated.
    """
    script: Tuple[str, ...] = ()
    style: Tuple[str, ...] = ()

    @property
    def tag_count(self) -> int:
        return len(self.script) + len(self.style)


@dataclass(frozen=True)
class PolicyConfig:
    """
    Immutable configuration snapshot for one invocation.
    Built once per run and passed explicitly to every component.
    """
    unsafe_inline_styles: bool = False
    allow_cloudfront_source: bool = False
    report_url: Optional[str] = None
    html_parser: str = "html.parser"

    def __post_init__(self):
        if self.html_parser not in core.SUPPORTED_PARSERS:
            raise ConfigError(
                f"Unsupported HTML parser {self.html_parser!r}; "
                f"expected one of {', '.join(core.SUPPORTED_PARSERS)}"
            )

    @classmethod
    def from_inputs(cls, inputs: Optional[Mapping[str, Any]] = None,
                    environ: Optional[Mapping[str, str]] = None) -> "PolicyConfig":
        """
        Resolves each option: explicit input value > environment variable > default.
        A None input value counts as unset.
        """
        inputs = inputs or {}

        unsafe_styles = inputs.get("unsafeStyles")
        if unsafe_styles is None:
            unsafe_styles = core.env_flag(core.ENV_UNSAFE_STYLES, environ)

        allow_cloudfront = inputs.get("allowCloudfrontSource")
        if allow_cloudfront is None:
            allow_cloudfront = core.env_flag(core.ENV_ALLOW_CLOUDFRONT_SOURCE, environ)

        report_url = inputs.get("reportUrl")
        if report_url is None:
            report_url = core.env_str(core.ENV_REPORT_URL, environ)
        elif not str(report_url).strip():
            report_url = None

        html_parser = inputs.get("htmlParser")
        if html_parser is None:
            html_parser = core.env_str(core.ENV_HTML_PARSER, environ) or core.DEFAULT_HTML_PARSER

        return cls(
            unsafe_inline_styles=bool(unsafe_styles),
            allow_cloudfront_source=bool(allow_cloudfront),
            report_url=str(report_url).strip() if report_url is not None else None,
            html_parser=html_parser,
        )


@dataclass(frozen=True)
class PageRecord:
    path: str
    hash_lists: HashLists = field(default_factory=HashLists)


@dataclass(frozen=True)
class HeaderBlock:
    """Composed header-rules text for one page."""
    route: str
    text: str


@dataclass(frozen=True)
class BuildSummary:
    """Success report handed back to the host."""
    title: str
    summary: str
    text: str
    pages: int
    tags: int
