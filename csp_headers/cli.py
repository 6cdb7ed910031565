"""
Command-line entry point (`csp-headers` / `python main.py`).
Runs the post-build hook against a publish directory with a console host.
"""

import argparse
import logging
import sys

from csp_headers.core import setup_logger
from csp_headers.plugin import on_post_build

logger = setup_logger("csp_headers.cli")


class ConsoleStatus:
    def show(self, title, summary, text=""):
        print("\n" + "=" * 60)
        print(title)
        print("=" * 60)
        print(summary)
        if text:
            print(text)
        print("=" * 60)


class ConsoleBuild:
    def __init__(self):
        self.failure = None

    def fail_plugin(self, message, error=None):
        self.failure = message
        print(f"\nCSP header generation failed: {message}", file=sys.stderr)


class ConsoleUtils:
    def __init__(self):
        self.status = ConsoleStatus()
        self.build = ConsoleBuild()


def _add_flag(parser, name, dest, help_text):
    group = parser.add_mutually_exclusive_group()
    group.add_argument(f"--{name}", dest=dest, action="store_const", const=True, default=None, help=help_text)
    group.add_argument(f"--no-{name}", dest=dest, action="store_const", const=False, default=None)


def build_parser():
    parser = argparse.ArgumentParser(description="Generate per-page CSP header rules for a built site.")
    parser.add_argument("publish_dir", help="Build output directory containing the HTML pages")
    _add_flag(parser, "unsafe-styles", "unsafe_styles",
              "Allow all inline styles instead of listing style hashes")
    _add_flag(parser, "allow-cloudfront-source", "allow_cloudfront_source",
              "Add https://*.cloudfront.net to default-src")
    parser.add_argument("--report-url", dest="report_url", default=None,
                        help="Endpoint receiving CSP violation reports")
    parser.add_argument("--parser", dest="html_parser", choices=["html.parser", "lxml"], default=None,
                        help="BeautifulSoup tree builder used to parse pages")
    parser.add_argument("--log-file", dest="log_file", default=None, help="Also write logs to this file")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    setup_logger("csp_headers", log_file=args.log_file,
                 level=logging.DEBUG if args.verbose else logging.INFO)

    inputs = {
        "unsafeStyles": args.unsafe_styles,
        "allowCloudfrontSource": args.allow_cloudfront_source,
        "reportUrl": args.report_url,
        "htmlParser": args.html_parser,
    }
    utils = ConsoleUtils()
    on_post_build({"PUBLISH_DIR": args.publish_dir}, utils, inputs)

    if utils.build.failure is not None:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
