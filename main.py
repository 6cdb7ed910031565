"""
Entry point for CSP header generation.
Usage: python main.py <publish_dir> [--unsafe-styles] [--allow-cloudfront-source] [--report-url URL]
"""

import sys

from csp_headers.cli import main

if __name__ == "__main__":
    sys.exit(main())
