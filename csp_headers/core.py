"""
FILE DESCRIPTION: Foundational module for global configuration and logging.
KEY FUNCTIONS/CLASSES: setup_logger, CompanyFormatter, env_flag, env defaults
"""

import logging
import sys
import os
from datetime import datetime
from pathlib import Path
from dotenv import load_dotenv

from csp_headers.errors import ConfigError

# === CONFIGURATION SECTION ===

# Load .env from the project root, then from the working directory
load_dotenv(Path(__file__).resolve().parents[1] / '.env')
load_dotenv()

# Name of the host header-rules file written at the publish root
HEADERS_FILE_NAME = "_headers"

# Environment variables providing defaults for the per-invocation inputs
ENV_UNSAFE_STYLES = "CSP_HEADERS_UNSAFE_STYLES"
ENV_ALLOW_CLOUDFRONT_SOURCE = "CSP_HEADERS_ALLOW_CLOUDFRONT_SOURCE"
ENV_REPORT_URL = "CSP_HEADERS_REPORT_URL"
ENV_HTML_PARSER = "CSP_HEADERS_HTML_PARSER"

# BeautifulSoup tree builders accepted for page parsing
SUPPORTED_PARSERS = ("html.parser", "lxml")
DEFAULT_HTML_PARSER = "html.parser"

# Thread pool size for directory listing and page hashing
MAX_WORKERS = int(os.getenv("CSP_HEADERS_MAX_WORKERS", 8))

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def env_flag(name, environ=None, default=False):
    """
    Reads a boolean environment variable.
    Unset -> default. Unrecognised values raise ConfigError rather than
    being treated as truthy strings.
    """
    environ = os.environ if environ is None else environ
    raw = environ.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean (true/false), got {raw!r}")


def env_str(name, environ=None):
    environ = os.environ if environ is None else environ
    value = environ.get(name)
    if value is None or not value.strip():
        return None
    return value.strip()


# === LOGGING SECTION ===

class CompanyFormatter(logging.Formatter):
    """
    FLOW: Receives a log record -> Extracts timestamp -> Formats according to company standard
    (e.g., [ Tue Jan 06 05:32:41 AM UTC 2026 ]) -> Prepends level and context -> Returns final string.
    """
    def format(self, record):
        dt = datetime.fromtimestamp(record.created)
        timestamp = dt.strftime("%a %b %d %I:%M:%S %p UTC %Y")
        context = getattr(record, 'context', record.name)
        return f"[ {timestamp} ] : {record.levelname} : {context} : {record.getMessage()}"


def setup_logger(name="csp_headers", log_file=None, level=logging.INFO):
    """
    FLOW: Initializes/Retrieves logger -> Sets propagation for child loggers ->
    Attaches Console handler once and an optional File handler per log path with CompanyFormatter.
    """
    logger = logging.getLogger(name)

    # Child loggers inherit the level of the root 'csp_headers' logger
    if name != "csp_headers":
        logger.propagate = True
        if not logging.getLogger("csp_headers").handlers:
            setup_logger("csp_headers", log_file=log_file, level=level)
        return logger

    logger.setLevel(level)
    formatter = CompanyFormatter()

    # Console handler
    if not logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    # File handler (optional)
    if log_file:
        log_path = os.path.abspath(log_file)
        if not any(getattr(h, "baseFilename", None) == log_path for h in logger.handlers):
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger


# Global logger instance
logger = setup_logger()
