"""
Generates per-page Content-Security-Policy header rules for a built static site.
"""

__version__ = "1.0.0"
