"""
Page discovery for the publish directory.
Recursively collects every `.html` file under a root.
"""

import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import List, Tuple

from csp_headers.core import MAX_WORKERS, setup_logger
from csp_headers.errors import ScanError

logger = setup_logger("csp_headers.scanner")

PAGE_EXTENSION = ".html"


def _list_directory(directory: str) -> Tuple[List[str], List[str]]:
    """
    Lists one directory.
    Returns (page files, subdirectories). Symlinked entries are skipped.
    """
    pages = []
    subdirs = []
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                if entry.is_dir(follow_symlinks=False):
                    subdirs.append(entry.path)
                elif entry.is_file(follow_symlinks=False) and entry.name.endswith(PAGE_EXTENSION):
                    pages.append(entry.path)
    except OSError as e:
        raise ScanError(f"Unable to read directory: {e.strerror or e}", path=directory) from e
    return pages, subdirs


def scan_pages(root: str, max_workers: int = MAX_WORKERS) -> List[str]:
    """
    Collects all page files reachable from `root`.

    Each level fans out one listing task per directory and joins them
    before descending. The first failing listing aborts the scan.
    """
    root = os.path.abspath(root)
    if not os.path.isdir(root):
        raise ScanError("Publish directory does not exist or is not a directory", path=root)

    pages: List[str] = []
    level = [root]

    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="Scan") as executor:
        while level:
            future_to_dir = {executor.submit(_list_directory, d): d for d in level}
            results = {}
            try:
                for future in as_completed(future_to_dir):
                    results[future_to_dir[future]] = future.result()
            except ScanError:
                for future in future_to_dir:
                    future.cancel()
                raise

            next_level = []
            for directory in level:
                found, subdirs = results[directory]
                pages.extend(found)
                next_level.extend(subdirs)
            level = next_level

    logger.info(f"[SCAN] Found {len(pages)} page(s) under {root}")
    return pages
