"""
FILE DESCRIPTION: Header generation pipeline.
FLOW: scan pages -> parse + hash each page in parallel -> build Report-To once ->
compose one record per page -> single append to the header file.
KEY FUNCTIONS/CLASSES: process_page, hash_pages, generate_headers, GenerationResult
"""

import os
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import List, Optional, Tuple

from csp_headers.composer import compose_header
from csp_headers.core import MAX_WORKERS, setup_logger
from csp_headers.hasher import collect_hashes
from csp_headers.models import HeaderBlock, PageRecord, PolicyConfig
from csp_headers.parser import parse_page
from csp_headers.report import build_report_group
from csp_headers.scanner import scan_pages
from csp_headers.storage import HeaderFileWriter

logger = setup_logger("csp_headers.engine")


@dataclass(frozen=True)
class GenerationResult:
    records: Tuple[PageRecord, ...]
    blocks: Tuple[HeaderBlock, ...]
    headers_path: str

    @property
    def tag_count(self) -> int:
        return sum(record.hash_lists.tag_count for record in self.records)


def process_page(path: str, config: PolicyConfig) -> PageRecord:
    tree = parse_page(path, parser=config.html_parser)
    hash_lists = collect_hashes(tree, path=path)
    logger.debug(
        f"[HASH] {path}: script={len(hash_lists.script)} style={len(hash_lists.style)}",
        extra={"context": threading.current_thread().name},
    )
    return PageRecord(path=path, hash_lists=hash_lists)


def hash_pages(pages: List[str], config: PolicyConfig, max_workers: int = MAX_WORKERS) -> List[PageRecord]:
    """
    Processes every page on a thread pool.
    The first failure cancels pending pages and is re-raised; records come back in scan order.
    """
    if not pages:
        return []

    records = {}
    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="Worker") as executor:
        future_to_path = {executor.submit(process_page, path, config): path for path in pages}
        try:
            for future in as_completed(future_to_path):
                records[future_to_path[future]] = future.result()
        except Exception:
            for future in future_to_path:
                future.cancel()
            raise

    return [records[path] for path in pages]


def generate_headers(root: str, config: PolicyConfig, max_workers: Optional[int] = None) -> GenerationResult:
    """
    Runs the full pipeline against `root` and appends the records to its header file.
    Nothing is written unless every page was processed.
    """
    root = os.path.abspath(root)
    max_workers = max_workers or MAX_WORKERS

    logger.info(f"[SCAN] Scanning {root}")
    pages = scan_pages(root, max_workers=max_workers)
    records = hash_pages(pages, config, max_workers=max_workers)

    report_to = build_report_group(config.report_url)
    blocks = [compose_header(record, root, report_to, config) for record in records]
    logger.info(f"[POLICY] Composed {len(blocks)} record(s)")

    writer = HeaderFileWriter(root)
    writer.append(blocks)

    return GenerationResult(records=tuple(records), blocks=tuple(blocks), headers_path=writer.path)
