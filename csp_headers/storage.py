import os
from typing import Iterable

from csp_headers.core import HEADERS_FILE_NAME, setup_logger
from csp_headers.errors import WriteError
from csp_headers.models import HeaderBlock

logger = setup_logger("csp_headers.storage")

RECORD_DELIMITER = "\n"


class HeaderFileWriter:
    """
    Appends composed records to the host header-rules file at the publish root.
    The file is never truncated or merged by route; repeated runs accumulate records.
    """

    def __init__(self, root: str, file_name: str = HEADERS_FILE_NAME):
        self.path = os.path.join(root, file_name)

    def render(self, blocks: Iterable[HeaderBlock]) -> str:
        if not blocks:
            return ""
        # Leading delimiter keeps the first route on its own line after prior content
        return RECORD_DELIMITER + RECORD_DELIMITER.join(block.text for block in blocks)

    def append(self, blocks: Iterable[HeaderBlock]) -> int:
        """
        Writes all blocks in a single append. Returns the number of records written.
        """
        blocks = list(blocks)
        payload = self.render(blocks)
        try:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(payload)
        except OSError as e:
            raise WriteError(f"Unable to append to header file: {e.strerror or e}", path=self.path) from e

        logger.info(f"[WRITE] Appended {len(blocks)} record(s) to {self.path}")
        return len(blocks)
