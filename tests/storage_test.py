import os
import tempfile
import unittest

from csp_headers.errors import FailureKind, ParseError, WriteError
from csp_headers.models import HeaderBlock
from csp_headers.parser import parse_page
from csp_headers.storage import HeaderFileWriter


class TestHeaderFileWriter(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = os.path.realpath(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_unwritable_header_file(self):
        # A directory where the header file should be cannot be opened for append
        os.makedirs(os.path.join(self.root, "_headers"))
        writer = HeaderFileWriter(self.root)

        with self.assertRaises(WriteError) as cm:
            writer.append([HeaderBlock(route="/", text="/\n    Content-Security-Policy: default-src 'self';\n")])

        self.assertEqual(cm.exception.kind, FailureKind.WRITE)
        self.assertIn("_headers", str(cm.exception))

    def test_appends_after_existing_content(self):
        path = os.path.join(self.root, "_headers")
        with open(path, "w", encoding="utf-8") as f:
            f.write("/*\n    X-Frame-Options: DENY")

        HeaderFileWriter(self.root).append([HeaderBlock(route="/", text="/\n    Content-Security-Policy: x;\n")])

        with open(path, encoding="utf-8") as f:
            lines = f.read().splitlines()
        self.assertEqual(lines[:2], ["/*", "    X-Frame-Options: DENY"])
        self.assertIn("/", lines[2:])


class TestParsePage(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = os.path.realpath(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_non_utf8_page(self):
        path = os.path.join(self.root, "latin1.html")
        with open(path, "wb") as f:
            f.write(b"<html><body>caf\xe9 \xff</body></html>")

        with self.assertRaises(ParseError) as cm:
            parse_page(path)

        self.assertEqual(cm.exception.kind, FailureKind.PARSE)
        self.assertIn(path, str(cm.exception))

    def test_missing_page(self):
        with self.assertRaises(ParseError):
            parse_page(os.path.join(self.root, "gone.html"))


if __name__ == "__main__":
    unittest.main()
