import os
import tempfile
import unittest

from csp_headers.cli import build_parser, main


class TestCli(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = os.path.realpath(self._tmp.name)
        with open(os.path.join(self.root, "index.html"), "w", encoding="utf-8") as f:
            f.write("<html><head><script>go()</script></head></html>")

    def tearDown(self):
        self._tmp.cleanup()

    def test_flags_default_to_unset(self):
        args = build_parser().parse_args([self.root])
        self.assertIsNone(args.unsafe_styles)
        self.assertIsNone(args.allow_cloudfront_source)
        self.assertIsNone(args.report_url)

    def test_negated_flag(self):
        args = build_parser().parse_args([self.root, "--no-unsafe-styles", "--allow-cloudfront-source"])
        self.assertIs(args.unsafe_styles, False)
        self.assertIs(args.allow_cloudfront_source, True)

    def test_successful_run(self):
        code = main([self.root, "--allow-cloudfront-source", "--report-url", "https://example.com/csp"])
        self.assertEqual(code, 0)
        with open(os.path.join(self.root, "_headers"), encoding="utf-8") as f:
            content = f.read()
        self.assertIn("default-src 'self' https://*.cloudfront.net;", content)
        self.assertIn("Report-To: ", content)

    def test_failed_run_exit_code(self):
        self.assertEqual(main([os.path.join(self.root, "missing")]), 1)


if __name__ == "__main__":
    unittest.main()
