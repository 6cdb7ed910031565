"""
Tag predicates and classification precedence.
"""

import unittest

from bs4 import BeautifulSoup

from csp_headers.classifier import classify, is_css_link, is_script_tag, is_style_tag, matches_csp_tag
from csp_headers.models import TagKind


def first_tag(markup, name):
    return BeautifulSoup(markup, "html.parser").find(name)


class TestTagPredicates(unittest.TestCase):
    def test_script_without_type_is_javascript(self):
        self.assertTrue(is_script_tag(first_tag("<script>x()</script>", "script")))

    def test_script_with_javascript_types(self):
        for script_type in ("text/javascript", "module", "Application/JavaScript", " text/ecmascript "):
            tag = first_tag(f'<script type="{script_type}">x()</script>', "script")
            self.assertTrue(is_script_tag(tag), script_type)

    def test_script_with_data_type_is_not_matched(self):
        tag = first_tag('<script type="application/ld+json">{}</script>', "script")
        self.assertFalse(is_script_tag(tag))
        self.assertFalse(matches_csp_tag(tag))

    def test_script_language_attribute(self):
        self.assertTrue(is_script_tag(first_tag('<script language="JavaScript">x()</script>', "script")))
        self.assertFalse(is_script_tag(first_tag('<script language="vbscript">x()</script>', "script")))

    def test_style_types(self):
        self.assertTrue(is_style_tag(first_tag("<style>a{}</style>", "style")))
        self.assertTrue(is_style_tag(first_tag('<style type="TEXT/CSS">a{}</style>', "style")))
        self.assertFalse(is_style_tag(first_tag('<style type="text/less">a{}</style>', "style")))

    def test_css_link_requires_stylesheet_rel(self):
        self.assertTrue(is_css_link(first_tag('<link rel="stylesheet" href="/a.css">', "link")))
        self.assertTrue(is_css_link(first_tag('<link rel="alternate Stylesheet" href="/a.css">', "link")))
        self.assertFalse(is_css_link(first_tag('<link rel="icon" href="/favicon.ico">', "link")))
        self.assertFalse(is_css_link(first_tag('<link rel="stylesheet" type="text/less" href="/a.less">', "link")))

    def test_other_tags_are_not_matched(self):
        self.assertFalse(matches_csp_tag(first_tag('<img src="/a.png">', "img")))


class TestClassify(unittest.TestCase):
    def test_inline_script(self):
        result = classify(first_tag("<script>x()</script>", "script"))
        self.assertEqual(result.kind, TagKind.INLINE_SCRIPT)
        self.assertIsNone(result.source)

    def test_inline_style(self):
        self.assertEqual(classify(first_tag("<style>a{}</style>", "style")).kind, TagKind.INLINE_STYLE)

    def test_external_script_uses_literal_src(self):
        result = classify(first_tag('<script src="https://cdn.example.com/app.js?v=1"></script>', "script"))
        self.assertEqual(result.kind, TagKind.EXTERNAL_SCRIPT)
        self.assertEqual(result.source, "https://cdn.example.com/app.js?v=1")

    def test_style_with_src_is_external_style(self):
        result = classify(first_tag('<style src="/theme.css"></style>', "style"))
        self.assertEqual(result.kind, TagKind.EXTERNAL_STYLE)
        self.assertEqual(result.source, "/theme.css")

    def test_stylesheet_link_uses_literal_href(self):
        result = classify(first_tag('<link rel="stylesheet" href="/css/site.css">', "link"))
        self.assertEqual(result.kind, TagKind.EXTERNAL_STYLE)
        self.assertEqual(result.source, "/css/site.css")

    def test_link_without_href_is_ignored(self):
        self.assertEqual(classify(first_tag('<link rel="stylesheet">', "link")).kind, TagKind.IGNORE)

    def test_empty_src_counts_as_inline(self):
        result = classify(first_tag('<script src="">x()</script>', "script"))
        self.assertEqual(result.kind, TagKind.INLINE_SCRIPT)


if __name__ == "__main__":
    unittest.main()
