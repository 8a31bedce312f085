"""Tests for line break and indentation handling."""

import unittest

from pyonenote.rendering.whitespace import fix_newlines


class FixNewlinesTest(unittest.TestCase):
    def test_line_feed(self):
        self.assertEqual(fix_newlines("a\nb"), "a<br>b")

    def test_leading_spaces_after_break(self):
        self.assertEqual(fix_newlines("\n  x"), "<br>&nbsp;&nbsp;x")

    def test_crlf_gives_two_breaks(self):
        self.assertEqual(fix_newlines("a\r\nb"), "a<br><br>b")

    def test_vertical_tab(self):
        self.assertEqual(fix_newlines("a\x0bb"), "a<br>b")

    def test_inner_spaces_untouched(self):
        self.assertEqual(fix_newlines("a  b"), "a  b")
        self.assertEqual(fix_newlines("  a"), "  a")

    def test_each_break_keeps_its_indent(self):
        self.assertEqual(
            fix_newlines("\n \n  y"), "<br>&nbsp;<br>&nbsp;&nbsp;y"
        )

    def test_trailing_spaces(self):
        self.assertEqual(fix_newlines("a\n   "), "a<br>&nbsp;&nbsp;&nbsp;")

    def test_empty(self):
        self.assertEqual(fix_newlines(""), "")


if __name__ == "__main__":
    unittest.main()
