from __future__ import annotations

import unittest

from quicktrans.directives import AppendTo, PrependTo, Replace, effective_replacement, parse_directive


class DirectiveTests(unittest.TestCase):
    def test_plain_target_replaces(self) -> None:
        self.assertEqual(parse_directive("world"), Replace("world"))
        self.assertEqual(parse_directive(""), Replace(""))
        self.assertEqual(parse_directive("a+b"), Replace("a+b"))

    def test_markers_are_stripped(self) -> None:
        self.assertEqual(parse_directive("+really"), AppendTo("really"))
        self.assertEqual(parse_directive("++really"), AppendTo("really"))
        self.assertEqual(parse_directive("-very"), PrependTo("very"))
        self.assertEqual(parse_directive("---very"), PrependTo("very"))

    def test_effective_replacement(self) -> None:
        self.assertEqual(effective_replacement("good", "+really"), "good really")
        self.assertEqual(effective_replacement("good", "-very"), "very good")
        self.assertEqual(effective_replacement("good", "bad"), "bad")
        self.assertEqual(effective_replacement("good", ""), "")


if __name__ == "__main__":
    unittest.main()
