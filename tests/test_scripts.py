from __future__ import annotations

import unittest

from quicktrans.scripts import ScriptClass, classify, detect_character_sets


class ScriptClassifierTests(unittest.TestCase):
    def test_space_separated_scripts_use_boundaries(self) -> None:
        for word in ["hello", "мир", "καλημέρα", "שלום", "مرحبا", "नमस्ते", "สวัสดี", "ბარი"]:
            with self.subTest(word=word):
                self.assertIs(classify(word), ScriptClass.BOUNDARY)

    def test_cjk_and_unknown_scripts_do_not(self) -> None:
        for word in ["你好", "こんにちは", "カタカナ", "안녕", "123", "!!"]:
            with self.subTest(word=word):
                self.assertIs(classify(word), ScriptClass.NO_BOUNDARY)

    def test_one_boundary_character_is_enough(self) -> None:
        self.assertIs(classify("中文a"), ScriptClass.BOUNDARY)

    def test_detect_character_sets(self) -> None:
        self.assertEqual(detect_character_sets("hello"), {"Latin"})
        self.assertEqual(detect_character_sets("漢字かな"), {"Chinese", "Japanese"})
        self.assertEqual(detect_character_sets("42"), set())


if __name__ == "__main__":
    unittest.main()
