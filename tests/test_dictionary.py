from __future__ import annotations

import tempfile
import unittest
from pathlib import Path

from quicktrans.dictionary import load_dictionary, normalize_mapping, normalize_nfc, parse_dictionary
from quicktrans.errors import DictionaryNotFoundError, DictionaryReadError

SAMPLE_MAP = """# greetings
// also a comment
hello, hi : greetings
: orphan target
colon: a:b
empty:

Hello: Hey
nocolon
 , ,: nothing
good: +really
"""


class ParseDictionaryTests(unittest.TestCase):
    def test_parses_rules_in_file_order(self) -> None:
        mapping = parse_dictionary(SAMPLE_MAP)

        self.assertEqual(
            list(mapping.items()),
            [
                ("hello", "greetings"),
                ("hi", "greetings"),
                ("colon", "a:b"),
                ("empty", ""),
                ("Hello", "Hey"),
                ("nocolon", ""),
                ("good", "+really"),
            ],
        )

    def test_last_duplicate_wins(self) -> None:
        mapping = parse_dictionary("x: 1\ny: 2\nx: 3\n")

        self.assertEqual(mapping, {"x": "3", "y": "2"})
        self.assertEqual(list(mapping), ["x", "y"])

    def test_accepts_all_line_endings(self) -> None:
        mapping = parse_dictionary("a: 1\r\nb: 2\rc: 3\n")
        self.assertEqual(mapping, {"a": "1", "b": "2", "c": "3"})

    def test_keys_and_targets_are_nfc(self) -> None:
        mapping = parse_dictionary("café: crème\n")
        self.assertEqual(mapping, {"caf\u00e9": "cr\u00e8me"})

    def test_single_slash_is_not_a_comment(self) -> None:
        self.assertEqual(parse_dictionary("/usr: path\n"), {"/usr": "path"})

    def test_normalize_nfc_is_identity_for_composed_text(self) -> None:
        self.assertEqual(normalize_nfc("café"), "café")

    def test_normalize_nfc_composes_decomposed_text(self) -> None:
        self.assertEqual(normalize_nfc("cafe\u0301"), "caf\u00e9")

    def test_normalize_mapping_drops_blank_keys(self) -> None:
        self.assertEqual(normalize_mapping({" x ": "y", "  ": "z", "é": None}), {"x": "y", "é": ""})


class LoadDictionaryTests(unittest.TestCase):
    def test_loads_utf8_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "map.txt"
            path.write_text("你好: Hello\nмир: world\n", encoding="utf-8")

            mapping = load_dictionary(path)

        self.assertEqual(mapping, {"你好": "Hello", "мир": "world"})

    def test_falls_back_to_latin1(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "map.txt"
            path.write_bytes(b"caf\xe9: coffee\n")

            mapping = load_dictionary(path)

        self.assertEqual(mapping, {"café": "coffee"})

    def test_none_path_yields_empty_mapping(self) -> None:
        self.assertEqual(load_dictionary(None), {})

    def test_missing_file_raises_not_found(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(DictionaryNotFoundError) as ctx:
                load_dictionary(Path(tmp) / "missing.txt")
        self.assertIsInstance(ctx.exception, FileNotFoundError)

    def test_unreadable_path_raises_read_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(DictionaryReadError):
                load_dictionary(Path(tmp))

    def test_byte_order_mark_is_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            commented = Path(tmp) / "commented.txt"
            commented.write_text("\ufeff# c\nhello: hi\n", encoding="utf-8")
            leading_rule = Path(tmp) / "rule.txt"
            leading_rule.write_text("\ufeffhello: hi\n", encoding="utf-8")

            self.assertEqual(load_dictionary(commented), {"hello": "hi"})
            self.assertEqual(load_dictionary(leading_rule), {"hello": "hi"})


if __name__ == "__main__":
    unittest.main()
