import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from monogram_renderer.initials import extract_initials, is_email, is_skip


class ExtractInitialsTests(unittest.TestCase):
    def test_first_and_last_name(self):
        self.assertEqual(extract_initials("John Smith", 2), "JS")

    def test_lowercase_word_is_padded(self):
        self.assertEqual(extract_initials("alice", 2), "al")

    def test_email_uses_local_part(self):
        self.assertEqual(extract_initials("alice@example.com", 2), "al")
        self.assertEqual(extract_initials("john.smith@example.com", 2), "js")

    def test_quoted_local_part(self):
        self.assertEqual(extract_initials('"john doe"@example.com', 2), "jd")

    def test_camel_case_boundary_then_padding(self):
        self.assertEqual(extract_initials("McDonald", 3), "MDc")
        self.assertEqual(extract_initials("camelCaseName", 3), "cCN")

    def test_never_exceeds_limit(self):
        self.assertEqual(extract_initials("Anna Beth Clara Dora", 2), "AB")
        for n in range(0, 6):
            self.assertLessEqual(len(extract_initials("Jean-Luc Picard of Enterprise", n)), n)

    def test_empty_and_zero(self):
        self.assertEqual(extract_initials("", 2), "")
        self.assertEqual(extract_initials("John Smith", 0), "")

    def test_punctuated_names(self):
        self.assertEqual(extract_initials("John-Paul Sartre", 3), "JPS")
        self.assertEqual(extract_initials("  john  ", 2), "jo")

    def test_only_skip_characters(self):
        self.assertEqual(extract_initials("@@ -- !!", 2), "")

    def test_mixed_scripts(self):
        self.assertEqual(extract_initials("РЩ", 2), "РЩ")
        self.assertEqual(extract_initials("Иван Петров", 2), "ИП")
        self.assertEqual(extract_initials("张伟", 2), "张伟")

    def test_digits(self):
        self.assertEqual(extract_initials("30MPC", 2), "30")


class HelperTests(unittest.TestCase):
    def test_is_email(self):
        self.assertTrue(is_email("alice@example.com"))
        self.assertTrue(is_email("user.name+tag@sub.example.org"))
        self.assertTrue(is_email("alice@example.com."))
        self.assertFalse(is_email("a@b"))
        self.assertFalse(is_email("John Smith"))
        self.assertFalse(is_email("alice@example.com\n"))

    def test_is_skip(self):
        for ch in " \t.-_@#$+€":
            self.assertTrue(is_skip(ch), ch)
        for ch in "aZ9Жあ":
            self.assertFalse(is_skip(ch), ch)


if __name__ == "__main__":
    unittest.main()
