import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from monogram_renderer.errors import PaletteConfigError
from monogram_renderer.palettes import DEFAULT_PALETTE_NAME, PALETTE_SOURCES, get_palette, list_palettes, load_palettes


class PaletteTests(unittest.TestCase):
    def test_builtin_palettes_validate(self):
        tables = load_palettes()
        self.assertEqual(set(tables), set(PALETTE_SOURCES))
        self.assertIn(DEFAULT_PALETTE_NAME, list_palettes())

    def test_get_palette(self):
        table = get_palette(DEFAULT_PALETTE_NAME)
        self.assertEqual(table[0].color.hex(), "#82a7e8")
        self.assertEqual(table[-1].position, 1.0)
        self.assertEqual(len(get_palette(None)), 0)
        self.assertEqual(len(get_palette("")), 0)

    def test_unknown_palette(self):
        with self.assertRaises(ValueError):
            get_palette("No Such Palette")

    def test_all_problems_reported(self):
        with self.assertRaises(PaletteConfigError) as ctx:
            load_palettes(
                {
                    "ok": (("#000000", 0.0), ("#ffffff", 1.0)),
                    "bad-hex": (("#zzzzzz", 0.0),),
                    "unsorted": (("#000", 0.9), ("#fff", 0.1)),
                    "empty": (),
                }
            )
        problems = ctx.exception.problems
        self.assertEqual(len(problems), 3)
        self.assertTrue(any(p.startswith("bad-hex") for p in problems))
        self.assertTrue(any(p.startswith("unsorted") for p in problems))
        self.assertTrue(any(p.startswith("empty") for p in problems))


if __name__ == "__main__":
    unittest.main()
