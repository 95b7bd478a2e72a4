import json
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from monogram_core.config import AppConfig, RenderConfig, load_config, save_config, to_avatar_options
from monogram_renderer import InvalidColorHexError, parse_hex


class ConfigTests(unittest.TestCase):
    def test_load_default_when_missing(self):
        with tempfile.TemporaryDirectory() as tmp:
            cfg = load_config(Path(tmp) / "missing.json")
            self.assertIsInstance(cfg, AppConfig)
            self.assertEqual(cfg.render.size, 250)
            self.assertEqual(cfg.render.n_initials, 2)
            self.assertEqual(cfg.render.shape, "square")
            self.assertIsNone(cfg.render.font_path)

    def test_save_and_reload(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            cfg = load_config(path)
            cfg.render.size = 128
            cfg.render.palette = "Berry"
            save_config(cfg, path)
            reloaded = load_config(path)
            self.assertEqual(reloaded.render.size, 128)
            self.assertEqual(reloaded.render.palette, "Berry")

    def test_normalizes_values(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            raw = {
                "render": {"size": -4, "font_size": -1, "n_initials": -2, "shape": "hexagon", "font_path": "  "},
                "logging": {"keep_log_files": 0, "level": "chatty"},
                "unknown": {"x": 1},
            }
            path.write_text(json.dumps(raw), encoding="utf-8")
            cfg = load_config(path)
            self.assertEqual(cfg.render.size, 1)
            self.assertEqual(cfg.render.font_size, 0.0)
            self.assertEqual(cfg.render.n_initials, 0)
            self.assertEqual(cfg.render.shape, "square")
            self.assertIsNone(cfg.render.font_path)
            self.assertEqual(cfg.logging.keep_log_files, 2)
            self.assertEqual(cfg.logging.level, "INFO")

    def test_garbage_file_falls_back_to_defaults(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text("{not json", encoding="utf-8")
            self.assertEqual(load_config(path), AppConfig())
            path.write_text(json.dumps({"render": {"size": "large"}}), encoding="utf-8")
            self.assertEqual(load_config(path), AppConfig())

    def test_bad_config_version_falls_back_to_defaults(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            for version in ("abc", None, [1]):
                path.write_text(json.dumps({"config_version": version, "render": {"size": 64}}), encoding="utf-8")
                self.assertEqual(load_config(path), AppConfig())

    def test_to_avatar_options(self):
        options = to_avatar_options(RenderConfig(size=64, bg_color="#0000ff", palette="Blue Dusk"))
        self.assertEqual(options.size, 64)
        self.assertEqual(options.bg_color, parse_hex("#0000ff"))
        self.assertEqual(len(options.gradient), 2)
        self.assertIsNone(options.font)

    def test_to_avatar_options_bad_color(self):
        with self.assertRaises(InvalidColorHexError):
            to_avatar_options(RenderConfig(text_color="white"))


if __name__ == "__main__":
    unittest.main()
