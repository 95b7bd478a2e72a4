import json
import logging
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from monogram_core.logging_setup import JsonFormatter, configure_logging


class LoggingTests(unittest.TestCase):
    def test_json_formatter_includes_event(self):
        record = logging.LogRecord("monogram.renderer", logging.INFO, __file__, 1, "avatar rendered", None, None)
        record.event = "avatar_rendered"
        payload = json.loads(JsonFormatter().format(record))
        self.assertEqual(payload["level"], "INFO")
        self.assertEqual(payload["logger"], "monogram.renderer")
        self.assertEqual(payload["msg"], "avatar rendered")
        self.assertEqual(payload["event"], "avatar_rendered")

    def test_json_formatter_carries_render_context(self):
        record = logging.LogRecord("monogram.renderer", logging.ERROR, __file__, 1, "font read failed", None, None)
        record.event = "font_read_failed"
        record.path = "/fonts/missing.ttf"
        record.size = 64
        record.unrelated = "dropped"
        payload = json.loads(JsonFormatter().format(record))
        self.assertEqual(payload["path"], "/fonts/missing.ttf")
        self.assertEqual(payload["size"], 64)
        self.assertNotIn("unrelated", payload)
        self.assertNotIn("shape", payload)

    def test_configure_is_idempotent(self):
        with tempfile.TemporaryDirectory() as tmp:
            logger = configure_logging(console=False, directory=Path(tmp))
            count = len(logger.handlers)
            again = configure_logging(console=False, directory=Path(tmp))
            self.assertIs(logger, again)
            self.assertEqual(len(again.handlers), count)
            self.assertGreaterEqual(count, 1)


if __name__ == "__main__":
    unittest.main()
