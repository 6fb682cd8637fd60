import logging
import os
import tempfile
import unittest
from unittest.mock import patch

from eqquiz.logging_setup import setup_logging
from eqquiz.state.paths import log_file


class LoggingSetupTests(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.env = patch.dict(os.environ, {"HOME": self.tmp.name})
        self.env.start()
        root = logging.getLogger()
        self.saved = (root.handlers[:], root.level)

    def tearDown(self):
        root = logging.getLogger()
        for h in root.handlers[:]:
            root.removeHandler(h)
            h.close()
        handlers, level = self.saved
        for h in handlers:
            root.addHandler(h)
        root.setLevel(level)
        self.env.stop()
        self.tmp.cleanup()

    def _file_handlers(self):
        return [h for h in logging.getLogger().handlers if isinstance(h, logging.FileHandler)]

    def test_repeated_setup_keeps_one_file_handler(self):
        setup_logging(0)
        first = self._file_handlers()
        setup_logging(2)
        handlers = self._file_handlers()
        self.assertEqual(len(handlers), 1)
        self.assertIsNone(first[0].stream)
        self.assertEqual(logging.getLogger().level, logging.DEBUG)

    def test_info_reaches_log_file(self):
        setup_logging(0)
        logging.getLogger("eqquiz.test").info("round started")
        for h in self._file_handlers():
            h.flush()
        self.assertIn("round started", log_file().read_text())

    def test_console_only(self):
        setup_logging(1, to_file=False)
        self.assertEqual(self._file_handlers(), [])
        self.assertEqual(logging.getLogger().level, logging.INFO)


if __name__ == "__main__":
    unittest.main()
