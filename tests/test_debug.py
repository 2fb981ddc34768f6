from __future__ import annotations

import logging
import os
import tempfile
import unittest

from mdbrowse.debug import LOGGER_NAME, configure_logging, get_logger


class ConfigureLoggingTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        # Leave the package logger silent for the other tests
        self.addCleanup(configure_logging)

    def test_silent_by_default(self) -> None:
        self.assertIsNone(configure_logging())
        handlers = logging.getLogger(LOGGER_NAME).handlers
        self.assertEqual([type(h) for h in handlers], [logging.NullHandler])

    def test_debug_writes_to_given_file(self) -> None:
        path = os.path.join(self._tmp.name, "run.log")
        self.assertEqual(configure_logging(debug=True, log_path=path), path)
        get_logger("state").debug("load failed: path=%s", "a.md")
        for handler in logging.getLogger(LOGGER_NAME).handlers:
            handler.flush()
        with open(path, encoding="utf-8") as fh:
            text = fh.read()
        self.assertIn("DEBUG mdbrowse.state: load failed: path=a.md", text)

    def test_debug_without_path_uses_working_directory(self) -> None:
        cwd = os.getcwd()
        os.chdir(self._tmp.name)
        self.addCleanup(os.chdir, cwd)
        path = configure_logging(debug=True)
        self.assertEqual(os.path.basename(path), "mdbrowse_debug.log")
        self.assertEqual(os.path.realpath(os.path.dirname(path)), os.path.realpath(self._tmp.name))

    def test_reconfiguring_replaces_handlers(self) -> None:
        configure_logging(debug=True, log_path=os.path.join(self._tmp.name, "one.log"))
        configure_logging(debug=True, log_path=os.path.join(self._tmp.name, "two.log"))
        handlers = logging.getLogger(LOGGER_NAME).handlers
        self.assertEqual(len(handlers), 1)
        self.assertTrue(handlers[0].baseFilename.endswith("two.log"))

    def test_unwritable_path_falls_back_to_stderr(self) -> None:
        path = os.path.join(self._tmp.name, "missing", "run.log")
        self.assertIsNone(configure_logging(debug=True, log_path=path))
        handlers = logging.getLogger(LOGGER_NAME).handlers
        self.assertEqual(len(handlers), 1)
        self.assertIs(type(handlers[0]), logging.StreamHandler)


if __name__ == "__main__":
    unittest.main()
