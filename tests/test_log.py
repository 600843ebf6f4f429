"""
Tests for the logging helpers.
"""

import logging
import os
import tempfile
import unittest
from unittest.mock import call, patch

from link_checker.utils.log import (
    _AnnotationFormatter,
    ci_section,
    highlight_tags,
    in_ci,
    log,
    setup_logging,
)


def _record(level, msg):
    return logging.LogRecord("link-checker", level, __file__, 1, msg, None, None)


class TestHighlightTags(unittest.TestCase):
    def test_known_tag_coloured(self):
        styled = highlight_tags("[BROKEN] https://example.com/")
        self.assertIn("\033[1;31m[BROKEN]\033[0m", styled)

    def test_unknown_tag_untouched(self):
        self.assertEqual(highlight_tags("[OTHER] x"), "[OTHER] x")

    def test_plain_message_untouched(self):
        self.assertEqual(highlight_tags("nothing here"), "nothing here")


class TestAnnotationFormatter(unittest.TestCase):
    def setUp(self):
        self.fmt = _AnnotationFormatter("%(message)s")

    def test_error_annotation(self):
        self.assertEqual(self.fmt.format(_record(logging.ERROR, "boom")), "::error::boom")

    def test_critical_annotation(self):
        self.assertEqual(self.fmt.format(_record(logging.CRITICAL, "x")), "::error::x")

    def test_warning_annotation(self):
        self.assertEqual(self.fmt.format(_record(logging.WARNING, "hm")), "::warning::hm")

    def test_info_plain(self):
        self.assertEqual(self.fmt.format(_record(logging.INFO, "fine")), "fine")


class TestCISection(unittest.TestCase):
    @patch.dict(os.environ, {"GITHUB_ACTIONS": "true"})
    def test_in_ci(self):
        self.assertTrue(in_ci())

    @patch.dict(os.environ, {}, clear=True)
    def test_not_in_ci(self):
        self.assertFalse(in_ci())

    @patch.dict(os.environ, {"GITHUB_ACTIONS": "true"})
    @patch("builtins.print")
    def test_group_wraps_block(self, mock_print):
        with ci_section("Broken links"):
            mock_print("inside")
        self.assertEqual(mock_print.call_args_list, [
            call("::group::Broken links", flush=True),
            call("inside"),
            call("::endgroup::", flush=True),
        ])

    @patch.dict(os.environ, {"GITHUB_ACTIONS": "true"})
    @patch("builtins.print")
    def test_group_closed_on_error(self, mock_print):
        with self.assertRaises(RuntimeError):
            with ci_section("x"):
                raise RuntimeError
        mock_print.assert_called_with("::endgroup::", flush=True)

    @patch.dict(os.environ, {}, clear=True)
    @patch("builtins.print")
    def test_silent_outside_ci(self, mock_print):
        with ci_section("x"):
            pass
        mock_print.assert_not_called()


class TestSetupLogging(unittest.TestCase):
    def tearDown(self):
        for handler in log.handlers:
            handler.close()
        log.handlers.clear()
        log.setLevel(logging.NOTSET)

    @patch.dict(os.environ, {}, clear=True)
    def test_debug_level(self):
        setup_logging(debug=True)
        self.assertEqual(log.level, logging.DEBUG)
        self.assertEqual(len(log.handlers), 1)

    @patch.dict(os.environ, {}, clear=True)
    def test_info_by_default(self):
        setup_logging()
        self.assertEqual(log.level, logging.INFO)

    @patch.dict(os.environ, {"GITHUB_ACTIONS": "true"})
    def test_ci_formatter_selected(self):
        setup_logging()
        self.assertIsInstance(log.handlers[0].formatter, _AnnotationFormatter)

    @patch.dict(os.environ, {}, clear=True)
    def test_log_file_receives_debug(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "run.log")
            setup_logging(log_file=path)
            log.debug("[PROBE] detail")
            for handler in log.handlers:
                handler.flush()
            with open(path, encoding="utf-8") as fh:
                self.assertIn("[PROBE] detail", fh.read())
            self.assertEqual(log.handlers[0].level, logging.INFO)
            for handler in log.handlers:
                handler.close()
            log.handlers.clear()


if __name__ == "__main__":
    unittest.main()
