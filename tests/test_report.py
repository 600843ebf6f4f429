"""
Tests for result reporting and GitHub Actions step outputs.
"""

import json
import os
import tempfile
import unittest
from unittest.mock import patch

from link_checker.core.checker import LinkResult
from link_checker.report import log_report, set_output, summarise, write_github_outputs

RESULTS = [
    LinkResult("https://example.com/", 200, None, "10.0ms"),
    LinkResult("https://example.com/gone", 404, "HTTP 404 Not Found", "12.0ms"),
    LinkResult("https://example.com/moved", 301, None, "8.0ms"),
    LinkResult("https://down.example.com/", 0, "request failed: refused", "1.000s"),
]


class _OutputFileTestCase(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmpdir.name, "output")
        patcher = patch.dict(os.environ, {"GITHUB_OUTPUT": self.path})
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(self.tmpdir.cleanup)

    def read_output(self):
        with open(self.path, encoding="utf-8") as fh:
            return fh.read()


class TestSummarise(unittest.TestCase):
    def test_broken_in_input_order(self):
        broken = summarise(RESULTS)
        self.assertEqual(
            [r.url for r in broken],
            ["https://example.com/gone", "https://down.example.com/"],
        )

    def test_log_report_returns_broken(self):
        with self.assertLogs("link-checker", level="INFO") as logs:
            broken = log_report(RESULTS)
        self.assertEqual(len(broken), 2)
        output = "\n".join(logs.output)
        self.assertIn("Total links checked: 4", output)
        self.assertIn("[BROKEN] https://example.com/gone (Status: 404)", output)

    def test_log_report_all_ok(self):
        with self.assertLogs("link-checker", level="INFO") as logs:
            broken = log_report(RESULTS[:1])
        self.assertEqual(broken, [])
        self.assertTrue(any("No broken links found" in line for line in logs.output))


class TestSetOutput(_OutputFileTestCase):
    def test_single_line(self):
        set_output("count", "3")
        self.assertEqual(self.read_output(), "count=3\n")

    def test_multi_line_uses_delimiter(self):
        set_output("body", "a\nb")
        self.assertEqual(self.read_output(), "body<<EOF\na\nb\nEOF\n")

    def test_appends(self):
        set_output("a", "1")
        set_output("b", "2")
        self.assertEqual(self.read_output(), "a=1\nb=2\n")


class TestSetOutputWithoutEnv(unittest.TestCase):
    @patch.dict(os.environ, {}, clear=True)
    def test_no_op(self):
        with patch("builtins.open") as mock_open:
            set_output("count", "3")
        mock_open.assert_not_called()


class TestWriteGithubOutputs(_OutputFileTestCase):
    def test_outputs(self):
        write_github_outputs(RESULTS)
        lines = self.read_output().splitlines()
        self.assertEqual(lines[0], "total-links-checked=4")
        self.assertEqual(lines[1], "broken-links-count=2")
        name, _, payload = lines[2].partition("=")
        self.assertEqual(name, "broken-links")
        broken = json.loads(payload)
        self.assertEqual(broken[0], {
            "url": "https://example.com/gone",
            "status_code": 404,
            "error": "HTTP 404 Not Found",
            "duration": "12.0ms",
        })
        self.assertEqual(broken[1]["status_code"], 0)

    def test_no_broken_links(self):
        write_github_outputs(RESULTS[:1])
        self.assertIn("broken-links=[]\n", self.read_output())


if __name__ == "__main__":
    unittest.main()
