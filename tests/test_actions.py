#!/usr/bin/env python3
"""
Tests for the runner helpers
"""

import io
import os
import tempfile
import unittest
from unittest.mock import patch

import helpers  # noqa: F401
import actions


class TestWorkflowCommands(unittest.TestCase):

    @patch("sys.stdout", new_callable=io.StringIO)
    def test_warning_is_escaped(self, mock_stdout):
        actions.warning("line one\nline two 100%")

        self.assertEqual(mock_stdout.getvalue(), "::warning::line one%0Aline two 100%25\n")

    @patch("sys.stdout", new_callable=io.StringIO)
    def test_debug(self, mock_stdout):
        actions.debug("details")

        self.assertEqual(mock_stdout.getvalue(), "::debug::details\n")


class TestSetOutput(unittest.TestCase):

    def test_writes_multiline_value(self):
        with tempfile.TemporaryDirectory() as tmp:
            output_path = os.path.join(tmp, "output")
            with patch.dict(os.environ, {"GITHUB_OUTPUT": output_path}):
                actions.set_output("comment-content", "# Summary\n\nAll good")

            with open(output_path, encoding="utf-8") as f:
                lines = f.read().splitlines()

        self.assertTrue(lines[0].startswith("comment-content<<ghadelimiter_"))
        delimiter = lines[0].split("<<", 1)[1]
        self.assertEqual(lines[1:4], ["# Summary", "", "All good"])
        self.assertEqual(lines[4], delimiter)

    @patch("sys.stdout", new_callable=io.StringIO)
    def test_without_output_file(self, mock_stdout):
        with patch.dict(os.environ, {}, clear=True):
            actions.set_output("comment-content", "abc")

        self.assertIn("::debug::", mock_stdout.getvalue())


if __name__ == "__main__":
    unittest.main()
