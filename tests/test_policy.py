#!/usr/bin/env python3
"""
Tests for the comment policy gate
"""

import unittest
from unittest.mock import patch

import helpers  # noqa: F401
from constants import NOT_IN_PULL_REQUEST_WARNING
from models import RunContext
from policy import gate, should_comment


class TestShouldComment(unittest.TestCase):

    def test_always(self):
        self.assertTrue(should_comment("always", False, True))
        self.assertTrue(should_comment("always", True, True))

    def test_on_failure(self):
        self.assertFalse(should_comment("on-failure", False, True))
        self.assertTrue(should_comment("on-failure", True, True))

    def test_other_policies_never_comment(self):
        for policy in ("never", "", "sometimes", "ALWAYS"):
            self.assertFalse(should_comment(policy, True, True), policy)

    def test_requires_pull_request_context(self):
        for policy in ("always", "on-failure", "never"):
            self.assertFalse(should_comment(policy, True, False), policy)


class TestGate(unittest.TestCase):

    @patch("actions.warning")
    def test_outside_pull_request_warns(self, mock_warning):
        context = RunContext(owner="octo", repo="app", run_failed=True)

        self.assertFalse(gate("always", context))
        mock_warning.assert_called_once_with(NOT_IN_PULL_REQUEST_WARNING)

    @patch("actions.warning")
    def test_policy_skip_is_silent(self, mock_warning):
        context = RunContext(owner="octo", repo="app", pull_request_number=7)

        self.assertFalse(gate("on-failure", context))
        mock_warning.assert_not_called()

    @patch("actions.warning")
    def test_passes(self, mock_warning):
        context = RunContext(owner="octo", repo="app", pull_request_number=7, run_failed=True)

        self.assertTrue(gate("on-failure", context))
        mock_warning.assert_not_called()


if __name__ == "__main__":
    unittest.main()
