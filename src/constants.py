#!/usr/bin/env python3
"""
Constants for the PR summary comment action
"""

# Comment marker appended to every managed comment (for update/replace functionality)
COMMENT_MARKER = "<!-- dependency-review-pr-comment-marker -->"

# GitHub rejects issue comments at or above this many characters
MAX_COMMENT_LENGTH = 65536

# Joins the comment content and the marker
COMMENT_SEPARATOR = "\n\n"

# Step output carrying the raw rendered summary
COMMENT_CONTENT_OUTPUT = "comment-content"

# Comment policies accepted by the comment-summary-in-pr input
POLICY_ALWAYS = "always"
POLICY_ON_FAILURE = "on-failure"
POLICY_NEVER = "never"

# REST endpoint for github.com, GHES runners set GITHUB_API_URL
DEFAULT_API_URL = "https://api.github.com"

# Remote client tuning
COMMENTS_PER_PAGE = 100
READ_RETRY_ATTEMPTS = 3
READ_RETRY_BACKOFF = 0.5

PERMISSION_WARNING = (
    "Unable to write summary to pull-request. Make sure you are giving "
    "this workflow the permission 'pull-requests: write'."
)
UNEXPECTED_ERROR_WARNING = "Unable to comment summary to pull-request: Unexpected fatal error"
NOT_IN_PULL_REQUEST_WARNING = "Not in the context of a pull request. Skipping comment creation."
