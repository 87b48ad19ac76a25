#!/usr/bin/env python3
"""
Keeps a single marker-tagged summary comment on a pull request
"""

from typing import Optional, Union

import requests
from github import GithubException

import actions
from constants import (
    COMMENT_MARKER,
    COMMENT_SEPARATOR,
    MAX_COMMENT_LENGTH,
    PERMISSION_WARNING,
    UNEXPECTED_ERROR_WARNING,
)
from models import PermissionDenied, TransportFailure, UnknownFailure
from pagination import find_first

WriteFailure = Union[PermissionDenied, TransportFailure, UnknownFailure]


def compose_comment_body(rendered_body: str, fallback_body: str, marker: str = COMMENT_MARKER) -> str:
    """Build the body to submit, swapping in the fallback when the full one is too long"""
    comment_body = f"{rendered_body}{COMMENT_SEPARATOR}{marker}"
    if len(comment_body) >= MAX_COMMENT_LENGTH:
        actions.debug("The comment was too big for the GitHub API. Falling back on a minimum comment")
        comment_body = f"{fallback_body}{COMMENT_SEPARATOR}{marker}"
    return comment_body


def _github_message(error: GithubException) -> str:
    data = error.data
    if isinstance(data, dict) and data.get("message"):
        return f"{error.status} {data['message']}"
    return str(error)


def classify_failure(error: Exception) -> WriteFailure:
    """Sort an exception raised while talking to GitHub into a failure kind"""
    if isinstance(error, GithubException):
        if error.status == 403:
            return PermissionDenied(_github_message(error))
        return TransportFailure(_github_message(error))
    if isinstance(error, (requests.exceptions.RequestException, OSError)):
        return TransportFailure(str(error) or error.__class__.__name__)
    if str(error):
        return TransportFailure(str(error))
    return UnknownFailure(error)


def report_failure(failure: WriteFailure) -> None:
    if isinstance(failure, PermissionDenied):
        actions.debug(f"GitHub refused the write: {failure.message}")
        actions.warning(PERMISSION_WARNING)
    elif isinstance(failure, TransportFailure):
        actions.warning(f"Unable to comment summary to pull-request, received error: {failure.message}")
    else:
        actions.debug(f"Comment failed with {failure.error!r}")
        actions.warning(UNEXPECTED_ERROR_WARNING)


class CommentReconciler:
    """Updates the managed comment if there is one, creates it otherwise"""

    def __init__(self, client, marker: str = COMMENT_MARKER):
        self.client = client
        self.marker = marker

    def find_comment_by_marker(self, pull_request_number: int, marker: Optional[str] = None) -> Optional[int]:
        """Id of the first comment containing marker, scanning pages in listing order"""
        marker = marker or self.marker

        def list_page(cursor):
            return self.client.list_comments_page(pull_request_number, cursor)

        comment = find_first(list_page, lambda c: c.body is not None and marker in c.body)
        return comment.id if comment is not None else None

    def write(self, pull_request_number: int, comment_body: str) -> Optional[WriteFailure]:
        """Locate the existing comment and issue exactly one update or create"""
        try:
            existing_comment_id = self.find_comment_by_marker(pull_request_number)
            if existing_comment_id is not None:
                self.client.update_comment(pull_request_number, existing_comment_id, comment_body)
            else:
                self.client.create_comment(pull_request_number, comment_body)
        except Exception as e:
            return classify_failure(e)
        return None

    def reconcile(self, rendered_body: str, fallback_body: str, pull_request_number: int) -> None:
        """Post or refresh the summary comment; failures end as warnings"""
        comment_body = compose_comment_body(rendered_body, fallback_body, self.marker)

        failure = self.write(pull_request_number, comment_body)
        if failure is not None:
            report_failure(failure)
