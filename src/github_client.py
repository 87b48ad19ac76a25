#!/usr/bin/env python3
"""
GitHub client utilities
"""

from typing import Dict, List, Optional, Tuple

from github import Auth, Github, GithubRetry
from github.Issue import Issue

from constants import COMMENTS_PER_PAGE, DEFAULT_API_URL, READ_RETRY_ATTEMPTS, READ_RETRY_BACKOFF
from models import Comment


def read_retry_policy() -> GithubRetry:
    """Retry reads on transient failures, never the writes"""
    return GithubRetry(
        total=READ_RETRY_ATTEMPTS,
        backoff_factor=READ_RETRY_BACKOFF,
        allowed_methods=frozenset({"GET"}),
    )


class GitHubClient:
    """Issue comment operations for one repository"""

    def __init__(self, github_token: str, repository: str, per_page: int = COMMENTS_PER_PAGE,
                 base_url: str = DEFAULT_API_URL):
        self.repository = repository
        self.per_page = per_page
        self.github = Github(
            auth=Auth.Token(github_token),
            base_url=base_url.rstrip("/"),
            per_page=per_page,
            retry=read_retry_policy(),
        )
        self._repo = None
        self._issues: Dict[int, Issue] = {}

    def _get_repo(self):
        if self._repo is None:
            self._repo = self.github.get_repo(self.repository)
        return self._repo

    def _get_issue(self, pull_request_number: int) -> Issue:
        # Pull request comments live on the issue with the same number
        if pull_request_number not in self._issues:
            self._issues[pull_request_number] = self._get_repo().get_issue(pull_request_number)
        return self._issues[pull_request_number]

    def list_comments_page(self, pull_request_number: int, cursor: int) -> Tuple[List[Comment], Optional[int]]:
        """Fetch one page of comments (0-based) in the API's default order"""
        page = self._get_issue(pull_request_number).get_comments().get_page(cursor)
        comments = [Comment(id=c.id, body=c.body) for c in page]
        next_cursor = cursor + 1 if len(comments) >= self.per_page else None
        return comments, next_cursor

    def update_comment(self, pull_request_number: int, comment_id: int, body: str) -> None:
        """Replace the body of an existing comment on the pull request"""
        comment = self._get_issue(pull_request_number).get_comment(comment_id)
        comment.edit(body)
        print(f"Updated existing comment {comment_id} on {self.repository}")

    def create_comment(self, pull_request_number: int, body: str) -> None:
        """Post a new comment on the pull request"""
        self._get_issue(pull_request_number).create_comment(body)
        print(f"Created new comment on PR #{pull_request_number}")
