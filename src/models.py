#!/usr/bin/env python3
"""
Data models for the PR summary comment action
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class RunContext:
    """Where the action is running and how the run is going"""
    owner: str
    repo: str
    pull_request_number: Optional[int] = None
    run_failed: bool = False

    @property
    def repository(self) -> str:
        return f"{self.owner}/{self.repo}"

    @property
    def in_pull_request(self) -> bool:
        return self.pull_request_number is not None


@dataclass
class ActionConfig:
    """Action inputs"""
    comment_summary_in_pr: str
    repo_token: str
    summary_file: str
    min_summary_file: str = ""


@dataclass
class Comment:
    """An issue comment as seen while scanning a pull request"""
    id: int
    body: Optional[str] = None


@dataclass
class PermissionDenied:
    """The token is not allowed to write comments"""
    message: str = ""


@dataclass
class TransportFailure:
    """An error that came with a message worth passing on"""
    message: str


@dataclass
class UnknownFailure:
    """An error with nothing to say about itself"""
    error: Optional[BaseException] = None
