#!/usr/bin/env python3
"""
Configuration and execution context for the PR summary comment action
"""

import json
import os
from typing import Optional

import actions
from constants import POLICY_ALWAYS, POLICY_NEVER
from models import ActionConfig, RunContext

_BOOLEAN_POLICIES = {
    "true": POLICY_ALWAYS,
    "false": POLICY_NEVER,
}


def normalize_policy(value: str) -> str:
    """Map the comment-summary-in-pr input onto a policy name

    Booleans are accepted for backwards compatibility, anything else
    is passed through and left to the policy gate to judge.
    """
    value = (value or "").strip()
    if not value:
        return POLICY_NEVER
    return _BOOLEAN_POLICIES.get(value.lower(), value)


def parse_bool(value: str) -> bool:
    return (value or "").strip().lower() in ("true", "1", "yes")


def load_config() -> ActionConfig:
    """Read the action inputs"""
    return ActionConfig(
        comment_summary_in_pr=normalize_policy(actions.get_input("comment-summary-in-pr")),
        repo_token=actions.get_input("repo-token"),
        summary_file=actions.get_input("summary-file", required=True),
        min_summary_file=actions.get_input("min-summary-file"),
    )


def _load_event() -> dict:
    event_path = os.getenv("GITHUB_EVENT_PATH")
    if not event_path or not os.path.exists(event_path):
        return {}
    with open(event_path, "r", encoding="utf-8") as f:
        return json.load(f)


def pull_request_number(event: dict) -> Optional[int]:
    """PR number from an event payload, None outside pull request events"""
    pull_request = event.get("pull_request")
    if not isinstance(pull_request, dict):
        return None
    number = pull_request.get("number")
    return number if isinstance(number, int) else None


def run_failed() -> bool:
    """Whether an earlier step already failed this run"""
    explicit = actions.get_input("run-failed")
    if explicit:
        return parse_bool(explicit)
    return actions.get_input("job-status").lower() == "failure"


def load_context() -> RunContext:
    """Build the run context from the runner environment"""
    repository = os.getenv("GITHUB_REPOSITORY", "")
    if "/" not in repository:
        raise ValueError("GITHUB_REPOSITORY not set or invalid")
    owner, repo = repository.split("/", 1)

    return RunContext(
        owner=owner,
        repo=repo,
        pull_request_number=pull_request_number(_load_event()),
        run_failed=run_failed(),
    )
