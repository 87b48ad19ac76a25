#!/usr/bin/env python3
"""
Decides whether a summary comment should be attempted this run
"""

import actions
from constants import NOT_IN_PULL_REQUEST_WARNING, POLICY_ALWAYS, POLICY_ON_FAILURE
from models import RunContext


def policy_allows(policy: str, run_failed: bool) -> bool:
    return policy == POLICY_ALWAYS or (policy == POLICY_ON_FAILURE and run_failed)


def should_comment(policy: str, run_failed: bool, in_pull_request_context: bool) -> bool:
    """Pure decision: comment iff the policy allows it and there is a PR to comment on"""
    return policy_allows(policy, run_failed) and in_pull_request_context


def gate(policy: str, context: RunContext) -> bool:
    """Run the context check, then the policy check

    Only the missing pull request is worth a warning; a policy that
    says no is a silent skip.
    """
    if not context.in_pull_request:
        actions.warning(NOT_IN_PULL_REQUEST_WARNING)
        return False

    return policy_allows(policy, context.run_failed)
