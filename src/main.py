#!/usr/bin/env python3
"""
PR Summary Comment - posts the review summary on the pull request, updating it in place
"""

import os
import sys
from typing import Optional

import actions
import config
from constants import COMMENT_CONTENT_OUTPUT, DEFAULT_API_URL
from github_client import GitHubClient
from models import ActionConfig, RunContext
from policy import gate
from reconciler import CommentReconciler


def read_text(path: str) -> str:
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def default_min_summary(context: RunContext) -> str:
    """One-line summary used when no min-summary-file is given"""
    server = os.getenv("GITHUB_SERVER_URL", "https://github.com").rstrip("/")
    run_id = os.getenv("GITHUB_RUN_ID")
    if run_id:
        run_url = f"{server}/{context.repository}/actions/runs/{run_id}"
        return f"The summary is too large to display here. See the [workflow run]({run_url}) for the full report."
    return "The summary is too large to display here. See the workflow run for the full report."


class CommentSummary:
    """Main class for posting the summary comment"""

    def __init__(self, action_config: Optional[ActionConfig] = None, context: Optional[RunContext] = None):
        self.config = action_config or config.load_config()
        self.context = context or config.load_context()

    def run(self) -> None:
        """Main execution method"""
        print(f"🔍 Preparing summary comment for {self.context.repository}")

        if not gate(self.config.comment_summary_in_pr, self.context):
            return

        comment_content = read_text(self.config.summary_file)
        if self.config.min_summary_file:
            min_comment = read_text(self.config.min_summary_file)
        else:
            min_comment = default_min_summary(self.context)

        actions.set_output(COMMENT_CONTENT_OUTPUT, comment_content)

        if not self.config.repo_token:
            raise ValueError("Input required and not supplied: repo-token")

        client = GitHubClient(
            self.config.repo_token,
            self.context.repository,
            base_url=os.getenv("GITHUB_API_URL") or DEFAULT_API_URL,
        )
        reconciler = CommentReconciler(client)

        print(f"💬 Posting summary comment on PR #{self.context.pull_request_number}...")
        reconciler.reconcile(comment_content, min_comment, self.context.pull_request_number)
        print("✅ Done")


def main():
    """Entry point for the summary comment action"""
    try:
        CommentSummary().run()
    except Exception as e:
        print(f"❌ PR summary comment failed: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
